import logging
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import FormulaSyntaxError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedCompound:
    coefficient: int
    formula: str
    elements: MappingProxyType = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "elements", MappingProxyType(dict(self.elements)))

    def __hash__(self):
        return hash((self.coefficient, self.formula, frozenset(self.elements.items())))


def _read_number(text, i):
    # Returns (value or None, index after the digits)
    n = len(text)
    start = i
    while i < n and text[i].isdigit():
        i += 1
    if i == start:
        return None, i
    return int(text[start:i]), i


def parse_formula(formula):
    """
    Count the atoms of every element in ``formula``.

    Parenthesised groups may be nested and take an optional multiplier,
    so "Al2(SO4)3" gives {"Al": 2, "S": 3, "O": 12}. Characters that are
    neither element tokens, digits nor parentheses are skipped. A group that
    is never closed is dropped from the result.

    Raises FormulaSyntaxError for a ')' without a matching '(' and for a
    written subscript or multiplier of 0.
    """
    stack = [{}]
    i = 0
    n = len(formula)
    while i < n:
        ch = formula[i]
        if ch == '(':
            stack.append({})
            i += 1
        elif ch == ')':
            if len(stack) == 1:
                raise FormulaSyntaxError(f"Unmatched ')' at position {i} in formula '{formula}'")
            multiplier, i = _read_number(formula, i + 1)
            if multiplier is None:
                multiplier = 1
            elif multiplier == 0:
                raise FormulaSyntaxError(f"Group multiplier must be positive in formula '{formula}'")
            group = stack.pop()
            outer = stack[-1]
            for elem, count in group.items():
                outer[elem] = outer.get(elem, 0) + count * multiplier
        elif ch.isupper():
            atom = ch
            i += 1
            while i < n and formula[i].islower():
                atom += formula[i]
                i += 1
            num, i = _read_number(formula, i)
            if num is None:
                num = 1
            elif num == 0:
                raise FormulaSyntaxError(f"Subscript of {atom} must be positive in formula '{formula}'")
            top = stack[-1]
            top[atom] = top.get(atom, 0) + num
        else:
            i += 1

    if len(stack) > 1:
        logger.debug("Dropping %d unclosed group(s) in %r", len(stack) - 1, formula)
    return stack[0]


def parse_compound(text):
    text = text.strip()
    coefficient, i = _read_number(text, 0)
    if coefficient is None:
        coefficient = 1
    formula = text[i:].strip()
    return ParsedCompound(coefficient, formula, parse_formula(formula))
