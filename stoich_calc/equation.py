import logging
from dataclasses import dataclass

from .errors import EquationSyntaxError
from .formula import parse_compound

logger = logging.getLogger(__name__)

ARROW = '->'
ARROW_VARIANTS = ('→', '=')


@dataclass(frozen=True)
class ParsedEquation:
    reactants: tuple
    products: tuple

    def coefficient_of(self, formula, default=1):
        for compound in self.reactants:
            if compound.formula == formula:
                return compound.coefficient
        return default

    def find_reactant(self, formula):
        return next((c for c in self.reactants if c.formula == formula), None)

    def find_product(self, formula):
        return next((c for c in self.products if c.formula == formula), None)


def normalize_arrow(text):
    for variant in ARROW_VARIANTS:
        text = text.replace(variant, ARROW)
    return text


def parse_equation(text):
    parts = normalize_arrow(text).split(ARROW)
    if len(parts) != 2:
        raise EquationSyntaxError("The equation must contain exactly one reaction arrow (->, → or =)")

    left, right = parts[0].strip(), parts[1].strip()
    if not left:
        raise EquationSyntaxError("The equation has no reactants before the arrow")
    if not right:
        raise EquationSyntaxError("The equation has no products after the arrow")

    reactants = tuple(parse_compound(c) for c in left.split('+'))
    products = tuple(parse_compound(c) for c in right.split('+'))
    logger.debug("Parsed %r into %d reactant(s) and %d product(s)", text, len(reactants), len(products))
    return ParsedEquation(reactants, products)
