from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from .elements import PERIODIC_TABLE
from .equation import parse_equation
from .errors import StoichiometryError
from .formula import parse_formula


@dataclass(frozen=True)
class BalanceDetail:
    reactant_count: int
    product_count: int
    balanced: bool


@dataclass(frozen=True)
class BalanceResult:
    balanced: bool
    details: MappingProxyType = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    def __hash__(self):
        return hash((self.balanced, tuple(self.details.items())))

    def unbalanced_elements(self):
        return [elem for elem, d in self.details.items() if not d.balanced]


@dataclass(frozen=True)
class ElementValidation:
    valid: bool
    invalid_symbols: tuple = ()
    error: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "invalid_symbols", tuple(self.invalid_symbols))


@dataclass(frozen=True)
class EquationValidation:
    valid: bool
    error: Optional[str] = None


def count_atoms(compounds):
    totals = {}
    for compound in compounds:
        for elem, count in compound.elements.items():
            totals[elem] = totals.get(elem, 0) + count * compound.coefficient
    return totals


def check_balance(equation):
    parsed = parse_equation(equation)
    left = count_atoms(parsed.reactants)
    right = count_atoms(parsed.products)

    details = {}
    for elem in dict.fromkeys([*left, *right]):
        r = left.get(elem, 0)
        p = right.get(elem, 0)
        details[elem] = BalanceDetail(r, p, r == p)

    return BalanceResult(all(d.balanced for d in details.values()), details)


def validate_elements(formula, table=PERIODIC_TABLE):
    try:
        elements = parse_formula(formula)
    except StoichiometryError as e:
        return ElementValidation(False, (), str(e))

    invalid = [symbol for symbol in elements if symbol not in table]
    return ElementValidation(not invalid, invalid)


def _check_compound(compound, table):
    if not compound.formula.strip():
        return "Empty compound term: check for a stray '+'"
    if compound.coefficient <= 0:
        return f"Coefficient must be a positive integer: {compound.coefficient}{compound.formula}"
    validation = validate_elements(compound.formula, table)
    if validation.error:
        return validation.error
    if not validation.valid:
        return f"Unrecognized element(s): {', '.join(validation.invalid_symbols)}"
    return None


def validate_equation(equation, table=PERIODIC_TABLE):
    """
    Check syntax and element symbols of ``equation`` without raising.

    Balance is not checked here, see check_balance.
    """
    try:
        parsed = parse_equation(equation)
    except StoichiometryError as e:
        return EquationValidation(False, str(e))

    if not parsed.reactants:
        return EquationValidation(False, "The equation must have at least one reactant.")
    if not parsed.products:
        return EquationValidation(False, "The equation must have at least one product.")

    for compound in parsed.reactants + parsed.products:
        error = _check_compound(compound, table)
        if error:
            return EquationValidation(False, error)

    return EquationValidation(True)
