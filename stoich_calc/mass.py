import math

from .elements import PERIODIC_TABLE
from .errors import UnknownElementError
from .formula import parse_formula


def molar_mass(formula, table=PERIODIC_TABLE):
    total = 0.0
    for symbol, count in parse_formula(formula).items():
        if symbol not in table:
            raise UnknownElementError(symbol)
        total += table.atomic_mass(symbol) * count
    return total


def _divide(a, b):
    # float semantics: x/0 -> inf, 0/0 -> nan
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a)
    return a / b


def mass_to_moles(mass, formula, table=PERIODIC_TABLE):
    return _divide(mass, molar_mass(formula, table))


def moles_to_mass(moles, formula, table=PERIODIC_TABLE):
    return moles * molar_mass(formula, table)


def composition(formula, table=PERIODIC_TABLE):
    """Mass percent of each element in ``formula``."""
    total = molar_mass(formula, table)
    return {
        symbol: _divide(table.atomic_mass(symbol) * count * 100.0, total)
        for symbol, count in parse_formula(formula).items()
    }
