"""Stoichiometry for balanced chemical equations.

Parse formulas and reactions, verify balance, convert between mass and
moles, and find the limiting reagent, leftovers and theoretical yield.
"""

from .balance import (
    BalanceDetail,
    BalanceResult,
    ElementValidation,
    EquationValidation,
    check_balance,
    count_atoms,
    validate_elements,
    validate_equation,
)
from .elements import PERIODIC_TABLE, Element, ElementTable
from .engine import (
    ActualProduct,
    ExcessResult,
    LimitingReagentResult,
    NormalizedReactant,
    ProductYield,
    ReactantInput,
    StoichiometryResult,
    calculate_stoichiometry,
    compute_excess,
    find_limiting_reagent,
    normalize_reactants,
    percent_yield,
    theoretical_yields,
)
from .equation import ParsedEquation, parse_equation
from .errors import (
    EquationSyntaxError,
    FormulaSyntaxError,
    InvalidEquationError,
    StoichiometryError,
    UnbalancedEquationError,
    UnknownElementError,
)
from .formula import ParsedCompound, parse_compound, parse_formula
from .mass import composition, mass_to_moles, molar_mass, moles_to_mass

__version__ = "0.1.0"

__all__ = [
    "ActualProduct",
    "BalanceDetail",
    "BalanceResult",
    "Element",
    "ElementTable",
    "ElementValidation",
    "EquationSyntaxError",
    "EquationValidation",
    "ExcessResult",
    "FormulaSyntaxError",
    "InvalidEquationError",
    "LimitingReagentResult",
    "NormalizedReactant",
    "PERIODIC_TABLE",
    "ParsedCompound",
    "ParsedEquation",
    "ProductYield",
    "ReactantInput",
    "StoichiometryError",
    "StoichiometryResult",
    "UnbalancedEquationError",
    "UnknownElementError",
    "calculate_stoichiometry",
    "check_balance",
    "composition",
    "compute_excess",
    "count_atoms",
    "find_limiting_reagent",
    "mass_to_moles",
    "molar_mass",
    "moles_to_mass",
    "normalize_reactants",
    "parse_compound",
    "parse_equation",
    "parse_formula",
    "percent_yield",
    "theoretical_yields",
    "validate_elements",
    "validate_equation",
]
