import logging
from dataclasses import asdict, dataclass
from typing import Optional

from .balance import check_balance, validate_equation
from .elements import PERIODIC_TABLE
from .equation import parse_equation
from .errors import InvalidEquationError, UnbalancedEquationError
from .mass import mass_to_moles, molar_mass, moles_to_mass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReactantInput:
    formula: str
    mass: Optional[float] = None
    moles: Optional[float] = None
    purity: Optional[float] = None

    def __post_init__(self):
        if self.mass is None and self.moles is None:
            raise ValueError(f"Reactant {self.formula} needs a mass or an amount in moles")


@dataclass(frozen=True)
class ActualProduct:
    formula: str
    mass: Optional[float] = None
    moles: Optional[float] = None

    def __post_init__(self):
        if self.mass is None and self.moles is None:
            raise ValueError(f"Product {self.formula} needs a mass or an amount in moles")


@dataclass(frozen=True)
class NormalizedReactant:
    formula: str
    moles: float
    purity: float
    initial_mass: float

    @property
    def effective_moles(self):
        return self.moles * (self.purity / 100)


@dataclass(frozen=True)
class LimitingReagentResult:
    formula: str
    effective_moles: float
    ratio: float
    coefficient: int = 1
    molar_mass: float = 0.0


@dataclass(frozen=True)
class ExcessResult:
    formula: str
    moles_initial: float
    moles_used: float
    moles_remaining: float
    mass_remaining: float
    molar_mass: float = 0.0


@dataclass(frozen=True)
class ProductYield:
    formula: str
    coefficient: int
    moles_theoretical: float
    mass_theoretical: float
    molar_mass: float = 0.0


@dataclass(frozen=True)
class StoichiometryResult:
    limiting: LimitingReagentResult
    excess: tuple = ()
    products: tuple = ()
    percent_yield: Optional[float] = None
    reactants: tuple = ()

    def __post_init__(self):
        for name in ("excess", "products", "reactants"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def product(self, formula):
        return next((p for p in self.products if p.formula == formula), None)

    def to_dict(self):
        return asdict(self)


def normalize_reactants(reactants, table=PERIODIC_TABLE):
    normalized = []
    for r in reactants:
        moles = r.moles
        if moles is None:
            moles = mass_to_moles(r.mass, r.formula, table)
        purity = r.purity or 100
        initial_mass = r.mass or moles_to_mass(moles, r.formula, table)
        normalized.append(NormalizedReactant(r.formula, moles, purity, initial_mass))
    return normalized


def find_limiting_reagent(parsed, reactants, table=PERIODIC_TABLE):
    """
    Pick the reactant with the smallest effective_moles / coefficient.

    Coefficients are matched by formula text; a reactant missing from the
    equation counts with coefficient 1. On a tie the first reactant wins.
    """
    limiting = None
    for r in reactants:
        compound = parsed.find_reactant(r.formula)
        if compound is None:
            logger.warning("Reactant %s does not appear in the equation, using coefficient 1", r.formula)
        coefficient = compound.coefficient if compound else 1
        ratio = r.effective_moles / coefficient
        if limiting is None or ratio < limiting.ratio:
            limiting = LimitingReagentResult(r.formula, r.effective_moles, ratio, coefficient)

    if limiting is None:
        return None
    logger.debug("Limiting reagent %s (ratio %.6g)", limiting.formula, limiting.ratio)
    return LimitingReagentResult(
        limiting.formula,
        limiting.effective_moles,
        limiting.ratio,
        limiting.coefficient,
        molar_mass(limiting.formula, table),
    )


def compute_excess(parsed, reactants, limiting, table=PERIODIC_TABLE):
    excess = []
    for r in reactants:
        if r.formula == limiting.formula:
            continue
        compound = parsed.find_reactant(r.formula)
        if compound is None:
            continue

        used = limiting.ratio * compound.coefficient
        remaining = r.effective_moles - used
        if remaining < 0:
            logger.warning("Excess reactant %s ends below zero (%.6g mol)", r.formula, remaining)
        excess.append(ExcessResult(
            r.formula,
            r.effective_moles,
            used,
            remaining,
            moles_to_mass(remaining, r.formula, table),
            molar_mass(r.formula, table),
        ))
    return excess


def theoretical_yields(parsed, limiting, table=PERIODIC_TABLE):
    yields = []
    for p in parsed.products:
        moles = limiting.ratio * p.coefficient
        yields.append(ProductYield(
            p.formula,
            p.coefficient,
            moles,
            moles_to_mass(moles, p.formula, table),
            molar_mass(p.formula, table),
        ))
    return yields


def percent_yield(actual_mass, theoretical_mass):
    if theoretical_mass == 0:
        return 0.0
    return (actual_mass / theoretical_mass) * 100


def _actual_percent_yield(actual, products, table):
    theoretical = next((p for p in products if p.formula == actual.formula), None)
    if theoretical is None:
        logger.warning("No theoretical yield for %s, skipping percent yield", actual.formula)
        return None

    actual_mass = actual.mass
    if actual_mass is None:
        actual_mass = moles_to_mass(actual.moles, actual.formula, table)

    result = percent_yield(actual_mass, theoretical.mass_theoretical)
    if result > 100:
        logger.warning("Percent yield for %s is %.2f%%, above 100%%", actual.formula, result)
    return result


def calculate_stoichiometry(equation, reactants, actual_product=None, table=PERIODIC_TABLE):
    """Run the full calculation for a balanced ``equation``.

    ``reactants`` is a sequence of ReactantInput and ``actual_product`` an
    optional ActualProduct used for the percent yield.

    Raises InvalidEquationError for bad syntax or unknown elements,
    UnbalancedEquationError when atoms do not balance, and ValueError when
    no reactant data is given. Nothing is raised after these checks.
    """
    validation = validate_equation(equation, table)
    if not validation.valid:
        raise InvalidEquationError(validation.error)

    balance = check_balance(equation)
    if not balance.balanced:
        elements = ', '.join(
            f"{elem} ({d.reactant_count} vs {d.product_count})"
            for elem, d in balance.details.items() if not d.balanced
        )
        raise UnbalancedEquationError(f"The equation is not balanced: {elements}", balance)

    if not reactants:
        raise ValueError("At least one reactant amount is required")

    parsed = parse_equation(equation)
    normalized = normalize_reactants(reactants, table)
    limiting = find_limiting_reagent(parsed, normalized, table)
    excess = compute_excess(parsed, normalized, limiting, table)
    products = theoretical_yields(parsed, limiting, table)

    percent = None
    if actual_product is not None:
        percent = _actual_percent_yield(actual_product, products, table)

    return StoichiometryResult(limiting, excess, products, percent, normalized)
