import math
import re

from . import config

_DIGITS = re.compile(r'(\d+)')
_SUBSCRIPTS = str.maketrans('0123456789', '₀₁₂₃₄₅₆₇₈₉')


def format_number(value, decimals=None):
    if decimals is None:
        decimals = config.DECIMALS
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return '-'
    return f"{value:.{decimals}f}"


def formula_to_html(formula):
    return _DIGITS.sub(r'<sub>\1</sub>', formula)


def formula_to_unicode(formula):
    # H2O -> H₂O
    return formula.translate(_SUBSCRIPTS)


def yield_warning(percent):
    if percent is not None and percent > 100:
        return "Percent yield cannot exceed 100%. Check the amounts entered."
    return None
