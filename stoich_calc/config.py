"""Runtime settings, read from the environment with safe defaults."""

import logging
import os


def _env(key, default=""):
    v = os.getenv(key)
    return default if v is None else str(v).strip()


def _env_int(key, default):
    v = os.getenv(key)
    if v is None or str(v).strip() == "":
        return default
    try:
        return int(str(v).strip())
    except ValueError:
        return default


LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()

# Display precision for amounts (g, mol) and for molar masses (g/mol)
DECIMALS = _env_int("STOICH_DECIMALS", 4)
MOLAR_MASS_DECIMALS = _env_int("STOICH_MOLAR_MASS_DECIMALS", 3)

DEFAULT_EQUATION = _env("STOICH_DEFAULT_EQUATION", "2H2 + O2 -> 2H2O")


def configure_logging(level=None):
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
