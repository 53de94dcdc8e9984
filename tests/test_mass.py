import math

import pytest

from stoich_calc import (
    PERIODIC_TABLE,
    ElementTable,
    UnknownElementError,
    composition,
    mass_to_moles,
    molar_mass,
    moles_to_mass,
)


def test_table_has_all_elements():
    assert len(PERIODIC_TABLE) == 118
    assert PERIODIC_TABLE["Og"].atomic_number == 118
    assert PERIODIC_TABLE.name("Fe") == "Iron"
    assert PERIODIC_TABLE.name("Xx") == "Xx"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        PERIODIC_TABLE["Xx"] = None


def test_molar_mass_water():
    assert molar_mass("H2O") == pytest.approx(18.015, abs=1e-3)


def test_molar_mass_groups():
    assert molar_mass("Ca(OH)2") == pytest.approx(74.092, abs=1e-3)
    assert molar_mass("Al2(SO4)3") == pytest.approx(342.14, abs=1e-2)


def test_molar_mass_unknown_element():
    with pytest.raises(UnknownElementError) as excinfo:
        molar_mass("Xx2O")
    assert excinfo.value.symbol == "Xx"
    assert str(excinfo.value) == "Unrecognized element: Xx"


def test_molar_mass_with_injected_table():
    table = ElementTable.from_masses({"A": 2.0, "B": 5.0})
    assert molar_mass("A2B3", table=table) == pytest.approx(19.0)
    with pytest.raises(UnknownElementError):
        molar_mass("H2O", table=table)


def test_conversions():
    assert mass_to_moles(36.03, "H2O") == pytest.approx(2.0, rel=1e-3)
    assert moles_to_mass(2, "H2O") == pytest.approx(36.03, abs=1e-2)


@pytest.mark.parametrize("formula", ["H2O", "Fe2O3", "C6H12O6", "Ca(OH)2"])
def test_round_trip(formula):
    assert moles_to_mass(mass_to_moles(12.5, formula), formula) == pytest.approx(12.5)


def test_empty_formula_conversion():
    assert molar_mass("") == 0.0
    assert math.isinf(mass_to_moles(5.0, ""))
    assert math.isnan(mass_to_moles(0.0, ""))


def test_composition_sums_to_100():
    percents = composition("H2O")
    assert percents["O"] == pytest.approx(88.81, abs=1e-2)
    assert sum(percents.values()) == pytest.approx(100.0)


@pytest.mark.parametrize("symbol, weight", [
    ("H", 1.008), ("C", 12.011), ("N", 14.007), ("O", 15.999), ("Na", 22.990),
    ("S", 32.06), ("Cl", 35.45), ("Ca", 40.078), ("Fe", 55.845), ("Cu", 63.546),
    ("Ag", 107.87), ("I", 126.90), ("Au", 196.97), ("Pb", 207.2), ("U", 238.03),
])
def test_standard_atomic_weights(symbol, weight):
    assert PERIODIC_TABLE.atomic_mass(symbol) == pytest.approx(weight)


def test_atomic_numbers_follow_table_order():
    assert [e.atomic_number for e in PERIODIC_TABLE.values()] == list(range(1, 119))
    assert PERIODIC_TABLE["Fe"].atomic_number == 26
    assert PERIODIC_TABLE["Sn"].atomic_number == 50
    assert all(e.atomic_mass > 0 for e in PERIODIC_TABLE.values())
