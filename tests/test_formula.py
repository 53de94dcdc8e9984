import pytest

from stoich_calc import FormulaSyntaxError, parse_compound, parse_formula


def test_simple_formula():
    assert parse_formula("H2O") == {"H": 2, "O": 1}


def test_multi_letter_symbols_and_digits():
    assert parse_formula("C6H12O6") == {"C": 6, "H": 12, "O": 6}
    assert parse_formula("NaCl") == {"Na": 1, "Cl": 1}


def test_groups_multiply():
    assert parse_formula("Ca(OH)2") == {"Ca": 1, "O": 2, "H": 2}
    assert parse_formula("Al2(SO4)3") == {"Al": 2, "S": 3, "O": 12}


def test_nested_groups():
    assert parse_formula("K4(Fe(CN)6)") == {"K": 4, "Fe": 1, "C": 6, "N": 6}
    assert parse_formula("((CH3)2)3") == {"C": 6, "H": 18}


def test_redundant_grouping_is_invariant():
    assert parse_formula("(H2O)1") == parse_formula("H2O")
    assert parse_formula("(H2O)") == parse_formula("H2O")


def test_repeated_element_accumulates():
    assert parse_formula("CH3COOH") == {"C": 2, "H": 4, "O": 2}


def test_unknown_characters_are_skipped():
    assert parse_formula(" Na Cl ") == {"Na": 1, "Cl": 1}
    assert parse_formula("H2O!") == {"H": 2, "O": 1}


def test_unknown_symbols_are_kept():
    assert parse_formula("Xx2") == {"Xx": 2}


def test_unclosed_group_is_dropped():
    assert parse_formula("Ca(OH") == {"Ca": 1}


def test_unmatched_close_raises():
    with pytest.raises(FormulaSyntaxError):
        parse_formula("NaCl)")


def test_unmatched_close_is_value_error():
    with pytest.raises(ValueError):
        parse_formula(")2")


def test_empty_formula():
    assert parse_formula("") == {}


def test_parse_compound_with_coefficient():
    compound = parse_compound(" 2H2O ")
    assert compound.coefficient == 2
    assert compound.formula == "H2O"
    assert compound.elements == {"H": 2, "O": 1}


def test_parse_compound_default_coefficient():
    compound = parse_compound("Fe2O3")
    assert compound.coefficient == 1
    assert compound.formula == "Fe2O3"


def test_parse_compound_multi_digit_coefficient():
    assert parse_compound("12CO2").coefficient == 12


def test_parse_compound_empty():
    compound = parse_compound("   ")
    assert compound.coefficient == 1
    assert compound.formula == ""
    assert compound.elements == {}


def test_parse_compound_strips_space_after_coefficient():
    compound = parse_compound("2 H2O")
    assert compound.coefficient == 2
    assert compound.formula == "H2O"
    assert compound.elements == {"H": 2, "O": 1}


def test_zero_subscript_raises():
    with pytest.raises(FormulaSyntaxError):
        parse_formula("H0O")


def test_zero_group_multiplier_raises():
    with pytest.raises(FormulaSyntaxError):
        parse_formula("Ca(OH)0")


def test_subscript_with_leading_zero_is_positive():
    assert parse_formula("H02") == {"H": 2}


def test_parsed_compound_is_immutable_and_hashable():
    compound = parse_compound("2H2O")
    with pytest.raises(TypeError):
        compound.elements["H"] = 5
    assert hash(compound) == hash(parse_compound("2H2O"))
    assert compound == parse_compound(" 2 H2O ")
