import pytest

from fleet.domain import rules
from fleet.web import masks


def test_only_digits_strips_punctuation():
    assert rules.only_digits("123.456.789-01") == "12345678901"
    assert rules.only_digits(None) == ""


@pytest.mark.parametrize("name,ok", [("Jo", False), ("Jo Silva", True), ("Zoë Ângela", True), ("R2D2 Unit", False)])
def test_check_name(name, ok):
    assert (rules.check_name(name) == []) is ok


def test_short_name_reports_length_first():
    assert rules.check_name("J1")[0] == rules.NAME_TOO_SHORT


def test_cpf_counts_digits_only():
    assert rules.check_cpf("123.456.789-0") == [rules.CPF_LENGTH]
    assert rules.check_cpf("123.456.789-01") == []


@pytest.mark.parametrize("phone,ok", [("123", False), ("(11) 2345-6789", True), ("+11 98765 4321", True), ("119876543210", False)])
def test_check_phone(phone, ok):
    assert (rules.check_phone(phone) == []) is ok


def test_categories():
    assert rules.check_categories([]) == [rules.CATEGORY_REQUIRED]
    assert rules.check_categories(["B"]) == []
    assert rules.check_categories(["B", "Z"]) == ["Unknown category: Z"]
    assert rules.split_categories(" B , C1E ,") == ["B", "C1E"]
    assert rules.join_categories(["B", "C"]) == "B,C"


def test_masks():
    assert masks.mask_cpf("12345678901") == "123.456.789-01"
    assert masks.mask_cpf("1234") == "123.4"
    assert masks.mask_phone("1123456789") == "(11) 2345-6789"
    assert masks.mask_phone("11987654321") == "(11) 98765-4321"
    assert masks.mask_cnh("987.654.321-00") == "98765432100"
    assert masks.apply_mask("", masks.CPF_MASK) == ""
