import pytest

from contacts_api.utils.cpf import has_only_cpf_characters, normalize_cpf


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("123.456.789-00", "12345678900"),
        (" 123 456 789 00 ", "12345678900"),
        ("12.345.678/0001-90", "12345678000190"),
        ("abc1d2", "12"),
        ("", ""),
        ("./- ", ""),
        (None, ""),
    ],
)
def test_normalize_cpf_keeps_only_digits(raw, expected) -> None:
    assert normalize_cpf(raw) == expected


def test_normalize_cpf_is_idempotent() -> None:
    once = normalize_cpf("987.654.321-00")
    assert normalize_cpf(once) == once == "98765432100"


def test_normalize_cpf_ignores_non_ascii_digits() -> None:
    # Arabic-Indic digits are not part of a CPF
    assert normalize_cpf("١٢٣-45") == "45"


@pytest.mark.parametrize("raw", ["123.456.789-00", "123 456 789 00", "12/34", "", "12345678900"])
def test_accepts_digits_and_punctuation(raw) -> None:
    assert has_only_cpf_characters(raw)


@pytest.mark.parametrize("raw", ["123.456.789-0a", "123_456", "+5511", "12,34"])
def test_rejects_letters_and_other_symbols(raw) -> None:
    assert not has_only_cpf_characters(raw)
