"""
Testes para validação, formatação e geração de CPF.
"""

import random
from unittest.mock import Mock

import pytest

from validador.documents import cpf
from validador.documents.errors import FormatError


class TestValidate:
    """Testes para cpf.validate."""

    def test_valid_masked(self):
        assert cpf.validate("529.982.247-25") is True

    def test_valid_unmasked(self):
        assert cpf.validate("52998224725") is True

    def test_valid_with_noise(self):
        """Espaços e outros caracteres são ignorados."""
        assert cpf.validate(" 529 982 247 / 25 ") is True

    @pytest.mark.parametrize("digit", "0123456789")
    def test_repeated_digits_rejected(self, digit):
        """Sequências de um único dígito nunca são válidas."""
        assert cpf.validate(digit * 11) is False

    @pytest.mark.parametrize("value", ["", "5299822472", "529982247250", "abc"])
    def test_wrong_length(self, value):
        assert cpf.validate(value) is False

    def test_none(self):
        assert cpf.validate(None) is False

    def test_wrong_first_check_digit(self):
        assert cpf.validate("529.982.247-35") is False

    def test_wrong_second_check_digit(self):
        assert cpf.validate("529.982.247-24") is False

    def test_non_ascii_digits_are_stripped(self):
        """Dígitos não ASCII não contam como dígitos do CPF."""
        assert cpf.validate("٥٢٩.982.247-25") is False


class TestCheckDigit:
    """Testes da regra resto < 2 -> 0."""

    def test_remainder_zero(self):
        # 1*9 + 1*2 = 11 -> resto 0
        assert cpf.calculate_check_digit("010000001", 10) == 0

    def test_remainder_one(self):
        # 1*10 + 1*2 = 12 -> resto 1
        assert cpf.calculate_check_digit("100000001", 10) == 0

    def test_remainder_ten(self):
        # 1*10 = 10 -> resto 10 -> 11 - 10 = 1
        assert cpf.calculate_check_digit("100000000", 10) == 1

    def test_known_digits(self):
        assert cpf.calculate_check_digit("529982247", 10) == 2
        assert cpf.calculate_check_digit("5299822472", 11) == 5


class TestMask:
    """Testes para cpf.mask e cpf.unmask."""

    def test_mask(self):
        assert cpf.mask("52998224725") == "529.982.247-25"

    def test_mask_unmask_roundtrip(self):
        assert cpf.mask(cpf.unmask("52998224725")) == "529.982.247-25"
        assert cpf.validate(cpf.unmask(cpf.mask("529.982.247-25"))) is True

    def test_mask_already_masked(self):
        assert cpf.mask("529.982.247-25") == "529.982.247-25"

    @pytest.mark.parametrize("value", ["", "123", "529.982.247-250"])
    def test_mask_wrong_length_raises(self, value):
        with pytest.raises(FormatError, match="CPF deve ter 11 dígitos"):
            cpf.mask(value)

    def test_format_error_details(self):
        with pytest.raises(FormatError) as exc_info:
            cpf.mask("12.3")
        assert exc_info.value.expected == 11
        assert exc_info.value.received == 3
        assert isinstance(exc_info.value, ValueError)

    def test_unmask(self):
        assert cpf.unmask("529.982.247-25") == "52998224725"

    def test_unmask_without_length_check(self):
        assert cpf.unmask("1-2") == "12"
        assert cpf.unmask("") == ""
        assert cpf.unmask(None) == ""


class TestGenerate:
    """Testes para cpf.generate."""

    def test_generated_values_are_valid(self):
        rng = random.Random(1234)
        for _ in range(500):
            value = cpf.generate(rng)
            assert len(value) == 11
            assert value.isdigit()
            assert cpf.validate(value) is True

    def test_default_random_source(self):
        assert cpf.validate(cpf.generate()) is True

    def test_seeded_generation_is_deterministic(self):
        assert cpf.generate(random.Random(7)) == cpf.generate(random.Random(7))

    def test_mocked_random_source(self):
        """Com dígitos conhecidos, os verificadores são anexados ao final."""
        rng = Mock()
        rng.randint.side_effect = [5, 2, 9, 9, 8, 2, 2, 4, 7]
        assert cpf.generate(rng) == "52998224725"

    def test_repeated_base_digits_are_discarded(self):
        rng = Mock()
        rng.randint.side_effect = [1] * 9 + [5, 2, 9, 9, 8, 2, 2, 4, 7]
        assert cpf.generate(rng) == "52998224725"


class TestIsValidFormat:
    """Testes para cpf.is_valid_format."""

    @pytest.mark.parametrize(
        "value",
        ["123.456.789-00", "12345678900", "123.456", "123.", "123.456.789-0", "1", ""],
    )
    def test_accepted(self, value):
        assert cpf.is_valid_format(value) is True

    @pytest.mark.parametrize(
        "value", ["abc", "1234", "123-456", "123.456.789-001", "123.4567", None]
    )
    def test_rejected(self, value):
        assert cpf.is_valid_format(value) is False
