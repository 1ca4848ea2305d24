"""
Validação, formatação e geração de CNPJ.

O CNPJ tem 14 dígitos; os dois últimos são verificadores, calculados com
tabelas de pesos fixas sobre os 12 e 13 primeiros dígitos.
"""

import random
import re
from typing import Optional, Sequence

from validador.documents.errors import FormatError

CNPJ_LENGTH = 14
FIRST_DIGIT_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_DIGIT_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
DIVISOR = 11

_NON_DIGITS_RE = re.compile(r"\D", re.ASCII)
_MASKED_RE = re.compile(r"\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2}", re.ASCII)
_UNMASKED_RE = re.compile(r"\d{14}", re.ASCII)
_PARTIAL_RE = re.compile(
    r"\d{0,2}(\.\d{0,3})?(\.\d{0,3})?(/\d{0,4})?(-\d{0,2})?", re.ASCII
)


def unmask(cnpj: Optional[str]) -> str:
    """Remove pontuação e espaços, mantendo apenas dígitos."""
    return _NON_DIGITS_RE.sub("", cnpj or "")


def calculate_check_digit(digits: str, weights: Sequence[int]) -> int:
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % DIVISOR
    return 0 if remainder < 2 else DIVISOR - remainder


def validate(cnpj: Optional[str]) -> bool:
    """Valida CNPJ (com ou sem máscara) pelos dígitos verificadores."""
    digits = unmask(cnpj)
    if len(digits) != CNPJ_LENGTH or digits == digits[0] * CNPJ_LENGTH:
        return False

    first = calculate_check_digit(digits[:12], FIRST_DIGIT_WEIGHTS)
    second = calculate_check_digit(digits[:13], SECOND_DIGIT_WEIGHTS)
    return int(digits[12]) == first and int(digits[13]) == second


def mask(cnpj: Optional[str]) -> str:
    """
    Formata o CNPJ no padrão NN.NNN.NNN/NNNN-NN.

    Raises:
        FormatError: Se o CNPJ não tiver 14 dígitos
    """
    digits = unmask(cnpj)
    if len(digits) != CNPJ_LENGTH:
        raise FormatError("CNPJ", CNPJ_LENGTH, len(digits))
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"


def generate(rng: Optional[random.Random] = None) -> str:
    source = rng or random
    while True:
        partial = "".join(str(source.randint(0, 9)) for _ in range(12))
        if partial != partial[0] * 12:
            break
    partial += str(calculate_check_digit(partial, FIRST_DIGIT_WEIGHTS))
    partial += str(calculate_check_digit(partial, SECOND_DIGIT_WEIGHTS))
    return partial


def is_valid_format(cnpj: Optional[str]) -> bool:
    """Aceita CNPJ mascarado, só dígitos ou prefixo parcial da máscara."""
    if cnpj is None:
        return False
    return bool(
        _MASKED_RE.fullmatch(cnpj)
        or _UNMASKED_RE.fullmatch(cnpj)
        or _PARTIAL_RE.fullmatch(cnpj)
    )
