"""
Validação, formatação e geração de CPF.

O CPF tem 11 dígitos, sendo os dois últimos dígitos verificadores calculados
a partir dos 9 primeiros (soma ponderada módulo 11).
"""

import random
import re
from typing import Optional

from validador.documents.errors import FormatError

CPF_LENGTH = 11
FIRST_DIGIT_WEIGHT = 10
SECOND_DIGIT_WEIGHT = 11
DIVISOR = 11

_NON_DIGITS_RE = re.compile(r"\D", re.ASCII)
_MASKED_RE = re.compile(r"\d{3}\.\d{3}\.\d{3}-\d{2}", re.ASCII)
_UNMASKED_RE = re.compile(r"\d{11}", re.ASCII)
# Prefixo parcial da máscara, digitado da esquerda para a direita
_PARTIAL_RE = re.compile(r"\d{0,3}(\.\d{0,3})?(\.\d{0,3})?(-\d{0,2})?", re.ASCII)


def unmask(cpf: Optional[str]) -> str:
    """Remove tudo que não for dígito. Exemplo: '529.982.247-25' -> '52998224725'"""
    return _NON_DIGITS_RE.sub("", cpf or "")


def calculate_check_digit(digits: str, start_weight: int) -> int:
    """
    Calcula um dígito verificador do CPF.

    Args:
        digits: Dígitos já conhecidos (9 para o 1º DV, 10 para o 2º DV)
        start_weight: Peso da primeira posição, decrescendo uma unidade por posição

    Returns:
        Dígito verificador (0-9)
    """
    total = sum(int(d) * (start_weight - i) for i, d in enumerate(digits))
    remainder = total % DIVISOR
    return 0 if remainder < 2 else DIVISOR - remainder


def validate(cpf: Optional[str]) -> bool:
    """
    Valida CPF pelo algoritmo dos dígitos verificadores.
    Aceita com ou sem máscara.
    """
    digits = unmask(cpf)
    if len(digits) != CPF_LENGTH:
        return False
    # Sequências repetidas (000.000.000-00, 111...) passam no cálculo mas são inválidas
    if digits == digits[0] * CPF_LENGTH:
        return False

    first = calculate_check_digit(digits[:9], FIRST_DIGIT_WEIGHT)
    second = calculate_check_digit(digits[:10], SECOND_DIGIT_WEIGHT)
    return int(digits[9]) == first and int(digits[10]) == second


def mask(cpf: Optional[str]) -> str:
    """
    Formata o CPF no padrão NNN.NNN.NNN-NN.

    Raises:
        FormatError: Se o CPF não tiver 11 dígitos
    """
    digits = unmask(cpf)
    if len(digits) != CPF_LENGTH:
        raise FormatError("CPF", CPF_LENGTH, len(digits))
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def generate(rng: Optional[random.Random] = None) -> str:
    """Gera um CPF válido (sem máscara) a partir de 9 dígitos aleatórios."""
    source = rng or random
    while True:
        partial = "".join(str(source.randint(0, 9)) for _ in range(9))
        # Base com um único dígito repetido gera uma sequência sempre inválida
        if partial != partial[0] * 9:
            break
    partial += str(calculate_check_digit(partial, FIRST_DIGIT_WEIGHT))
    partial += str(calculate_check_digit(partial, SECOND_DIGIT_WEIGHT))
    return partial


def is_valid_format(cpf: Optional[str]) -> bool:
    """
    Verifica se o texto tem formato de CPF: com máscara, só dígitos,
    ou um prefixo parcial da máscara (campo sendo digitado).
    """
    if cpf is None:
        return False
    return bool(
        _MASKED_RE.fullmatch(cpf)
        or _UNMASKED_RE.fullmatch(cpf)
        or _PARTIAL_RE.fullmatch(cpf)
    )
