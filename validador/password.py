"""
Política de força de senha.

As regras são configuráveis via PasswordPolicy; a política padrão exige
entre 8 e 128 caracteres, letras maiúsculas e minúsculas, números e símbolos,
e rejeita sequências comuns e caracteres repetidos.
"""

import re
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class PasswordPolicy:
    """Regras de validação de senha."""

    min_length: int = 8
    max_length: Optional[int] = 128
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_symbols: bool = True
    prevent_sequential: bool = True
    prevent_repeating: bool = True


DEFAULT_POLICY = PasswordPolicy()

SEQUENTIAL_PATTERNS = ("123", "abc", "qwe", "asd", "zxc")

_UPPERCASE_RE = re.compile(r"[A-Z]")
_LOWERCASE_RE = re.compile(r"[a-z]")
_NUMBER_RE = re.compile(r"\d")
_SYMBOL_RE = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
_REPEATING_RE = re.compile(r"(.)\1{2,}")


def password_violations(
    password: str, policy: PasswordPolicy = DEFAULT_POLICY
) -> List[str]:
    """
    Lista as regras da política que a senha não cumpre.

    Args:
        password: Senha a verificar
        policy: Política aplicada (padrão: DEFAULT_POLICY)

    Returns:
        Lista de mensagens de violação (vazia se a senha for válida)
    """
    violations = []

    if len(password) < policy.min_length:
        violations.append(f"Senha deve ter pelo menos {policy.min_length} caracteres")
    if policy.max_length and len(password) > policy.max_length:
        violations.append(f"Senha deve ter no máximo {policy.max_length} caracteres")

    if policy.require_uppercase and not _UPPERCASE_RE.search(password):
        violations.append("Senha deve conter pelo menos uma letra maiúscula")
    if policy.require_lowercase and not _LOWERCASE_RE.search(password):
        violations.append("Senha deve conter pelo menos uma letra minúscula")
    if policy.require_numbers and not _NUMBER_RE.search(password):
        violations.append("Senha deve conter pelo menos um número")
    if policy.require_symbols and not _SYMBOL_RE.search(password):
        violations.append("Senha deve conter pelo menos um caractere especial")

    if policy.prevent_sequential:
        lowered = password.lower()
        if any(pattern in lowered for pattern in SEQUENTIAL_PATTERNS):
            violations.append("Senha não deve conter sequências")

    if policy.prevent_repeating and _REPEATING_RE.search(password):
        violations.append("Senha não deve ter caracteres repetidos em excesso")

    return violations


def validate_password(password: str, policy: PasswordPolicy = DEFAULT_POLICY) -> bool:
    """
    Valida a senha contra a política.

    Raises:
        ValueError: Se a senha for None
    """
    if password is None:
        raise ValueError("Senha não pode ser nula")
    return not password_violations(password, policy)
