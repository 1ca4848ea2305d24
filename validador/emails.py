import re
from typing import Optional

LOCAL_PART_MAX_LENGTH = 64
DOMAIN_MAX_LENGTH = 253

# Regex simples: algo@algo.algo, sem espaços e com um único @
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def _is_valid_dotted(part: str) -> bool:
    return not (part.startswith(".") or part.endswith(".") or ".." in part)


def validate_email(email: str) -> bool:
    if not email or not isinstance(email, str):
        return False
    if not _EMAIL_RE.fullmatch(email):
        return False

    local_part, domain = email.split("@")
    if len(local_part) > LOCAL_PART_MAX_LENGTH or not _is_valid_dotted(local_part):
        return False
    if len(domain) > DOMAIN_MAX_LENGTH or "." not in domain:
        return False
    return _is_valid_dotted(domain)


def extract_domain(email: str) -> Optional[str]:
    if not validate_email(email):
        return None
    return email.split("@")[1] or None


def extract_local_part(email: str) -> Optional[str]:
    if not validate_email(email):
        return None
    return email.split("@")[0] or None


def _match_domain(email_domain: str, target_domain: str) -> bool:
    email_domain = email_domain.lower()
    target_domain = target_domain.lower()
    # Mesmo domínio ou subdomínio (mail.empresa.com pertence a empresa.com)
    return email_domain == target_domain or email_domain.endswith("." + target_domain)


def is_from_domain(email: str, domain: str) -> bool:
    """
    Verifica se o email pertence ao domínio informado (ou a um subdomínio dele).

    Args:
        email: Endereço de email
        domain: Domínio esperado, p.ex. 'empresa.com'

    Returns:
        True se o email for válido e pertencer ao domínio
    """
    if not domain or not validate_email(email):
        return False
    email_domain = extract_domain(email)
    if not email_domain:
        return False
    return _match_domain(email_domain, domain)


def normalize_email(email: str) -> str:
    if not email or not isinstance(email, str):
        return ""
    return email.strip().lower()
