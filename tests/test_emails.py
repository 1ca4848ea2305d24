import pytest

from validador.emails import (
    extract_domain,
    extract_local_part,
    is_from_domain,
    normalize_email,
    validate_email,
)


def test_validate_email():
    assert validate_email("test@example.com")
    assert validate_email("joao.silva@mail.empresa.com.br")
    assert not validate_email("invalid")
    assert not validate_email("")
    assert not validate_email(None)


@pytest.mark.parametrize(
    "email",
    [
        "a@b",
        "a@@b.com",
        "a b@c.com",
        ".joao@empresa.com",
        "joao.@empresa.com",
        "jo..ao@empresa.com",
        "joao@.empresa.com",
        "joao@empresa.com.",
        "joao@empresa..com",
        "x" * 65 + "@empresa.com",
        "joao@" + "a" * 250 + ".com",
    ],
)
def test_validate_email_rejects(email):
    assert not validate_email(email)


def test_local_part_limit():
    assert validate_email("x" * 64 + "@empresa.com")


def test_extract_domain():
    assert extract_domain("joao@empresa.com") == "empresa.com"
    assert extract_domain("invalid") is None


def test_extract_local_part():
    assert extract_local_part("joao@empresa.com") == "joao"
    assert extract_local_part("joao@empresa") is None


def test_is_from_domain():
    assert is_from_domain("joao@empresa.com", "empresa.com")
    assert is_from_domain("joao@mail.empresa.com", "EMPRESA.COM")
    assert not is_from_domain("joao@outraempresa.com", "empresa.com")
    assert not is_from_domain("joao@empresa.com", "")
    assert not is_from_domain("invalid", "empresa.com")


def test_normalize_email():
    assert normalize_email("  Joao.Silva@Empresa.COM ") == "joao.silva@empresa.com"
    assert normalize_email("") == ""
