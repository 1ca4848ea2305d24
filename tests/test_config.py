"""
Testes para o módulo de configuração.
"""

import importlib

from validador import config


class TestDefaults:
    """Testes para os valores padrão."""

    def test_service_constants(self):
        """Verifica as constantes usadas pelo serviço."""
        assert config.EXPECTED_API_CALLS == 4
        assert config.INTEGRITY_TOTAL_CHECKS == 3
        assert config.AUDIT_TOTAL_OPERATIONS == 9

    def test_suspicious_markers_are_lowercase(self):
        """Verifica se todos os marcadores estão em minúsculas."""
        for marker in config.SUSPICIOUS_EMAIL_MARKERS:
            assert marker.islower(), f"Marcador '{marker}' não está em minúsculas"


class TestEnvironmentOverrides:
    """Testes de sobrescrita por variáveis de ambiente."""

    def test_target_domain_from_env(self, monkeypatch):
        monkeypatch.setenv("SERVICE_TARGET_DOMAIN", "exemplo.com.br")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        try:
            importlib.reload(config)
            assert config.TARGET_DOMAIN == "exemplo.com.br"
            assert config.LOG_LEVEL == "DEBUG"
        finally:
            monkeypatch.undo()
            importlib.reload(config)
