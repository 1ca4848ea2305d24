"""
Testes para o cliente de API simulado.
"""

import pytest

from validador.clients.fake_api_client import ApiResult, FakeApiClient


class TestFakeApiClient:
    """Testes para FakeApiClient."""

    @pytest.fixture
    def client(self):
        """Fixture que retorna uma instância do cliente."""
        return FakeApiClient()

    def test_init(self, client):
        assert client.call_count == 0
        assert client.message == "Api call successful"

    def test_call_success(self, client):
        result = client.call("joao@empresa.com", "Segura#2024")

        assert result == ApiResult(success=True, message="Api call successful")
        assert client.call_count == 1

    def test_call_count(self, client):
        for _ in range(3):
            client.call("a", "b")
        assert client.call_count == 3

    def test_custom_message(self):
        result = FakeApiClient(message="ok").call("a", "b")
        assert result.message == "ok"
