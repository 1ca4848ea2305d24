"""
Cliente de API simulado.

Não faz nenhuma requisição de rede: cada chamada apenas é contabilizada e
retorna sucesso. Usado pelo serviço para simular integrações externas.
"""

from dataclasses import dataclass

from loguru import logger


@dataclass
class ApiResult:
    """Resultado de uma chamada de API."""

    success: bool
    message: str


class FakeApiClient:
    """
    Cliente que simula chamadas a uma API externa.

    Args:
        message: Mensagem retornada em cada chamada
    """

    def __init__(self, message: str = "Api call successful"):
        self.message = message
        self.call_count = 0

    def call(self, param1: str, param2: str) -> ApiResult:
        """
        Simula uma chamada de API com dois parâmetros.

        Os valores não são registrados em log, pois podem conter senhas.
        """
        self.call_count += 1
        logger.debug(f"Chamada de API simulada #{self.call_count}")
        return ApiResult(success=True, message=self.message)
