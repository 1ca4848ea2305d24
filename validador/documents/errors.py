class FormatError(ValueError):
    """Exceção para documentos com quantidade de dígitos incorreta."""

    def __init__(self, document: str, expected: int, received: int):
        self.document = document
        self.expected = expected
        self.received = received
        super().__init__(
            f"{document} deve ter {expected} dígitos (recebidos: {received})"
        )
