"""Exemplo de uso dos validadores e do serviço."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from validador.documents import cnpj, cpf
from validador.service import service


def example_documents():
    """Exemplo validando, formatando e gerando CPF e CNPJ."""
    print("\n" + "=" * 60)
    print("EXEMPLO: CPF e CNPJ")
    print("=" * 60)

    print("\n📝 CPF 529.982.247-25:")
    print(f"Válido: {cpf.validate('529.982.247-25')}")
    print(f"Sem máscara: {cpf.unmask('529.982.247-25')}")

    generated = cnpj.generate()
    print("\n📝 CNPJ gerado:")
    print(f"{generated} -> {cnpj.mask(generated)}")


def example_service():
    """Exemplo executando o fluxo completo do serviço."""
    print("\n" + "=" * 60)
    print("EXEMPLO: Serviço")
    print("=" * 60)

    result = service("joao.silva@empresa.com", "Segura#2024", "11.222.333/0001-81")
    print(f"\n{result.message}")
    print(f"Registros válidos: {result.summary.valid_records}/{result.summary.total_processed}")
    print(f"Integridade OK: {result.summary.integrity_valid}")


if __name__ == "__main__":
    print("\n🚀 Exemplos de Uso do Validador\n")
    example_documents()
    example_service()
    print("\n" + "=" * 60)
    print("✓ Exemplos concluídos!")
    print("=" * 60)
