import argparse
import getpass
import json
import random
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd
from loguru import logger

from validador import config
from validador.data_processing.transformer import BatchTransformer
from validador.documents import cnpj, cpf
from validador.documents.errors import FormatError
from validador.emails import extract_domain, is_from_domain, normalize_email, validate_email
from validador.password import password_violations
from validador.service import Service

DOCUMENTS = {"cpf": cpf, "cnpj": cnpj}


def configure_logging(log_level: str, log_file: Optional[Path] = None) -> None:
    logger.remove()  # Remove default handler
    level = log_level.upper()
    if log_file:
        logger.add(log_file, level=level, format=config.LOG_FILE_FORMAT)
    logger.add(sys.stderr, level=level, colorize=True, format=config.LOG_CONSOLE_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Valida, formata e gera CPF/CNPJ, emails e senhas."
    )
    parser.add_argument("--log", default=None, type=Path, help="Arquivo de log")
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help="Nível de log (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name in DOCUMENTS:
        doc_parser = subparsers.add_parser(name, help=f"Operações de {name.upper()}")
        doc_parser.add_argument(
            "action", choices=["validate", "mask", "unmask", "format", "generate"]
        )
        doc_parser.add_argument("value", nargs="?", default="", help=f"{name.upper()}")
        doc_parser.add_argument(
            "--seed", type=int, default=None, help="Semente para o gerador (generate)"
        )

    email_parser = subparsers.add_parser("email", help="Valida e normaliza um email")
    email_parser.add_argument("value")
    email_parser.add_argument(
        "--domain", default=None, help="Verifica se o email pertence ao domínio"
    )

    password_parser = subparsers.add_parser("password", help="Verifica força de senha")
    password_parser.add_argument(
        "--value", default=None, help="Senha (se omitida, será solicitada)"
    )

    service_parser = subparsers.add_parser("service", help="Executa o fluxo simulado")
    service_parser.add_argument("--email", required=True)
    service_parser.add_argument("--password", required=True)
    service_parser.add_argument("--cnpj", required=True)

    batch_parser = subparsers.add_parser("batch", help="Valida um lote a partir de CSV")
    batch_parser.add_argument(
        "--input",
        required=True,
        type=Path,
        help="CSV com colunas email, password, cnpj (e opcionalmente cpf)",
    )
    batch_parser.add_argument(
        "--output", default=None, type=Path, help="CSV de saída com o resultado"
    )
    return parser


def _run_document(args: argparse.Namespace) -> int:
    module = DOCUMENTS[args.command]
    label = args.command.upper()

    if args.action == "generate":
        rng = random.Random(args.seed) if args.seed is not None else None
        print(module.generate(rng))
        return 0
    if args.action == "validate":
        valid = module.validate(args.value)
        print("válido" if valid else "inválido")
        return 0 if valid else 1
    if args.action == "format":
        valid = module.is_valid_format(args.value)
        print("formato válido" if valid else "formato inválido")
        return 0 if valid else 1
    if args.action == "unmask":
        print(module.unmask(args.value))
        return 0

    try:
        print(module.mask(args.value))
    except FormatError as e:
        logger.error(f"Erro ao formatar {label}: {e}")
        return 1
    return 0


def _run_email(args: argparse.Namespace) -> int:
    if not validate_email(args.value):
        logger.error(f"Email inválido: {args.value}")
        return 1
    normalized = normalize_email(args.value)
    print(normalized)
    print(f"Domínio: {extract_domain(normalized)}")
    if args.domain:
        belongs = is_from_domain(normalized, args.domain)
        print(f"Pertence a {args.domain}: {'sim' if belongs else 'não'}")
        return 0 if belongs else 1
    return 0


def _run_password(args: argparse.Namespace) -> int:
    password = args.value if args.value is not None else getpass.getpass("Senha: ")
    violations = password_violations(password)
    if not violations:
        print("Senha válida")
        return 0
    for violation in violations:
        print(f"- {violation}")
    return 1


def _run_service(args: argparse.Namespace) -> int:
    result = Service().run(args.email, args.password, args.cnpj)
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0 if result.success else 1


def _run_batch(args: argparse.Namespace) -> int:
    if not args.input.exists():
        logger.error(f"Arquivo de entrada não encontrado: {args.input}")
        return 1

    logger.info(f"Lendo lote de entrada: {args.input}")
    try:
        df = pd.read_csv(args.input, dtype=str, keep_default_na=False)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error(f"Erro ao ler CSV: {e}")
        return 1

    transformer = BatchTransformer()
    df_out = transformer.transform(df)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        df_out.to_csv(args.output, index=False)
        logger.info(f"Resultado salvo em: {args.output}")
    else:
        print(df_out.to_string(index=False))

    valid = int(df_out["is_valid"].sum()) if len(df_out) else 0
    logger.info(f"Linhas processadas: {len(df_out)}")
    logger.info(f"Linhas válidas: {valid}")
    if transformer.errors:
        logger.warning(f"Linhas com erro de formatação: {len(transformer.errors)}")
    return 0


COMMANDS = {
    "cpf": _run_document,
    "cnpj": _run_document,
    "email": _run_email,
    "password": _run_password,
    "service": _run_service,
    "batch": _run_batch,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log)

    try:
        return COMMANDS[args.command](args)
    except ValueError as e:
        logger.error(f"Erro: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
