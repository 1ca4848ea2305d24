"""
Serviço que simula um fluxo de negócio com os validadores.

O fluxo:
1. Valida email, senha e CNPJ de entrada
2. Normaliza os dados do usuário e gera um registro de teste
3. Faz chamadas de API simuladas
4. Processa o lote (usuário + teste) e monta relatório, backup,
   verificação de integridade, auditoria e exportação em JSON
"""

import json
import random
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

import pandas as pd
from loguru import logger

from validador import config
from validador.clients.fake_api_client import ApiResult, FakeApiClient
from validador.data_processing.transformer import BatchTransformer
from validador.documents import cnpj
from validador.emails import (
    extract_domain,
    is_from_domain,
    normalize_email,
    validate_email,
)
from validador.password import validate_password


@dataclass
class ProcessedData:
    """Dados do usuário normalizados."""

    normalized_email: str
    domain: Optional[str]
    is_from_specific_domain: bool
    masked_cnpj: str
    unmasked_cnpj: str
    cnpj_format_valid: bool


@dataclass
class TestData:
    """Registro de teste gerado a cada execução."""

    __test__ = False  # não é uma classe de teste do pytest

    test_cnpj: str
    test_email: str
    test_password: str


@dataclass
class BatchItem:
    email: str
    password: str
    cnpj: str


@dataclass
class ProcessedBatchItem:
    index: int
    original_data: BatchItem
    is_valid: bool
    processed_email: str
    processed_cnpj: str


@dataclass
class Report:
    timestamp: str
    total_records: int
    valid_records: int
    invalid_records: int
    api_calls: int
    domain: Optional[str]
    is_from_specific_domain: bool


@dataclass
class Backup:
    timestamp: str
    data: List[ProcessedBatchItem]
    checksum: int
    original_input: BatchItem


@dataclass
class Integrity:
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    total_checks: int = config.INTEGRITY_TOTAL_CHECKS


@dataclass
class Audit:
    timestamp: str
    suspicious_emails: int
    duplicate_cnpjs: int
    total_operations: int = config.AUDIT_TOTAL_OPERATIONS


@dataclass
class ExportedData:
    format: str
    content: str
    size: int


@dataclass
class ServiceSummary:
    total_processed: int
    valid_records: int
    invalid_records: int
    api_calls: int
    backup_created: bool
    integrity_valid: bool
    audit_completed: bool
    data_exported: bool


@dataclass
class ServiceData:
    processed: ProcessedData
    test: TestData
    batch: List[ProcessedBatchItem]
    report: Report
    backup: Backup
    integrity: Integrity
    audit: Audit
    exported: ExportedData


@dataclass
class ServiceResult:
    """Resultado consolidado de uma execução do serviço."""

    success: bool
    message: str
    timestamp: Optional[str] = None
    summary: Optional[ServiceSummary] = None
    data: Optional[ServiceData] = None
    details: Optional[Dict[str, bool]] = None

    def to_dict(self) -> Dict:
        """Converte para dicionário, omitindo campos não preenchidos."""
        return {key: value for key, value in asdict(self).items() if value is not None}


def _compact_json(value) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Service:
    """
    Orquestra os validadores num fluxo de negócio simulado.

    Args:
        api_client: Cliente de API (padrão: FakeApiClient)
        rng: Fonte de aleatoriedade para gerar o CNPJ de teste
        clock: Função que retorna o horário atual (UTC)
        target_domain: Domínio da empresa (padrão: config.TARGET_DOMAIN)
    """

    def __init__(
        self,
        api_client: Optional[FakeApiClient] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
        target_domain: Optional[str] = None,
    ):
        self.api_client = api_client or FakeApiClient()
        self.rng = rng
        self.clock = clock or _utcnow
        self.target_domain = target_domain or config.TARGET_DOMAIN

    def _timestamp(self) -> str:
        return self.clock().isoformat()

    def run(self, email: str, password: str, cnpj_value: str) -> ServiceResult:
        logger.info("Iniciando serviço...")

        email_valid, password_valid, cnpj_valid = self.validate_inputs(
            email, password, cnpj_value
        )
        if not (email_valid and password_valid and cnpj_valid):
            logger.warning("Dados inválidos detectados")
            return ServiceResult(
                success=False,
                message="Dados inválidos",
                details={
                    "email": email_valid,
                    "password": password_valid,
                    "cnpj": cnpj_valid,
                },
            )

        processed = self.process_user_data(email, cnpj_value)
        test_data = self.generate_test_data()
        api_results = self.make_api_calls(
            email, password, cnpj_value, test_data.test_email, test_data.test_password
        )

        batch = [
            BatchItem(email=email, password=password, cnpj=cnpj_value),
            BatchItem(
                email=test_data.test_email,
                password=test_data.test_password,
                cnpj=test_data.test_cnpj,
            ),
        ]
        processed_batch = self.process_batch(batch)

        report = self.create_report(
            processed_batch,
            api_results,
            processed.domain,
            processed.is_from_specific_domain,
        )
        backup = self.create_backup(processed_batch, batch[0])
        integrity = self.validate_integrity(
            processed.domain, processed.cnpj_format_valid, api_results
        )
        audit = self.perform_audit(processed_batch, cnpj_value)
        exported = self.export_data(report, processed_batch, backup, integrity, audit)

        logger.info(
            f"Serviço concluído: {report.valid_records}/{report.total_records} registros válidos"
        )
        return ServiceResult(
            success=True,
            message="Serviço executado com sucesso",
            timestamp=self._timestamp(),
            summary=ServiceSummary(
                total_processed=len(processed_batch),
                valid_records=report.valid_records,
                invalid_records=report.invalid_records,
                api_calls=len(api_results),
                backup_created=True,
                integrity_valid=integrity.is_valid,
                audit_completed=True,
                data_exported=True,
            ),
            data=ServiceData(
                processed=processed,
                test=test_data,
                batch=processed_batch,
                report=report,
                backup=backup,
                integrity=integrity,
                audit=audit,
                exported=exported,
            ),
        )

    @staticmethod
    def validate_inputs(email: str, password: str, cnpj_value: str) -> List[bool]:
        return [
            validate_email(email),
            validate_password(password),
            cnpj.validate(cnpj_value),
        ]

    def process_user_data(self, email: str, cnpj_value: str) -> ProcessedData:
        normalized_email = normalize_email(email)
        masked_cnpj = cnpj.mask(cnpj_value)
        return ProcessedData(
            normalized_email=normalized_email,
            domain=extract_domain(normalized_email),
            is_from_specific_domain=is_from_domain(normalized_email, self.target_domain),
            masked_cnpj=masked_cnpj,
            unmasked_cnpj=cnpj.unmask(masked_cnpj),
            cnpj_format_valid=cnpj.is_valid_format(masked_cnpj),
        )

    def generate_test_data(self) -> TestData:
        epoch_ms = int(self.clock().timestamp() * 1000)
        return TestData(
            test_cnpj=cnpj.generate(self.rng),
            test_email=f"teste.{epoch_ms}@{self.target_domain}",
            test_password=config.TEST_PASSWORD,
        )

    def make_api_calls(
        self,
        email: str,
        password: str,
        cnpj_value: str,
        test_email: str,
        test_password: str,
    ) -> List[ApiResult]:
        return [
            self.api_client.call(email, password),
            self.api_client.call(email, cnpj_value),
            self.api_client.call(password, cnpj_value),
            self.api_client.call(test_email, test_password),
        ]

    @staticmethod
    def process_batch(batch: List[BatchItem]) -> List[ProcessedBatchItem]:
        """
        Processa o lote pelo BatchTransformer.

        Returns:
            Itens processados, na mesma ordem do lote
        """
        transformer = BatchTransformer()
        df_out = transformer.transform(pd.DataFrame([asdict(item) for item in batch]))
        return [
            ProcessedBatchItem(
                index=int(row["index"]),
                original_data=item,
                is_valid=bool(row["is_valid"]),
                processed_email=str(row["processed_email"]),
                processed_cnpj=str(row["processed_cnpj"]),
            )
            for item, row in zip(batch, df_out.to_dict("records"))
        ]

    def create_report(
        self,
        processed_batch: List[ProcessedBatchItem],
        api_results: List[ApiResult],
        domain: Optional[str],
        is_from_specific_domain: bool,
    ) -> Report:
        valid = sum(1 for item in processed_batch if item.is_valid)
        return Report(
            timestamp=self._timestamp(),
            total_records=len(processed_batch),
            valid_records=valid,
            invalid_records=len(processed_batch) - valid,
            api_calls=len(api_results),
            domain=domain,
            is_from_specific_domain=is_from_specific_domain,
        )

    def create_backup(
        self, processed_batch: List[ProcessedBatchItem], original_input: BatchItem
    ) -> Backup:
        # Checksum = tamanho do JSON compacto do lote processado
        checksum = len(_compact_json([asdict(item) for item in processed_batch]))
        return Backup(
            timestamp=self._timestamp(),
            data=processed_batch,
            checksum=checksum,
            original_input=original_input,
        )

    @staticmethod
    def validate_integrity(
        domain: Optional[str], cnpj_format_valid: bool, api_results: List[ApiResult]
    ) -> Integrity:
        errors = []
        if not domain:
            errors.append("Domínio inválido")
        if not cnpj_format_valid:
            errors.append("Formato CNPJ inválido")
        if len(api_results) != config.EXPECTED_API_CALLS:
            errors.append("Número incorreto de chamadas de API")
        return Integrity(is_valid=not errors, errors=errors)

    def perform_audit(
        self, processed_batch: List[ProcessedBatchItem], cnpj_value: str
    ) -> Audit:
        suspicious = sum(
            1
            for item in processed_batch
            if any(
                marker in item.original_data.email
                for marker in config.SUSPICIOUS_EMAIL_MARKERS
            )
        )
        duplicates = sum(
            1 for item in processed_batch if item.original_data.cnpj == cnpj_value
        )
        return Audit(
            timestamp=self._timestamp(),
            suspicious_emails=suspicious,
            duplicate_cnpjs=duplicates,
        )

    @staticmethod
    def export_data(
        report: Report,
        processed_batch: List[ProcessedBatchItem],
        backup: Backup,
        integrity: Integrity,
        audit: Audit,
    ) -> ExportedData:
        data = {
            "report": asdict(report),
            "processed_batch": [asdict(item) for item in processed_batch],
            "backup": asdict(backup),
            "integrity": asdict(integrity),
            "audit": asdict(audit),
        }
        return ExportedData(
            format="json",
            content=json.dumps(data, ensure_ascii=False, indent=2),
            size=len(_compact_json(data)),
        )


def service(email: str, password: str, cnpj_value: str) -> ServiceResult:
    """Executa o fluxo completo com as dependências padrão."""
    return Service().run(email, password, cnpj_value)
