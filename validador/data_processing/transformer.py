from typing import Callable, List

import pandas as pd
from loguru import logger

from validador.documents import cnpj, cpf
from validador.documents.errors import FormatError
from validador.emails import normalize_email, validate_email
from validador.password import validate_password


class BatchTransformer:
    """
    Valida e normaliza um lote de cadastros (email, senha, CNPJ e, opcionalmente, CPF).

    Problemas de formatação por linha não interrompem o processamento: são
    acumulados em `errors`.
    """

    def __init__(self):
        self.errors: List[str] = []

    def transform(self, input_df: pd.DataFrame) -> pd.DataFrame:
        emails = self._column(input_df, "email")
        passwords = self._column(input_df, "password")
        cnpjs = self._column(input_df, "cnpj")

        is_valid = (
            emails.apply(validate_email).astype(bool)
            & passwords.apply(validate_password).astype(bool)
            & cnpjs.apply(cnpj.validate).astype(bool)
        )

        output_data = {
            "index": pd.Series(range(len(input_df)), dtype=int),
            "is_valid": is_valid,
            "processed_email": emails.apply(normalize_email),
            "processed_cnpj": self._mask_column(cnpjs, cnpj.mask, "CNPJ"),
        }

        # CPF só é considerado quando a coluna existe na entrada
        if "cpf" in input_df.columns:
            cpfs = self._column(input_df, "cpf")
            output_data["is_valid"] = is_valid & cpfs.apply(cpf.validate).astype(bool)
            output_data["processed_cpf"] = self._mask_column(cpfs, cpf.mask, "CPF")

        return pd.DataFrame(output_data)

    def get_error_report(self) -> str:
        if not self.errors:
            return "Nenhum erro encontrado."
        return "\n".join(self.errors)

    @staticmethod
    def _column(input_df: pd.DataFrame, name: str) -> pd.Series:
        series = input_df.get(name, pd.Series("", index=input_df.index, dtype=str))
        return series.fillna("").astype(str).reset_index(drop=True)

    def _mask_column(
        self, raw_series: pd.Series, mask_fn: Callable[[str], str], label: str
    ) -> pd.Series:
        masked = []
        for idx, raw in enumerate(raw_series):
            try:
                masked.append(mask_fn(raw))
            except FormatError:
                masked.append("")
                message = f"Linha {idx}: {label} inválido - Valor original: '{raw}'"
                self.errors.append(message)
                logger.warning(message)
        return pd.Series(masked, dtype=str)
