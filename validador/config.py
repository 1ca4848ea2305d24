"""
Arquivo de configuração do validador de cadastros.

Valores podem ser sobrescritos por variáveis de ambiente (ou arquivo .env).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Domínio considerado "da empresa" na verificação de emails do serviço
TARGET_DOMAIN = os.getenv("SERVICE_TARGET_DOMAIN", "empresa.com")

# Senha usada no registro de teste gerado pelo serviço
TEST_PASSWORD = os.getenv("SERVICE_TEST_PASSWORD", "Teste123!@#")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOG_FILE_FORMAT = "{time} | {level} | {name}:{function}:{line} | {message}"
LOG_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Chamadas de API feitas por execução do serviço
EXPECTED_API_CALLS = 4
INTEGRITY_TOTAL_CHECKS = 3
AUDIT_TOTAL_OPERATIONS = 9

# Trechos que marcam um email como suspeito na auditoria
SUSPICIOUS_EMAIL_MARKERS = ("test", "admin")
