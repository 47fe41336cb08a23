"""Configurações da biblioteca via variáveis de ambiente.

O núcleo de estados não faz I/O; as configurações aqui controlam apenas
logging e políticas de tratamento de eventos externos.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Políticas aceitas para webhooks duplicados/reentregues
DuplicatePolicy = Literal["ignore", "reject"]
WEBHOOK_DUPLICATE_IGNORE: DuplicatePolicy = "ignore"
WEBHOOK_DUPLICATE_REJECT: DuplicatePolicy = "reject"

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Configurações lidas do ambiente.

    Comentários em PT-BR são obrigatórios por diretriz do projeto.
    """

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    # Aplicação
    service_name: str = "ong_lifecycle"
    version: str = "0.1.0"
    environment: str = "development"

    # Observabilidade
    log_level: str = "INFO"
    log_format: str = "json"  # json | text

    # Pagamentos: o que fazer quando o webhook resolve para o estado atual
    webhook_duplicate_policy: DuplicatePolicy = WEBHOOK_DUPLICATE_IGNORE

    @field_validator("webhook_duplicate_policy", mode="before")
    @classmethod
    def _normalize_policy(cls, value: object) -> object:
        # Aceita REJECT, " ignore " etc.; qualquer outro valor falha no carregamento
        return value.strip().lower() if isinstance(value, str) else value

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_staging(self) -> bool:
        """Retorna True se ambiente é staging."""
        return self.environment.lower() in ("staging", "stage")

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def ignore_duplicate_webhooks(self) -> bool:
        """True quando reentregas de webhook devem ser no-op."""
        return self.webhook_duplicate_policy == WEBHOOK_DUPLICATE_IGNORE

    def validate_observability(self) -> list[str]:
        """Valida nível e formato de log."""
        errors: list[str] = []
        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL '{self.log_level}' inválido")
        if self.log_format.lower() not in {"json", "text"}:
            errors.append("LOG_FORMAT inválido: use json | text")
        return errors

    def validate_all(self) -> list[str]:
        """Executa todas as validações que não bloqueiam o carregamento.

        Retorna lista de erros (vazia = tudo OK).
        """
        return self.validate_observability()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings.

    A cache garante que mesmo múltiplas injeções não criam novos objetos.
    """
    return Settings()
