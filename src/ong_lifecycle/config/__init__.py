"""Configurações centralizadas do ong_lifecycle.

Este módulo exporta:
- Settings: classe de configuração via variáveis de ambiente
- get_settings: função cacheada para obter instância única
- Constantes de política de webhooks duplicados

Uso típico:
    from ong_lifecycle.config import get_settings
"""

from ong_lifecycle.config.settings import (
    DuplicatePolicy,
    WEBHOOK_DUPLICATE_IGNORE,
    WEBHOOK_DUPLICATE_REJECT,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "DuplicatePolicy",
    "get_settings",
    "WEBHOOK_DUPLICATE_IGNORE",
    "WEBHOOK_DUPLICATE_REJECT",
]
