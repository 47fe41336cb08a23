"""Configuração de logging estruturado (JSON) dos eventos de ciclo de vida."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from ong_lifecycle.observability.context import get_correlation_id

PACKAGE_LOGGER = "ong_lifecycle"

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s [%(correlation_id)s]"
_JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s %(correlation_id)s %(service)s"


class LifecycleContextFilter(logging.Filter):
    """Carimba cada evento de transição com o serviço e o correlation_id.

    O correlation_id vem do `extra` da chamada ou, na falta dele, do
    `correlation_scope()` ativo. Metadados de transição não passam por aqui.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.correlation_id = getattr(record, "correlation_id", None) or get_correlation_id()
        record.service = self.service_name
        return True


def configure_logging(level: str, service_name: str, log_format: str = "json") -> None:
    """Instala um único handler no root logger (json | text)."""

    if log_format.lower() == "text":
        formatter: logging.Formatter = logging.Formatter(_TEXT_FORMAT)
    else:
        formatter = JsonFormatter(
            _JSON_FIELDS,
            rename_fields={"levelname": "level", "name": "logger"},
        )

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(LifecycleContextFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]


def configure_from_settings() -> None:
    """Atalho: aplica configure_logging a partir de get_settings()."""
    from ong_lifecycle.config.settings import get_settings

    settings = get_settings()
    configure_logging(settings.log_level.upper(), settings.service_name, settings.log_format)


def get_logger(name: str) -> logging.Logger:
    """Logger de um módulo da biblioteca.

    O logger do pacote recebe um NullHandler: sem configure_logging() a
    aplicação hospedeira não vê avisos de "no handlers".
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
