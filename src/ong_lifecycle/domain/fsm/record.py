"""Registro imutável de uma transição executada (trilha de auditoria)."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Generic, TypeVar

S = TypeVar("S")


def state_value(state: Any) -> Any:
    """Valor serializável de um estado (Enum → value)."""
    return getattr(state, "value", state)


@dataclass(frozen=True, slots=True)
class TransitionRecord(Generic[S]):
    """Entrada de histórico: from, to, timestamp (UTC) e metadados locais.

    Os metadados são copiados (shallow) e expostos somente leitura; o registro
    nunca é alterado depois de criado. Metadados mutáveis tornam o registro
    não-hasheável.
    """

    __hash__ = None  # type: ignore[assignment]

    from_state: S
    to_state: S
    timestamp: datetime
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.timestamp.tzinfo is None:
            raise ValueError("TransitionRecord.timestamp must be timezone-aware")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": state_value(self.from_state),
            "to": state_value(self.to_state),
            "timestamp": self.timestamp.isoformat(),
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        parse_state: Callable[[Any], S],
    ) -> TransitionRecord[S]:
        """Reconstrói um registro serializado por `to_dict`."""
        return cls(
            from_state=parse_state(data["from"]),
            to_state=parse_state(data["to"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            metadata=data.get("metadata") or {},
        )
