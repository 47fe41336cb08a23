"""Motor FSM genérico e imutável.

- Puro: nenhuma operação altera a instância de origem
- Cada transição válida produz nova instância com um registro a mais no histórico
- Auditável: logs estruturados sem metadados (podem conter PII)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from ong_lifecycle.domain.errors import InvalidTransitionError
from ong_lifecycle.domain.fsm.record import TransitionRecord, state_value
from ong_lifecycle.domain.fsm.table import TransitionTable
from ong_lifecycle.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

S = TypeVar("S")


@dataclass(frozen=True, slots=True)
class StateMachine(Generic[S]):
    """Instância imutável de máquina de estados.

    Igualdade estrutural: current_state, histórico completo e metadados
    agregados. A tabela é compartilhada e não participa da comparação.
    Não-hasheável (metadados são mapeamentos).

    O histórico carregado precisa ser coerente: registros encadeados
    (from == to do anterior), timestamps não decrescentes e último destino
    igual a current_state.
    """

    __hash__ = None  # type: ignore[assignment]

    current_state: S
    table: TransitionTable[S] = field(compare=False, repr=False)
    history: tuple[TransitionRecord[S], ...] = ()
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Normaliza valores crus (ex.: "approved") para a chave canônica da tabela
        object.__setattr__(self, "current_state", self.table.parse(self.current_state))
        object.__setattr__(self, "history", tuple(self.history))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        self._check_history()

    def _check_history(self) -> None:
        previous: TransitionRecord[S] | None = None
        for index, record in enumerate(self.history):
            if previous is not None:
                if record.from_state != previous.to_state:
                    raise ValueError(
                        f"History record {index} starts at {record.from_state} "
                        f"but previous record ends at {previous.to_state}"
                    )
                if record.timestamp < previous.timestamp:
                    raise ValueError(
                        f"History record {index} is older than record {index - 1}"
                    )
            previous = record
        if previous is not None and previous.to_state != self.current_state:
            raise ValueError(
                f"History ends at {previous.to_state} but state is {self.current_state}"
            )

    def can_transition_to(self, target: S) -> bool:
        """True se `target` é destino direto do estado atual."""
        return self.table.allows(self.current_state, target)

    def available_transitions(self) -> list[S]:
        """Destinos legais a partir do estado atual, na ordem da tabela."""
        return list(self.table.destinations(self.current_state))

    def transition_to(
        self,
        target: S,
        metadata: Mapping[str, Any] | None = None,
        *,
        at: datetime | None = None,
    ) -> StateMachine[S]:
        """Executa transição e retorna nova instância.

        Args:
            target: estado destino
            metadata: metadados locais da transição (copiados, não alterados)
            at: instante da transição (timezone-aware); padrão agora em UTC

        Raises:
            InvalidTransitionError: destino não permitido a partir do estado atual
            ValueError: `at` anterior ao último registro do histórico
        """
        if not self.can_transition_to(target):
            allowed = self.table.destinations(self.current_state)
            logger.warning(
                "invalid_state_transition",
                extra={
                    "table": self.table.name,
                    "from_state": state_value(self.current_state),
                    "to_state": state_value(target),
                    "allowed": [state_value(s) for s in allowed],
                },
            )
            raise InvalidTransitionError(self.current_state, target, allowed)

        timestamp = at or datetime.now(tz=UTC)
        if self.history and timestamp < self.history[-1].timestamp:
            raise ValueError(
                f"Transition at {timestamp.isoformat()} precedes last record "
                f"at {self.history[-1].timestamp.isoformat()}"
            )

        record = TransitionRecord(
            from_state=self.current_state,
            to_state=self.table.parse(target),
            timestamp=timestamp,
            metadata=metadata or {},
        )

        # Merge raso: chaves da transição mais recente sobrescrevem as anteriores
        next_machine = replace(
            self,
            current_state=record.to_state,
            history=(*self.history, record),
            metadata={**self.metadata, **record.metadata},
        )

        logger.debug(
            "state_transition",
            extra={
                "table": self.table.name,
                "from_state": state_value(record.from_state),
                "to_state": state_value(record.to_state),
                "history_length": len(next_machine.history),
            },
        )
        return next_machine

    def get_history(self) -> list[TransitionRecord[S]]:
        """Retorna cópia do histórico de transições."""
        return list(self.history)

    def is_state(self, state: S) -> bool:
        return self.current_state == state

    def is_one_of(self, states: Iterable[S]) -> bool:
        return self.current_state in set(states)

    @property
    def is_terminal(self) -> bool:
        """True se não há transição de saída a partir do estado atual."""
        return self.table.is_terminal(self.current_state)

    def to_json(self) -> dict[str, Any]:
        """Projeção serializável (persistência e respostas HTTP)."""
        return {
            "current_state": state_value(self.current_state),
            "available_transitions": [state_value(s) for s in self.available_transitions()],
            "history": [record.to_dict() for record in self.history],
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_json(cls, table: TransitionTable[S], data: Mapping[str, Any]) -> StateMachine[S]:
        """Reconstrói instância a partir de `to_json()`.

        `available_transitions` é ignorado: sempre derivado da tabela.
        """
        return cls(
            current_state=table.parse(data["current_state"]),
            table=table,
            history=tuple(
                TransitionRecord.from_dict(item, table.parse) for item in data.get("history", ())
            ),
            metadata=data.get("metadata") or {},
        )
