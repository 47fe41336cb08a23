"""Base das máquinas de domínio (pagamento, colaboração, projeto, usuário).

Cada domínio compõe um StateMachine genérico com sua tabela constante e expõe
operações nomeadas e predicados; nenhuma lógica de clonagem por domínio.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, Self, TypeVar

from ong_lifecycle.domain.fsm.machine import StateMachine
from ong_lifecycle.domain.fsm.record import TransitionRecord
from ong_lifecycle.domain.fsm.replay import replay_history
from ong_lifecycle.domain.fsm.table import TransitionTable

S = TypeVar("S")


@dataclass(frozen=True, slots=True)
class LifecycleMachine(Generic[S]):
    """Fachada imutável sobre StateMachine.

    Subclasses definem TABLE e INITIAL_STATE e implementam operações nomeadas
    via `_apply`, que injeta `action`, carimbo de tempo e campos obrigatórios.
    """

    __hash__ = None  # type: ignore[assignment]

    TABLE: ClassVar[TransitionTable[Any]]
    INITIAL_STATE: ClassVar[Any]

    machine: StateMachine[S]

    # === Construção ===

    @classmethod
    def create(cls) -> Self:
        """Entidade nova, no estado inicial do domínio."""
        return cls(StateMachine(current_state=cls.INITIAL_STATE, table=cls.TABLE))

    @classmethod
    def from_state(
        cls,
        state: S | str,
        history: Iterable[TransitionRecord[S]] = (),
        metadata: Mapping[str, Any] | None = None,
    ) -> Self:
        """Entidade carregada, em estado conhecido (ValueError se fora do domínio)."""
        return cls(
            StateMachine(
                current_state=state,
                table=cls.TABLE,
                history=tuple(history),
                metadata=metadata or {},
            )
        )

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Self:
        return cls(StateMachine.from_json(cls.TABLE, data))

    @classmethod
    def replay(cls, history: Iterable[TransitionRecord[S]]) -> Self:
        """Reaplica histórico a partir do estado inicial do domínio."""
        return cls(replay_history(cls.TABLE, cls.INITIAL_STATE, history))

    # === Delegação ===

    @property
    def current_state(self) -> S:
        return self.machine.current_state

    @property
    def metadata(self) -> Mapping[str, Any]:
        return self.machine.metadata

    @property
    def is_terminal(self) -> bool:
        return self.machine.is_terminal

    def can_transition_to(self, target: S) -> bool:
        return self.machine.can_transition_to(target)

    def available_transitions(self) -> list[S]:
        return self.machine.available_transitions()

    def get_history(self) -> list[TransitionRecord[S]]:
        return self.machine.get_history()

    def to_json(self) -> dict[str, Any]:
        return self.machine.to_json()

    def transition_to(
        self,
        target: S,
        metadata: Mapping[str, Any] | None = None,
        *,
        at: datetime | None = None,
    ) -> Self:
        return type(self)(self.machine.transition_to(target, metadata, at=at))

    # === Operações nomeadas ===

    def _apply(
        self,
        target: S,
        action: str,
        metadata: Mapping[str, Any],
        *,
        at: datetime | None = None,
        stamp: str | None = None,
        **fields: Any,
    ) -> Self:
        """Monta metadados da operação e delega para transition_to.

        Ordem: action, campos obrigatórios, carimbo `<stamp>`, metadados livres
        do chamador (que podem sobrescrever os anteriores).
        """
        moment = at or datetime.now(tz=UTC)
        payload: dict[str, Any] = {"action": action, **fields}
        if stamp:
            payload[stamp] = moment.isoformat()
        payload.update(metadata)
        return self.transition_to(target, payload, at=moment)
