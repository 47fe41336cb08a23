"""Reexecução do histórico armazenado a partir do estado inicial."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from ong_lifecycle.domain.errors import InvalidTransitionError
from ong_lifecycle.domain.fsm.machine import StateMachine
from ong_lifecycle.domain.fsm.record import TransitionRecord
from ong_lifecycle.domain.fsm.table import TransitionTable

S = TypeVar("S")


def replay_history(
    table: TransitionTable[S],
    initial_state: S,
    records: Iterable[TransitionRecord[S]],
) -> StateMachine[S]:
    """Aplica cada registro, em ordem, sobre uma máquina nova em `initial_state`.

    Cada passo passa pela validação normal da tabela; timestamps e metadados
    originais são preservados, de modo que `to_json()` do resultado coincide
    com o da instância que produziu o histórico.

    Raises:
        InvalidTransitionError: registro fora de sequência ou transição ilegal
    """
    machine: StateMachine[S] = StateMachine(current_state=initial_state, table=table)
    for index, record in enumerate(records):
        if record.from_state != machine.current_state:
            raise InvalidTransitionError(
                machine.current_state,
                record.to_state,
                machine.available_transitions(),
                detail=f"history record {index} starts at {record.from_state}",
            )
        machine = machine.transition_to(record.to_state, record.metadata, at=record.timestamp)
    return machine
