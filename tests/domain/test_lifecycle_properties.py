"""Propriedades comuns a todas as máquinas de domínio.

- Estados terminais: sem destinos e toda transição falha
- Transição válida nunca altera a instância de origem
- Histórico cresce exatamente 1 no sucesso e nada na falha
- Replay do histórico reproduz o mesmo to_json()
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from ong_lifecycle.domain.collaboration import CollaborationStateMachine
from ong_lifecycle.domain.errors import InvalidTransitionError
from ong_lifecycle.domain.fsm import LifecycleMachine
from ong_lifecycle.domain.payment import PaymentStateMachine
from ong_lifecycle.domain.project import ProjectStateMachine
from ong_lifecycle.domain.user import UserStateMachine

MACHINES: list[type[LifecycleMachine]] = [
    PaymentStateMachine,
    CollaborationStateMachine,
    ProjectStateMachine,
    UserStateMachine,
]


def _all_edges(machine_cls: type[LifecycleMachine]):
    for source in machine_cls.TABLE:
        for target in machine_cls.TABLE.destinations(source):
            yield source, target


EDGES = [
    pytest.param(cls, source, target, id=f"{cls.__name__}:{source}->{target}")
    for cls in MACHINES
    for source, target in _all_edges(cls)
]

TERMINALS = [
    pytest.param(cls, state, id=f"{cls.__name__}:{state}")
    for cls in MACHINES
    for state in sorted(cls.TABLE.terminal_states)
]


@pytest.mark.parametrize(("machine_cls", "state"), TERMINALS)
def test_terminal_states_have_no_way_out(machine_cls, state) -> None:
    instance = machine_cls.from_state(state)
    assert instance.available_transitions() == []
    for target in machine_cls.TABLE:
        with pytest.raises(InvalidTransitionError):
            instance.transition_to(target)


@pytest.mark.parametrize(("machine_cls", "source", "target"), EDGES)
def test_valid_transition_does_not_mutate_source(machine_cls, source, target) -> None:
    instance = machine_cls.from_state(source, metadata={"origin": "loaded"})
    before_json = instance.to_json()

    moved = instance.transition_to(target, {"step": 1})

    assert moved.current_state == target
    assert len(moved.get_history()) == len(instance.get_history()) + 1
    assert instance.current_state == source
    assert instance.to_json() == before_json


@pytest.mark.parametrize("machine_cls", MACHINES)
def test_failed_transition_appends_nothing(machine_cls) -> None:
    instance = machine_cls.create()
    illegal = [s for s in machine_cls.TABLE if not instance.can_transition_to(s)]
    assert illegal
    for target in illegal:
        with pytest.raises(InvalidTransitionError):
            instance.transition_to(target)
    assert instance.get_history() == []


@pytest.mark.parametrize(
    "build",
    [
        pytest.param(
            lambda: PaymentStateMachine.create().approve(user_id="1").refund(amount=5),
            id="payment",
        ),
        pytest.param(
            lambda: CollaborationStateMachine.create()
            .submit()
            .reject("faltou plano", "admin")
            .submit()
            .approve("admin")
            .pause("recesso")
            .resume()
            .complete(),
            id="collaboration",
        ),
        pytest.param(
            lambda: ProjectStateMachine.create()
            .publish("ong")
            .start("ong")
            .complete("ong")
            .archive("ong")
            .publish("ong"),
            id="project",
        ),
        pytest.param(
            lambda: UserStateMachine.create()
            .activate("email")
            .suspend("spam", timedelta(days=3), "mod")
            .activate("mod")
            .deactivate("inativo"),
            id="user",
        ),
    ],
)
def test_replay_reproduces_instance(build) -> None:
    original = build()
    replayed = type(original).replay(original.get_history())
    assert replayed.to_json() == original.to_json()
    assert replayed == original
