"""Motor FSM genérico — tabela, registro de transição, máquina e replay.

Exporta:
- TransitionTable: tabela imutável estado → destinos
- TransitionRecord: entrada imutável de histórico
- StateMachine: instância imutável com histórico e metadados agregados
- replay_history: reconstrução verificada a partir do histórico
- LifecycleMachine: base das fachadas de domínio
"""

from ong_lifecycle.domain.fsm.facade import LifecycleMachine
from ong_lifecycle.domain.fsm.machine import StateMachine
from ong_lifecycle.domain.fsm.record import TransitionRecord
from ong_lifecycle.domain.fsm.replay import replay_history
from ong_lifecycle.domain.fsm.table import TransitionTable

__all__ = [
    "LifecycleMachine",
    "StateMachine",
    "TransitionRecord",
    "TransitionTable",
    "replay_history",
]
