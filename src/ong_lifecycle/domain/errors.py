"""Erros do núcleo de máquinas de estado.

Ambos são síncronos e nunca reprocessados pelo próprio núcleo; carregam
contexto suficiente para o chamador montar o diagnóstico sem recalcular nada.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class StateMachineError(Exception):
    """Base para erros de máquinas de estado."""

    pass


class InvalidTransitionError(StateMachineError):
    """Transição solicitada não é permitida a partir do estado atual.

    Atributos:
    - current_state: estado de origem
    - target_state: estado solicitado
    - allowed: destinos permitidos a partir da origem (tupla, pode ser vazia)
    - detail: contexto adicional opcional (ex.: replay fora de sequência)
    """

    def __init__(
        self,
        current_state: Any,
        target_state: Any,
        allowed: Iterable[Any] = (),
        detail: str | None = None,
    ) -> None:
        self.current_state = current_state
        self.target_state = target_state
        self.allowed = tuple(allowed)
        self.detail = detail
        allowed_text = ", ".join(str(s) for s in self.allowed) or "none"
        message = (
            f"Invalid transition: {current_state} -> {target_state}. "
            f"Allowed: [{allowed_text}]"
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnknownExternalStateError(StateMachineError):
    """Valor externo (status de gateway, ação de webhook) fora do vocabulário.

    Nunca é convertido para um estado padrão: um estado não verificado
    corromperia a máquina.
    """

    def __init__(self, value: Any, source: str | None = None) -> None:
        self.value = value
        self.source = source
        origin = f" from {source}" if source else ""
        super().__init__(f"Unknown external payment state{origin}: {value!r}")
