"""Tabela de transições imutável (estado → destinos diretos).

Construída explicitamente uma vez e compartilhada, somente leitura, por todas
as instâncias de máquina do mesmo domínio.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

S = TypeVar("S", bound=Hashable)


class TransitionTable(Mapping[S, tuple[S, ...]], Generic[S]):
    """Mapa somente leitura estado → tupla ordenada de destinos.

    - Estado mapeado para tupla vazia é terminal
    - Todo destino precisa ser também uma chave da tabela
    - A ordem declarada dos destinos é preservada
    """

    __slots__ = ("_name", "_destinations", "_canonical")

    def __init__(self, transitions: Mapping[S, Iterable[S]], name: str = "") -> None:
        # dict.fromkeys deduplica preservando ordem
        frozen = {state: tuple(dict.fromkeys(dests)) for state, dests in transitions.items()}
        unknown = sorted(
            {str(d) for dests in frozen.values() for d in dests if d not in frozen}
        )
        if unknown:
            raise ValueError(
                f"Transition table {name or '<anonymous>'} references undeclared states: {unknown}"
            )
        self._name = name
        self._destinations: Mapping[S, tuple[S, ...]] = MappingProxyType(frozen)
        self._canonical: Mapping[S, S] = MappingProxyType({state: state for state in frozen})

    @property
    def name(self) -> str:
        return self._name

    @property
    def states(self) -> tuple[S, ...]:
        """Todos os estados declarados, na ordem da tabela."""
        return tuple(self._destinations)

    @property
    def terminal_states(self) -> frozenset[S]:
        return frozenset(s for s, dests in self._destinations.items() if not dests)

    def destinations(self, state: S) -> tuple[S, ...]:
        """Destinos diretos; estado ausente equivale a terminal."""
        return self._destinations.get(state, ())

    def allows(self, source: S, target: S) -> bool:
        return target in self.destinations(source)

    def is_terminal(self, state: S) -> bool:
        return not self.destinations(state)

    def parse(self, value: object) -> S:
        """Retorna a chave canônica igual a `value` (ex.: str → StrEnum).

        Levanta ValueError se o valor não pertence ao conjunto de estados.
        """
        try:
            return self._canonical[value]  # type: ignore[index]
        except (KeyError, TypeError):
            raise ValueError(
                f"State {value!r} is not declared in transition table {self._name or '<anonymous>'}"
            ) from None

    def __getitem__(self, state: S) -> tuple[S, ...]:
        return self._destinations[state]

    def __iter__(self) -> Iterator[S]:
        return iter(self._destinations)

    def __len__(self) -> int:
        return len(self._destinations)

    def __repr__(self) -> str:
        return f"TransitionTable(name={self._name!r}, states={len(self)})"
