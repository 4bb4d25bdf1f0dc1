from collections import abc
from typing import (
    AbstractSet,
    Dict,
    FrozenSet,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Set,
    Tuple,
)

from dfastack.automaton.errors import FrozenAutomatonError, UnknownStateError, UnknownSymbolError
from dfastack.automaton.nfa import State, Symbol

DFAState = FrozenSet[State]


def sort_symbols(symbols: Iterable[Symbol]) -> List[Symbol]:
    """
    Sort by value, or by type name and string form when values are not comparable.
    """
    symbols = list(symbols)
    try:
        return sorted(symbols)  # type: ignore[type-var]
    except TypeError:
        return sorted(symbols, key=lambda symbol: (type(symbol).__name__, str(symbol)))


class DFA(Generic[State, Symbol]):
    """
    A deterministic finite automaton (DFA) obtained by subset construction.

    Each DFA state is a frozenset of NFA states, so two DFA states are the same
    if and only if they contain the same NFA states. The automaton is filled by
    the construction engine and becomes read-only once `freeze()` is called.

    Args:
        start: The start state.
        alphabet: The symbols the DFA is complete over.
    """

    def __init__(self, start: AbstractSet[State], alphabet: Iterable[Symbol]) -> None:
        self._start: DFAState = frozenset(start)
        self._alphabet: FrozenSet[Symbol] = frozenset(alphabet)
        self._states: List[DFAState] = []
        self._accept_states: Set[DFAState] = set()
        self._transitions: Dict[DFAState, Dict[Symbol, DFAState]] = {}
        self._frozen = False

    def __repr__(self) -> str:
        return (
            f"DFA(start={sort_symbols(self._start)}, num_states={len(self._states)}, "
            f"num_accept_states={len(self._accept_states)})"
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DFA):
            return (
                self._start == other._start
                and self._alphabet == other._alphabet
                and self._accept_states == other._accept_states
                and self._transitions == other._transitions
            )
        return False

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, state: object) -> bool:
        if not isinstance(state, abc.Set):
            return False
        return frozenset(state) in self._transitions

    @property
    def start(self) -> DFAState:
        return self._start

    @property
    def alphabet(self) -> FrozenSet[Symbol]:
        return self._alphabet

    @property
    def states(self) -> Sequence[DFAState]:
        """
        Discovered states in the order they were found.
        """
        return tuple(self._states)

    @property
    def accept_states(self) -> FrozenSet[DFAState]:
        return frozenset(self._accept_states)

    @property
    def transitions(self) -> Mapping[DFAState, Mapping[Symbol, DFAState]]:
        return {source: dict(targets) for source, targets in self._transitions.items()}

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def dead_state(self) -> Optional[DFAState]:
        dead: DFAState = frozenset()
        return dead if dead in self._transitions else None

    def add_state(self, state: AbstractSet[State], accepting: bool = False) -> DFAState:
        self._check_mutable()
        key = frozenset(state)
        if key not in self._transitions:
            self._states.append(key)
            self._transitions[key] = {}
        if accepting:
            self._accept_states.add(key)
        return key

    def add_transition(self, source: AbstractSet[State], symbol: Symbol, target: AbstractSet[State]) -> None:
        self._check_mutable()
        if symbol not in self._alphabet:
            raise UnknownSymbolError(symbol)
        source_key = frozenset(source)
        if source_key not in self._transitions:
            raise UnknownStateError(source_key)
        self._transitions[source_key][symbol] = frozenset(target)

    def freeze(self) -> None:
        self._frozen = True

    def step(self, state: AbstractSet[State], symbol: Symbol) -> DFAState:
        """
        Return the destination of `symbol` from `state`.

        Raises:
            UnknownStateError: If `state` was never discovered.
            UnknownSymbolError: If `symbol` is not in the alphabet.
        """
        key = frozenset(state)
        targets = self._transitions.get(key)
        if targets is None:
            raise UnknownStateError(key)
        if symbol not in self._alphabet:
            raise UnknownSymbolError(symbol, key)
        return targets[symbol]

    def is_accepting(self, state: AbstractSet[State]) -> bool:
        key = frozenset(state)
        if key not in self._transitions:
            raise UnknownStateError(key)
        return key in self._accept_states

    def records(self) -> Iterator[Tuple[DFAState, Symbol, DFAState]]:
        """
        Iterate over `(source, symbol, target)` records grouped by source.
        """
        for source in self._states:
            targets = self._transitions[source]
            for symbol in sort_symbols(targets):
                yield source, symbol, targets[symbol]

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FrozenAutomatonError()
