from collections import defaultdict
from typing import AbstractSet, Dict, FrozenSet, Generic, Hashable, Iterable, Optional, Set, Tuple, TypeVar

State = TypeVar("State", bound=Hashable)
Symbol = TypeVar("Symbol", bound=Hashable)

EPSILON = "ε"

_EMPTY: FrozenSet = frozenset()


class NFA(Generic[State, Symbol]):
    """
    A nondeterministic finite automaton (NFA)

    States are opaque hashable identifiers and are implied by the transitions
    and the start / accept sets. Several start states are allowed.

    Args:
        start_states: The start states.
        accept_states: The accept states.
        epsilon: The symbol reserved for epsilon transitions.
    """

    def __init__(
        self,
        start_states: Iterable[State] = (),
        accept_states: Iterable[State] = (),
        epsilon: Hashable = EPSILON,
    ) -> None:
        self.start_states: Set[State] = set(start_states)
        self.accept_states: Set[State] = set(accept_states)
        self.epsilon = epsilon
        self._transitions: Dict[State, Dict[Hashable, Set[State]]] = defaultdict(lambda: defaultdict(set))

    @classmethod
    def from_triples(
        cls,
        transitions: Iterable[Tuple[State, Optional[Symbol], State]],
        start_states: Iterable[State],
        accept_states: Iterable[State],
        epsilon: Hashable = EPSILON,
    ) -> "NFA[State, Symbol]":
        """
        Create an NFA from `(source, symbol, target)` triples. A `None` symbol
        is read as epsilon.
        """
        nfa = cls(start_states, accept_states, epsilon=epsilon)
        for source, symbol, target in transitions:
            nfa.add_transition(source, epsilon if symbol is None else symbol, target)
        return nfa

    def __repr__(self) -> str:
        return f"NFA(start_states={self.start_states}, accept_states={self.accept_states})"

    def add_transition(self, source: State, symbol: Hashable, target: State) -> None:
        self._transitions[source][symbol].add(target)

    def add_epsilon_transition(self, source: State, target: State) -> None:
        self.add_transition(source, self.epsilon, target)

    def transitions_for(self, state: State, symbol: Hashable) -> FrozenSet[State]:
        """
        Return destinations of `(state, symbol)`, or an empty set if there is no
        such transition.
        """
        by_symbol = self._transitions.get(state)
        if by_symbol is None:
            return _EMPTY
        targets = by_symbol.get(symbol)
        return frozenset(targets) if targets else _EMPTY

    def epsilon_transitions_for(self, state: State) -> FrozenSet[State]:
        return self.transitions_for(state, self.epsilon)

    def transitions(self) -> Iterable[Tuple[State, Hashable, State]]:
        for source, by_symbol in self._transitions.items():
            for symbol, targets in by_symbol.items():
                for target in targets:
                    yield source, symbol, target

    def states(self) -> Set[State]:
        states = set(self.start_states) | set(self.accept_states)
        for source, _, target in self.transitions():
            states.add(source)
            states.add(target)
        return states

    def symbols(self) -> Set[Symbol]:
        """
        Return symbols appearing on non-epsilon transitions.
        """
        return {symbol for _, symbol, _ in self.transitions() if symbol != self.epsilon}  # type: ignore[misc]

    def is_accepting(self, states: AbstractSet[State]) -> bool:
        return not self.accept_states.isdisjoint(states)
