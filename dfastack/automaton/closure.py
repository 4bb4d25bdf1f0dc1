from typing import FrozenSet, Hashable, Iterable, List, Set

from dfastack.automaton.nfa import NFA, State


def epsilon_closure(nfa: NFA[State, Hashable], states: Iterable[State]) -> FrozenSet[State]:
    """
    Compute the set of states reachable from `states` through zero or more
    epsilon transitions.

    Args:
        nfa: The NFA.
        states: The initial states.

    Returns:
        The smallest superset of `states` closed under epsilon transitions.
    """

    closure: Set[State] = set(states)
    stack: List[State] = list(closure)

    while stack:
        state = stack.pop()
        for next_state in nfa.epsilon_transitions_for(state):
            if next_state not in closure:
                closure.add(next_state)
                stack.append(next_state)

    return frozenset(closure)


def move(nfa: NFA[State, Hashable], states: Iterable[State], symbol: Hashable) -> FrozenSet[State]:
    """
    Return the union of the destinations of `symbol` over `states`.
    """

    targets: Set[State] = set()
    for state in states:
        targets.update(nfa.transitions_for(state, symbol))
    return frozenset(targets)
