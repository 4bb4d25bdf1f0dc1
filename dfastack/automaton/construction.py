from collections import deque
from logging import getLogger
from typing import Deque, Dict, Generic, Iterable, List, Literal, Optional

from dfastack.automaton.closure import epsilon_closure, move
from dfastack.automaton.dfa import DFA, DFAState
from dfastack.automaton.errors import InvalidAlphabetError
from dfastack.automaton.nfa import NFA, State, Symbol

logger = getLogger(__name__)

WorklistDiscipline = Literal["fifo", "lifo"]


class SubsetConstruction(Generic[State, Symbol]):
    """
    Subset construction of a DFA from an NFA.

    Starting from the epsilon closure of the NFA start states, states are popped
    from a worklist and expanded over every alphabet symbol. Only subsets
    reachable from the start state are materialized. The empty set is kept as
    an ordinary (dead) state.

    Args:
        nfa: The NFA to convert.
        alphabet: The symbols to explore. Symbols used by the NFA but missing
            from the alphabet are never followed.
        worklist: `"fifo"` for breadth-first or `"lifo"` for depth-first
            exploration. The resulting DFA does not depend on it.
    """

    def __init__(
        self,
        nfa: NFA[State, Symbol],
        alphabet: Iterable[Symbol],
        worklist: WorklistDiscipline = "fifo",
    ) -> None:
        if worklist not in ("fifo", "lifo"):
            raise ValueError(f"worklist must be one of 'fifo' or 'lifo', got {worklist}")

        alphabet = list(dict.fromkeys(alphabet))
        if nfa.epsilon in alphabet:
            raise InvalidAlphabetError(nfa.epsilon)

        self._nfa = nfa
        self._alphabet: List[Symbol] = alphabet
        self._worklist = worklist

    def _pop(self, queue: Deque[DFAState]) -> DFAState:
        if self._worklist == "fifo":
            return queue.popleft()
        return queue.pop()

    def run(self) -> DFA[State, Symbol]:
        registry: Dict[DFAState, DFAState] = {}
        queue: Deque[DFAState] = deque()

        start = epsilon_closure(self._nfa, self._nfa.start_states)
        dfa = DFA[State, Symbol](start, self._alphabet)
        registry[start] = start
        queue.append(start)

        while queue:
            current = self._pop(queue)
            dfa.add_state(current, accepting=self._nfa.is_accepting(current))

            for symbol in self._alphabet:
                next_state = epsilon_closure(self._nfa, move(self._nfa, current, symbol))
                if next_state not in registry:
                    logger.debug("Discovered state %s", sorted(next_state, key=str))
                    registry[next_state] = next_state
                    dfa.add_state(next_state)
                    queue.append(next_state)
                dfa.add_transition(current, symbol, registry[next_state])

        dfa.freeze()
        logger.info(
            "Constructed DFA with %d states (%d accepting) over %d symbols",
            len(dfa),
            len(dfa.accept_states),
            len(self._alphabet),
        )
        return dfa


def convert(
    nfa: NFA[State, Symbol],
    alphabet: Optional[Iterable[Symbol]] = None,
    worklist: WorklistDiscipline = "fifo",
) -> DFA[State, Symbol]:
    """
    Convert an NFA into an equivalent DFA.

    If `alphabet` is not given, the non-epsilon symbols of the NFA are used.
    """
    if alphabet is None:
        alphabet = nfa.symbols()
    return SubsetConstruction(nfa, alphabet, worklist=worklist).run()
