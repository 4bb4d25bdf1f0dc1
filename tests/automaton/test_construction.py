import itertools
import logging
import random
from typing import FrozenSet, Hashable, Iterable, Sequence, Set

import pytest

from dfastack.automaton import (
    DFA,
    EPSILON,
    NFA,
    InvalidAlphabetError,
    SubsetConstruction,
    UnknownSymbolError,
    convert,
    epsilon_closure,
)


def _ends_with_ba() -> NFA[int, str]:
    nfa = NFA[int, str](start_states={0}, accept_states={2})
    nfa.add_transition(0, "a", 0)
    nfa.add_transition(0, "b", 0)
    nfa.add_transition(0, "b", 1)
    nfa.add_transition(1, "a", 2)
    return nfa


def _random_nfa(seed: int, num_states: int = 6, symbols: str = "ab") -> NFA[int, str]:
    rng = random.Random(seed)
    nfa = NFA[int, str](
        start_states=rng.sample(range(num_states), k=rng.randint(1, 2)),
        accept_states=rng.sample(range(num_states), k=rng.randint(1, 2)),
    )
    for _ in range(rng.randint(num_states, 3 * num_states)):
        symbol = rng.choice(list(symbols) + [EPSILON])
        nfa.add_transition(rng.randrange(num_states), symbol, rng.randrange(num_states))
    return nfa


def _reference_nfa_accepts(nfa: NFA[int, str], word: Sequence[str]) -> bool:
    triples = list(nfa.transitions())

    def close(states: Set[int]) -> Set[int]:
        closed = set(states)
        changed = True
        while changed:
            changed = False
            for source, symbol, target in triples:
                if symbol == EPSILON and source in closed and target not in closed:
                    closed.add(target)
                    changed = True
        return closed

    current = close(set(nfa.start_states))
    for char in word:
        current = close({target for source, symbol, target in triples if source in current and symbol == char})
    return bool(current & nfa.accept_states)


def _dfa_accepts(dfa: DFA[int, str], word: Iterable[str]) -> bool:
    state: FrozenSet[int] = dfa.start
    for char in word:
        state = dfa.step(state, char)
    return dfa.is_accepting(state)


def test_subset_construction_on_example_nfa() -> None:
    dfa = convert(_ends_with_ba(), alphabet={"a", "b"})

    s0, s01, s02 = frozenset({0}), frozenset({0, 1}), frozenset({0, 2})
    assert dfa.start == s0
    assert len(dfa) == 3
    assert set(dfa.states) == {s0, s01, s02}
    assert dfa.transitions == {
        s0: {"a": s0, "b": s01},
        s01: {"a": s02, "b": s01},
        s02: {"a": s0, "b": s01},
    }
    assert dfa.accept_states == {s02}
    assert not dfa.is_accepting(s0)
    assert dfa.dead_state is None


def test_dead_state_loops_to_itself() -> None:
    nfa = NFA[int, str](start_states={0}, accept_states={1})
    nfa.add_transition(0, "a", 1)

    dfa = convert(nfa, alphabet=["a", "b"])

    dead = frozenset()
    assert dfa.dead_state == dead
    assert dfa.step({0}, "b") == dead
    assert dfa.step({1}, "a") == dead
    assert dfa.step(dead, "a") == dead
    assert dfa.step(dead, "b") == dead
    assert not dfa.is_accepting(dead)


def test_start_state_is_closure_of_all_start_states() -> None:
    nfa = NFA[int, str](start_states={0, 10}, accept_states={11})
    nfa.add_transition(0, "a", 1)
    nfa.add_epsilon_transition(10, 11)

    dfa = convert(nfa)

    assert dfa.start == {0, 10, 11}
    assert dfa.is_accepting(dfa.start)
    assert dfa.alphabet == {"a"}


def test_symbols_outside_alphabet_are_not_explored() -> None:
    nfa = _ends_with_ba()
    nfa.add_transition(0, "c", 5)

    dfa = convert(nfa, alphabet=["a", "b"])

    assert all(5 not in state for state in dfa.states)
    with pytest.raises(UnknownSymbolError):
        dfa.step(dfa.start, "c")


def test_alphabet_with_epsilon_is_rejected() -> None:
    with pytest.raises(InvalidAlphabetError):
        SubsetConstruction(_ends_with_ba(), ["a", EPSILON])
    with pytest.raises(ValueError):
        convert(_ends_with_ba(), alphabet=[EPSILON])


def test_unknown_worklist_discipline_is_rejected() -> None:
    with pytest.raises(ValueError):
        SubsetConstruction(_ends_with_ba(), ["a", "b"], worklist="random")  # type: ignore[arg-type]


@pytest.mark.parametrize("seed", range(20))
def test_constructed_dfa_is_total_and_closed(seed: int) -> None:
    nfa = _random_nfa(seed)
    alphabet = ["a", "b"]

    dfa = convert(nfa, alphabet=alphabet)

    assert len(set(dfa.states)) == len(dfa.states)
    for state in dfa.states:
        assert epsilon_closure(nfa, state) == state
        assert set(dfa.transitions[state]) == set(alphabet)
        for symbol in alphabet:
            assert dfa.step(state, symbol) in dfa
        assert dfa.is_accepting(state) == bool(state & nfa.accept_states)


@pytest.mark.parametrize("seed", range(20))
def test_result_does_not_depend_on_exploration_order(seed: int) -> None:
    nfa = _random_nfa(seed, symbols="abc")

    reference = convert(nfa, alphabet=["a", "b", "c"], worklist="fifo")
    for alphabet in itertools.permutations("abc"):
        for worklist in ("fifo", "lifo"):
            dfa = convert(nfa, alphabet=alphabet, worklist=worklist)
            assert dfa == reference
            assert dfa.transitions == reference.transitions
            assert dfa.accept_states == reference.accept_states


@pytest.mark.parametrize("seed", range(20))
def test_dfa_accepts_same_language_as_nfa(seed: int) -> None:
    nfa = _random_nfa(seed)

    dfa = convert(nfa, alphabet="ab")

    for length in range(7):
        for word in itertools.product("ab", repeat=length):
            assert _dfa_accepts(dfa, word) == _reference_nfa_accepts(nfa, word), "".join(word)


def test_states_are_hashable_values_of_any_type() -> None:
    nfa: NFA[Hashable, str] = NFA(start_states={"q0"}, accept_states={("q", 1)})
    nfa.add_transition("q0", "x", ("q", 1))
    nfa.add_epsilon_transition(("q", 1), "q0")

    dfa = convert(nfa)

    assert dfa.step({"q0"}, "x") == {"q0", ("q", 1)}
    assert dfa.is_accepting({"q0", ("q", 1)})


def test_construction_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="dfastack.automaton.construction"):
        convert(_ends_with_ba(), alphabet=["a", "b"])

    assert "Constructed DFA with 3 states (1 accepting) over 2 symbols" in caplog.text


def test_nfa_without_start_states_yields_dead_start() -> None:
    nfa = NFA[int, str](accept_states={1})
    nfa.add_transition(0, "a", 1)

    dfa = convert(nfa, alphabet=["a", "b"])

    assert dfa.start == frozenset()
    assert dfa.dead_state == frozenset()
    assert len(dfa) == 1
    assert dfa.step(dfa.start, "a") == frozenset()
    assert dfa.step(dfa.start, "b") == frozenset()
    assert not dfa.accept_states
