from typing import AbstractSet, Any, Dict, Hashable, List

from dfastack.automaton.dfa import DFA, sort_symbols


def _sorted_state(state: AbstractSet[Hashable]) -> List[Hashable]:
    return sort_symbols(state)


def format_state(state: AbstractSet[Hashable]) -> str:
    return "{" + ", ".join(str(item) for item in _sorted_state(state)) + "}"


def format_dfa(dfa: DFA) -> str:
    """
    Render the transition table of a DFA grouped by source state.
    """

    lines = ["DFA Transitions:"]
    for state in dfa.states:
        markers = []
        if state == dfa.start:
            markers.append("start")
        if dfa.is_accepting(state):
            markers.append("accept")
        header = f"From state(s) {format_state(state)}"
        if markers:
            header += f" ({', '.join(markers)})"
        lines.append(header + ":")
        for symbol in sort_symbols(dfa.alphabet):
            lines.append(f"  --{symbol}--> {format_state(dfa.step(state, symbol))}")
    return "\n".join(lines)


def dfa_to_json(dfa: DFA) -> Dict[str, Any]:
    return {
        "start": _sorted_state(dfa.start),
        "alphabet": sort_symbols(dfa.alphabet),
        "accept_states": [_sorted_state(state) for state in dfa.states if dfa.is_accepting(state)],
        "transitions": [
            {"source": _sorted_state(source), "symbol": symbol, "target": _sorted_state(target)}
            for source, symbol, target in dfa.records()
        ],
    }
