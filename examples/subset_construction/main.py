import argparse

from dfastack.automaton import EPSILON, NFA, convert, format_dfa


def build_nfa(with_epsilon: bool) -> NFA[int, str]:
    # strings over {a, b} ending with "ba"
    nfa = NFA[int, str](start_states={0}, accept_states={2})
    nfa.add_transition(0, "a", 0)
    nfa.add_transition(0, "b", 0)
    nfa.add_transition(0, "b", 1)
    nfa.add_transition(1, "a", 2)
    if with_epsilon:
        # ... or the empty string
        nfa.start_states.add(3)
        nfa.add_transition(3, EPSILON, 2)
    return nfa


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--with-epsilon", action="store_true")
    parser.add_argument("--worklist", choices=["fifo", "lifo"], default="fifo")
    args = parser.parse_args()

    dfa = convert(build_nfa(args.with_epsilon), alphabet={"a", "b"}, worklist=args.worklist)
    print(format_dfa(dfa))


if __name__ == "__main__":
    import logging

    logging.basicConfig(level=logging.INFO)

    main()
