from dfastack.automaton.closure import epsilon_closure, move  # noqa: F401
from dfastack.automaton.config import AutomatonConfig, ConversionConfig, NFAConfig  # noqa: F401
from dfastack.automaton.construction import SubsetConstruction, convert  # noqa: F401
from dfastack.automaton.dfa import DFA, DFAState  # noqa: F401
from dfastack.automaton.errors import (  # noqa: F401
    AutomatonError,
    FrozenAutomatonError,
    InvalidAlphabetError,
    UnknownStateError,
    UnknownSymbolError,
)
from dfastack.automaton.nfa import EPSILON, NFA  # noqa: F401
from dfastack.automaton.render import dfa_to_json, format_dfa  # noqa: F401
