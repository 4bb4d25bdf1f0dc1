import dataclasses
from typing import Any, Optional, Sequence, cast

from dfastack.automaton.construction import WorklistDiscipline, convert
from dfastack.automaton.dfa import DFA
from dfastack.automaton.nfa import EPSILON, NFA
from dfastack.common.jsonnet import FromJsonnet


@dataclasses.dataclass
class NFAConfig:
    """
    NFA description given as `[source, symbol, target]` triples. A `null`
    symbol stands for epsilon.
    """

    transitions: Sequence[Any]
    start_states: Sequence[int]
    accept_states: Sequence[int]
    epsilon: str = EPSILON

    def build(self) -> NFA[int, str]:
        triples = []
        for index, transition in enumerate(self.transitions):
            if not isinstance(transition, (list, tuple)) or len(transition) != 3:
                raise ValueError(f"transitions[{index}] must be a [source, symbol, target] triple, got {transition}")
            source, symbol, target = transition
            triples.append((source, symbol, target))
        return NFA.from_triples(triples, self.start_states, self.accept_states, epsilon=self.epsilon)


@dataclasses.dataclass
class ConversionConfig:
    worklist: str = "fifo"
    alphabet: Optional[Sequence[str]] = None

    def __post_init__(self) -> None:
        if self.worklist not in ("fifo", "lifo"):
            raise ValueError(f"worklist must be one of 'fifo' or 'lifo', got {self.worklist}")


@dataclasses.dataclass
class AutomatonConfig(FromJsonnet):
    nfa: NFAConfig
    conversion: ConversionConfig = dataclasses.field(default_factory=ConversionConfig)

    def convert(self) -> DFA[int, str]:
        nfa = self.nfa.build()
        alphabet = self.conversion.alphabet
        if alphabet is not None:
            # null reads as epsilon, as in transitions
            alphabet = [nfa.epsilon if symbol is None else symbol for symbol in alphabet]
        return convert(
            nfa,
            alphabet=alphabet,
            worklist=cast(WorklistDiscipline, self.conversion.worklist),
        )
