import json
from logging import getLogger
from typing import Literal, Optional

import minato

from dfastack.automaton import AutomatonConfig, dfa_to_json, format_dfa
from dfastack.automaton.render import format_state
from dfastack.common import load_jsonnet

from .workflow import Workflow

logger = getLogger(__name__)


@Workflow.register("automaton")
class AutomatonWorkflow(Workflow):
    """convert NFA descriptions into DFAs"""

    @staticmethod
    def _load_config(config_filename: str, overrides: Optional[str]) -> AutomatonConfig:
        logger.info("Loading config from %s", config_filename)
        config = load_jsonnet(minato.cached_path(config_filename), overrides=overrides)
        if not isinstance(config, dict) or "nfa" not in config:
            print("No nfa given.")
            exit(1)
        return AutomatonConfig.from_json(config)

    def convert(
        self,
        config_filename: str,
        *,
        overrides: Optional[str] = None,
        output_format: Literal["text", "json"] = "text",
    ) -> None:
        """convert an NFA into a DFA and print its transition table"""

        automaton_config = self._load_config(config_filename, overrides)
        dfa = automaton_config.convert()

        if output_format == "json":
            print(json.dumps(dfa_to_json(dfa), ensure_ascii=False))
        else:
            print(format_dfa(dfa))

    def show(
        self,
        config_filename: str,
        *,
        overrides: Optional[str] = None,
    ) -> None:
        """print the NFA described by a config"""

        nfa = self._load_config(config_filename, overrides).nfa.build()
        print(f"Start states: {format_state(nfa.start_states)}")
        print(f"Accept states: {format_state(nfa.accept_states)}")
        for source, symbol, target in sorted(nfa.transitions(), key=lambda triple: tuple(map(str, triple))):
            print(f"  {source} --{symbol}--> {target}")
