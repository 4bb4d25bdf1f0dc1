from dfastack.workflows.workflow import Workflow  # noqa: F401
from dfastack.workflows.automaton import AutomatonWorkflow  # noqa: F401
