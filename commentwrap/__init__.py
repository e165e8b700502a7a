from .version import __version__
from .model import Applied, LineRange, ParsedLine, Selection, SkipReason, Skipped
from .pipeline import ReflowConfig, WRAP_WIDTH, plan_selection, reflow, reflow_selection, reflow_text

__all__ = [
    "__version__",
    "Applied",
    "LineRange",
    "ParsedLine",
    "ReflowConfig",
    "Selection",
    "SkipReason",
    "Skipped",
    "WRAP_WIDTH",
    "plan_selection",
    "reflow",
    "reflow_selection",
    "reflow_text",
]
