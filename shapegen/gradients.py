"""
Fill values and gradient definitions.
Each gradient-bearing render mints a fresh id (grad-0, grad-1, ...) from a GradientCounter,
so several shapes in one document never share a gradient id.
"""
import threading

from .options import ResolvedOptions

GRADIENT_START_OFFSET = "5%"
GRADIENT_STOP_OFFSET = "95%"


class GradientCounter:
    """Monotonic counter for gradient ids. Thread-safe; never reset."""

    def __init__(self, start: int = 0, prefix: str = "grad"):
        self._next = start
        self._prefix = prefix
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """Number the next minted id will carry."""
        return self._next

    def mint(self) -> str:
        with self._lock:
            n = self._next
            self._next += 1
        return f"{self._prefix}-{n}"


def gradient_definition(gradient_id: str, start_color: str, stop_color: str) -> str:
    """A <defs> block holding one diagonal linear gradient with stops at 5% and 95%."""
    return (
        "<defs>"
        f'<linearGradient id="{gradient_id}" x1="0" y1="0" x2="1" y2="1">'
        f'<stop offset="{GRADIENT_START_OFFSET}" stop-color="{start_color}" />'
        f'<stop offset="{GRADIENT_STOP_OFFSET}" stop-color="{stop_color}" />'
        "</linearGradient>"
        "</defs>"
    )


def build_fill(options: ResolvedOptions, counter: GradientCounter) -> tuple[str, str]:
    """
    Return (fill, defs) for resolved options.
    Gradient on: fill references a freshly minted id and defs holds its definition.
    Gradient off: fill is the color and defs is empty; no id is minted.
    """
    if not options.gradient:
        return options.color, ""
    gradient_id = counter.mint()
    defs = gradient_definition(gradient_id, options.gradient_start_color, options.gradient_stop_color)
    return f"url(#{gradient_id})", defs
