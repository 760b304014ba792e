"""
Render options: what the caller asks for, and the fully resolved record the renderer uses.
None or "" means "unset"; unset fields are replaced by defaults when resolving.
"""
from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from .errors import InvalidOptionsError

# camelCase names accepted from callers that pass JSON-style option objects
_ALIASES: dict[str, str] = {
    "gradientStartColor": "gradient_start_color",
    "gradientStopColor": "gradient_stop_color",
}


@dataclass(frozen=True)
class RenderOptions:
    """Caller-supplied partial options. Any field may be left unset."""
    id: str | int | None = None
    color: str | None = None
    size: float | None = None
    gradient: bool | None = None
    gradient_start_color: str | None = None
    gradient_stop_color: str | None = None


@dataclass(frozen=True)
class ResolvedOptions:
    """Every field present. Produced by resolve_options."""
    color: str = "blue"
    size: float = 16
    gradient: bool = False
    gradient_start_color: str = "blue"
    gradient_stop_color: str = "lightblue"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


DEFAULT_OPTIONS = ResolvedOptions()

_OPTION_FIELDS = frozenset(f.name for f in fields(RenderOptions))


def is_set(value: Any) -> bool:
    """True unless value is None or the empty string."""
    return value is not None and value != ""


def coerce_options(options: RenderOptions | ResolvedOptions | Mapping[str, Any] | None = None, **overrides: Any) -> RenderOptions:
    """
    Normalize any accepted options shape into a RenderOptions.
    Accepts RenderOptions, ResolvedOptions, a mapping (snake_case or camelCase keys) or None.
    Keyword overrides win over the options argument.
    """
    if options is None:
        raw: dict[str, Any] = {}
    elif isinstance(options, RenderOptions):
        raw = asdict(options)
    elif isinstance(options, ResolvedOptions):
        raw = options.to_dict()
    elif isinstance(options, Mapping):
        raw = dict(options)
    else:
        raise InvalidOptionsError(f"Unsupported options type: {type(options).__name__}")
    raw.update(overrides)

    values: dict[str, Any] = {}
    for key, value in raw.items():
        name = _ALIASES.get(key, key)
        if name not in _OPTION_FIELDS:
            raise InvalidOptionsError(f"Unknown render option: {key}", field=key, value=value)
        values[name] = value
    if is_set(values.get("gradient")):
        check_gradient(values["gradient"])
    return RenderOptions(**values)


def check_gradient(gradient: Any) -> bool:
    if not isinstance(gradient, bool):
        raise InvalidOptionsError(f"gradient must be True or False, got {gradient!r}", field="gradient", value=gradient)
    return gradient


def check_size(size: Any) -> float:
    """Positive finite real number; numpy scalars are normalized to int or float."""
    if isinstance(size, bool) or not isinstance(size, numbers.Real):
        raise InvalidOptionsError(f"size must be a number, got {size!r}", field="size", value=size)
    if not math.isfinite(size) or size <= 0:
        raise InvalidOptionsError(f"size must be a positive number, got {size!r}", field="size", value=size)
    return int(size) if isinstance(size, numbers.Integral) else float(size)


def resolve_options(
    options: RenderOptions | ResolvedOptions | Mapping[str, Any] | None = None,
    defaults: ResolvedOptions | None = None,
) -> ResolvedOptions:
    """
    Merge caller options over defaults. Unset (None or "") fields take the default.
    Resolving an already complete record returns an equal record.
    """
    opts = coerce_options(options)
    base = defaults or DEFAULT_OPTIONS
    updates = {
        f.name: getattr(opts, f.name)
        for f in fields(ResolvedOptions)
        if is_set(getattr(opts, f.name))
    }
    resolved = replace(base, **updates)
    return replace(resolved, size=check_size(resolved.size))


def has_explicit_styling(options: RenderOptions) -> bool:
    """A color, or gradient=True with both gradient colors, counts as explicit styling."""
    if is_set(options.color):
        return True
    return options.gradient is True and is_set(options.gradient_start_color) and is_set(options.gradient_stop_color)


def format_size(size: float | None) -> str:
    """Stringify a size the way it appears in markup: 24 -> "24", 24.5 -> "24.5"."""
    if not size:
        return "16"
    if isinstance(size, float) and size.is_integer():
        return str(int(size))
    return str(size)
