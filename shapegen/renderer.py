"""
Template renderer: catalogue + options -> finished SVG markup.
Three entry points: render_random (uniform draw), render_by_id (catalogue key), render_all (every template).
A Renderer owns its gradient counter and random generator; module-level functions share a default one.
"""
import logging
import threading
from collections.abc import Mapping
from typing import Any

import numpy as np

from .catalogue.store import Catalogue, load_catalogue
from .config import builtin_config, get_viewbox, resolve_render_defaults
from .data.pairings import COLOR_PAIRINGS, PAIRING_HUES
from .errors import EmptyCatalogueError, IdentifierOutOfRange, InvalidIdentifier, MissingIdentifier
from .gradients import GradientCounter, build_fill
from .options import (
    RenderOptions,
    ResolvedOptions,
    coerce_options,
    format_size,
    has_explicit_styling,
    is_set,
    resolve_options,
)
from .templates import ShapeTemplate

logger = logging.getLogger(__name__)

OptionsLike = RenderOptions | ResolvedOptions | Mapping[str, Any] | None


class Renderer:
    """
    Renders catalogue templates with resolved options.

    catalogue: defaults to the packaged catalogue.
    counter: gradient id source; pass one in to share ids across renderers in one document.
    rng / seed: numpy Generator for template and hue draws (seed makes draws reproducible).
    defaults: render defaults; otherwise taken from config["render"].
    config: defaults to the built-in config; scripts pass load_config() to use the YAML file.
    """

    def __init__(
        self,
        catalogue: Catalogue | None = None,
        *,
        counter: GradientCounter | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        defaults: ResolvedOptions | None = None,
        config: dict[str, Any] | None = None,
    ):
        if config is None:
            config = builtin_config()
        self.catalogue = catalogue if catalogue is not None else load_catalogue()
        self.counter = counter or GradientCounter()
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self.defaults = defaults or resolve_render_defaults(config)
        self.viewbox = get_viewbox(config)

    def __repr__(self) -> str:
        return f"Renderer(catalogue={self.catalogue!r}, next_gradient={self.counter.value})"

    def _render(self, template: ShapeTemplate, options: ResolvedOptions) -> str:
        fill, defs = build_fill(options, self.counter)
        logger.debug("Rendering template %s: fill=%s size=%s", template.key, fill, options.size)
        return template.render(fill, format_size(options.size), defs, viewbox=self.viewbox)

    def random_key(self) -> int:
        """Uniform draw over 1..N."""
        if not self.catalogue:
            raise EmptyCatalogueError("Cannot pick a random template: the catalogue is empty")
        return int(self._rng.integers(1, len(self.catalogue) + 1))

    def random_hue(self) -> str:
        return PAIRING_HUES[int(self._rng.integers(len(PAIRING_HUES)))]

    def resolve_identifier(self, identifier: Any) -> int:
        """
        Turn a caller id into a catalogue key.
        Raises MissingIdentifier, InvalidIdentifier (not an integer) or IdentifierOutOfRange.
        """
        if not is_set(identifier):
            raise MissingIdentifier()
        if isinstance(identifier, bool):
            raise InvalidIdentifier(f"Invalid ID: {identifier!r}", identifier=identifier)
        if isinstance(identifier, int):
            key = identifier
        elif isinstance(identifier, float) and identifier.is_integer():
            key = int(identifier)
        elif isinstance(identifier, str):
            try:
                key = int(identifier.strip())
            except ValueError as e:
                raise InvalidIdentifier(f"Invalid ID: {identifier!r} is not an integer", identifier=identifier) from e
        else:
            raise InvalidIdentifier(f"Invalid ID: {identifier!r}", identifier=identifier)
        if key not in self.catalogue:
            raise IdentifierOutOfRange(key, len(self.catalogue))
        return key

    def render_random(self, options: OptionsLike = None, **kwargs: Any) -> str:
        """One template drawn uniformly at random, styled with the resolved options."""
        resolved = resolve_options(coerce_options(options, **kwargs), self.defaults)
        template = self.catalogue[self.random_key()]
        return self._render(template, resolved)

    def render_by_id(self, options: OptionsLike = None, **kwargs: Any) -> str:
        """The template with key options.id. Any identifier problem surfaces as InvalidIdentifier."""
        opts = coerce_options(options, **kwargs)
        key = self.resolve_identifier(opts.id)
        resolved = resolve_options(opts, self.defaults)
        return self._render(self.catalogue[key], resolved)

    def render_all(self, options: OptionsLike = None, **kwargs: Any) -> list[str]:
        """
        Every template, in key order.
        With explicit styling (a color, or gradient=True plus both gradient colors) all share it.
        Otherwise each template gets a random hue pairing as a gradient.
        """
        opts = coerce_options(options, **kwargs)
        if has_explicit_styling(opts):
            resolved = resolve_options(opts, self.defaults)
            return [self._render(template, resolved) for template in self.catalogue.values()]

        size = opts.size if is_set(opts.size) else self.defaults.size
        out: list[str] = []
        for template in self.catalogue.values():
            hue = self.random_hue()
            start, stop = COLOR_PAIRINGS[hue]
            resolved = resolve_options(
                RenderOptions(
                    color=hue,
                    size=size,
                    gradient=True,
                    gradient_start_color=start,
                    gradient_stop_color=stop,
                ),
                self.defaults,
            )
            out.append(self._render(template, resolved))
        return out


_default_renderer: Renderer | None = None
_default_lock = threading.Lock()


def get_default_renderer() -> Renderer:
    """Process-wide renderer over the packaged catalogue, created on first use."""
    global _default_renderer
    with _default_lock:
        if _default_renderer is None:
            _default_renderer = Renderer()
        return _default_renderer


def reset_default_renderer(renderer: Renderer | None = None) -> None:
    """Replace (or drop) the default renderer. Mainly for tests and embedding apps."""
    global _default_renderer
    with _default_lock:
        _default_renderer = renderer


def render_random(options: OptionsLike = None, **kwargs: Any) -> str:
    return get_default_renderer().render_random(options, **kwargs)


def render_by_id(options: OptionsLike = None, **kwargs: Any) -> str:
    return get_default_renderer().render_by_id(options, **kwargs)


def render_all(options: OptionsLike = None, **kwargs: Any) -> list[str]:
    return get_default_renderer().render_all(options, **kwargs)
