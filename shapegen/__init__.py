# shapegen: catalogue of SVG shape templates rendered with color, size and gradient options

from .catalogue import Catalogue, build_catalogue, load_catalogue, write_catalogue
from .errors import (
    CatalogueBuildError,
    CatalogueError,
    EmptyCatalogueError,
    IdentifierOutOfRange,
    InvalidIdentifier,
    InvalidOptionsError,
    MissingIdentifier,
    ShapegenError,
    TemplateError,
)
from .gradients import GradientCounter
from .options import RenderOptions, ResolvedOptions, resolve_options
from .renderer import (
    Renderer,
    get_default_renderer,
    render_all,
    render_by_id,
    render_random,
    reset_default_renderer,
)
from .templates import ShapeTemplate

__all__ = [
    "render_random",
    "render_by_id",
    "render_all",
    "Renderer",
    "get_default_renderer",
    "reset_default_renderer",
    "RenderOptions",
    "ResolvedOptions",
    "resolve_options",
    "GradientCounter",
    "ShapeTemplate",
    "Catalogue",
    "load_catalogue",
    "build_catalogue",
    "write_catalogue",
    "ShapegenError",
    "InvalidIdentifier",
    "MissingIdentifier",
    "IdentifierOutOfRange",
    "EmptyCatalogueError",
    "InvalidOptionsError",
    "TemplateError",
    "CatalogueError",
    "CatalogueBuildError",
]
