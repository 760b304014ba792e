"""
Runtime catalogue: the read-only id -> ShapeTemplate mapping loaded from catalogue.json.
Every template is parsed on load, so a malformed template fails here rather than mid-render.
"""
import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from ..errors import CatalogueError
from ..templates import ShapeTemplate

logger = logging.getLogger(__name__)

DEFAULT_CATALOGUE_PATH = Path(__file__).resolve().parent.parent / "data" / "catalogue.json"


class Catalogue(Mapping):
    """Immutable mapping of ids 1..N to parsed templates. Iterates in key order."""

    def __init__(self, templates: Mapping[int, ShapeTemplate], meta: Mapping | None = None):
        keys = sorted(templates)
        if keys != list(range(1, len(keys) + 1)):
            raise CatalogueError(f"Catalogue keys must be 1..{len(keys)} without gaps, got {keys}")
        self._templates = MappingProxyType({k: templates[k] for k in keys})
        self.meta = MappingProxyType(dict(meta or {}))

    @classmethod
    def from_texts(cls, texts: Mapping[int, str], meta: Mapping | None = None) -> "Catalogue":
        """Parse raw template texts (e.g. straight from build_catalogue)."""
        return cls({int(k): ShapeTemplate.parse(v, key=int(k)) for k, v in texts.items()}, meta=meta)

    def __getitem__(self, key: int) -> ShapeTemplate:
        return self._templates[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"Catalogue(size={len(self)})"


def load_catalogue(path: Path | str | None = None) -> Catalogue:
    """Load and parse the catalogue artifact. Defaults to the packaged shapegen/data/catalogue.json."""
    source = Path(path) if path is not None else DEFAULT_CATALOGUE_PATH
    try:
        with open(source, encoding="utf-8") as f:
            doc = json.load(f)
    except FileNotFoundError as e:
        raise CatalogueError(f"Catalogue not found: {source} (run scripts/build_catalogue.py)", path=str(source)) from e
    except (json.JSONDecodeError, OSError) as e:
        raise CatalogueError(f"Cannot read catalogue {source}: {e}", path=str(source)) from e

    templates = doc.get("templates") if isinstance(doc, dict) else None
    if not isinstance(templates, dict):
        raise CatalogueError(f"Catalogue {source} has no 'templates' object", path=str(source))
    try:
        texts = {int(k): v for k, v in templates.items()}
    except ValueError as e:
        raise CatalogueError(f"Catalogue {source} has a non-integer key: {e}", path=str(source)) from e

    catalogue = Catalogue.from_texts(texts, meta=doc.get("_meta"))
    logger.debug("Loaded catalogue %s: %d templates", source, len(catalogue))
    return catalogue
