# Catalogue: build-time generation (builder) and runtime loading (store)

from .builder import build_catalogue, list_template_files, write_catalogue
from .store import DEFAULT_CATALOGUE_PATH, Catalogue, load_catalogue

__all__ = [
    "build_catalogue",
    "list_template_files",
    "write_catalogue",
    "Catalogue",
    "load_catalogue",
    "DEFAULT_CATALOGUE_PATH",
]
