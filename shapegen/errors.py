"""
Error kinds raised by the catalogue builder, loader and renderer.
Every error carries its context as attributes so callers can report it.
"""


class ShapegenError(Exception):
    """Base class for all shapegen errors."""


class InvalidIdentifier(ShapegenError, LookupError):
    """Template identifier missing, not an integer, or not in the catalogue."""
    def __init__(self, message: str = "Invalid ID", identifier: object = None):
        super().__init__(message)
        self.identifier = identifier


class MissingIdentifier(InvalidIdentifier):
    """render_by_id called without an identifier."""
    def __init__(self, message: str = "Invalid ID: an id is required"):
        super().__init__(message, identifier=None)


class IdentifierOutOfRange(InvalidIdentifier):
    """Identifier parsed to an integer outside 1..N."""
    def __init__(self, identifier: int, size: int):
        super().__init__(f"Invalid ID: {identifier} is not in 1..{size}", identifier=identifier)
        self.size = size


class EmptyCatalogueError(ShapegenError):
    """No templates to choose from."""


class InvalidOptionsError(ShapegenError, ValueError):
    """Render option failed its bounds check (e.g. size <= 0)."""
    def __init__(self, message: str, field: str = "", value: object = None):
        super().__init__(message)
        self.field = field
        self.value = value


class TemplateError(ShapegenError, ValueError):
    """Template text could not be parsed into a shape template."""
    def __init__(self, message: str, key: int | None = None):
        if key is not None:
            message = f"template {key}: {message}"
        super().__init__(message)
        self.key = key


class CatalogueError(ShapegenError):
    """Catalogue artifact missing, unreadable or malformed."""
    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class CatalogueBuildError(ShapegenError):
    """Template source directory could not be read; nothing was written."""
    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source
