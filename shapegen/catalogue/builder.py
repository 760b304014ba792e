"""
Build-time catalogue generation: a directory of .svg templates -> catalogue.json.
Keys are 1-based positions in sorted file order. Runs offline (scripts/build_catalogue.py),
never on the render path.
"""
import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from ..errors import CatalogueBuildError

logger = logging.getLogger(__name__)

CATALOGUE_FORMAT_VERSION = 1


def list_template_files(directory: Path | str, extension: str = ".svg") -> list[Path]:
    """Template files in directory with the given extension, sorted by name."""
    source = Path(directory)
    try:
        entries = list(source.iterdir())
    except OSError as e:
        raise CatalogueBuildError(f"Cannot read template directory {source}: {e}", source=str(source)) from e
    ext = extension.lower()
    return sorted(p for p in entries if p.is_file() and p.suffix.lower() == ext)


def _read_template(path: Path) -> str:
    raw = path.read_bytes()
    text = raw.decode("utf-8", errors="replace")
    if "\ufffd" in text and b"\xef\xbf\xbd" not in raw:
        logger.warning("Template %s is not valid UTF-8; undecodable bytes replaced", path.name)
    return text.strip()


def build_catalogue(directory: Path | str, extension: str = ".svg") -> dict[int, str]:
    """
    Read every template file and key it by position + 1.
    Any read failure aborts the whole build; no partial catalogue is returned.
    """
    files = list_template_files(directory, extension)
    catalogue: dict[int, str] = {}
    for index, path in enumerate(files):
        try:
            catalogue[index + 1] = _read_template(path)
        except OSError as e:
            raise CatalogueBuildError(f"Cannot read template {path}: {e}", source=str(directory)) from e
    if not catalogue:
        logger.warning("No %s templates found in %s", extension, directory)
    logger.info("Built catalogue: %d templates from %s", len(catalogue), directory)
    return catalogue


def catalogue_document(mapping: dict[int, str], *, source: str | None = None) -> dict:
    """JSON-ready catalogue: _meta block plus templates keyed by stringified id."""
    return {
        "_meta": {
            "version": CATALOGUE_FORMAT_VERSION,
            "count": len(mapping),
            "source": source or "",
            "built_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        },
        "templates": {str(key): mapping[key] for key in sorted(mapping)},
    }


def write_catalogue(mapping: dict[int, str], path: Path | str, *, source: str | None = None) -> Path:
    """Write the catalogue artifact. Written to a temp file and renamed, so readers never see a partial file."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    doc = catalogue_document(mapping, source=source)
    fd, tmp_name = tempfile.mkstemp(prefix=".catalogue-", suffix=".json", dir=out.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(doc, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_name, out)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.info("Wrote catalogue (%d templates) to %s", len(mapping), out)
    return out
