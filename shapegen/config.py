"""
Load and expose app config (YAML). Used for render defaults and catalogue build paths.
"""
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    merged = _defaults()
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged


def _defaults() -> dict[str, Any]:
    return {
        "render": {
            "color": "blue",
            "size": 16,
            "gradient": False,
            "gradient_start_color": "blue",
            "gradient_stop_color": "lightblue",
            "viewbox": "0 0 200 200",
        },
        "catalogue": {
            "source_dir": "shapes",
            "output": "shapegen/data/catalogue.json",
            "extension": ".svg",
        },
    }


def builtin_config() -> dict[str, Any]:
    """Built-in defaults only; reads nothing from disk. Used by the runtime renderer."""
    return _defaults()


def resolve_render_defaults(config: dict[str, Any] | None = None):
    """
    Render defaults from config as a ResolvedOptions (missing keys fall back to built-ins).
    Raises InvalidOptionsError for a bad size or non-boolean gradient, so a broken config fails here.
    """
    from .options import ResolvedOptions, check_gradient, check_size

    base = _defaults()["render"]
    render = {**base, **((config or {}).get("render") or {})}
    return ResolvedOptions(
        color=render["color"] or base["color"],
        size=check_size(render["size"] or base["size"]),
        gradient=check_gradient(render["gradient"] if render["gradient"] is not None else base["gradient"]),
        gradient_start_color=render["gradient_start_color"] or base["gradient_start_color"],
        gradient_stop_color=render["gradient_stop_color"] or base["gradient_stop_color"],
    )


def get_viewbox(config: dict[str, Any] | None = None) -> str:
    render = (config or {}).get("render") or {}
    return render.get("viewbox") or _defaults()["render"]["viewbox"]


def _resolve(p: str | Path) -> Path:
    path = Path(p)
    if not path.is_absolute():
        path = _project_root() / path
    return path


def get_catalogue_paths(config: dict[str, Any] | None = None) -> tuple[Path, Path, str]:
    """Resolve (source_dir, output_path, extension) relative to the project root if needed."""
    base = _defaults()["catalogue"]
    cat = {**base, **((config or {}).get("catalogue") or {})}
    return _resolve(cat["source_dir"]), _resolve(cat["output"]), cat["extension"] or base["extension"]
