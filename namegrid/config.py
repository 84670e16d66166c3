import json
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

import pytesseract

from namegrid.layout.columns import COLUMN_BOUND
from namegrid.layout.gaps import GAP_HALF_WINDOW
from namegrid.layout.model import PLACEHOLDER_TEXT

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
CONFIG_DIR = os.path.join(PROJECT_ROOT, "config")
DEPENDENCIES_PATH = os.path.join(CONFIG_DIR, "dependencies.json")
LAYOUT_CONFIG_PATH = os.path.join(CONFIG_DIR, "layout.json")


@dataclass(frozen=True)
class LayoutSettings:
    column_bound: int = COLUMN_BOUND
    gap_half_window: int = GAP_HALF_WINDOW
    placeholder_text: str = PLACEHOLDER_TEXT
    tesseract_lang: str = "eng"
    conf_threshold: int = 30

    def with_overrides(self, **overrides: Any) -> "LayoutSettings":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _resolve_path(base: str, relative: str) -> str:
    return os.path.abspath(os.path.join(base, relative))


def _read_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return data


def configure_dependencies(path: str = DEPENDENCIES_PATH) -> Optional[str]:
    """Point pytesseract at the binary configured in config/dependencies.json.

    Returns the absolute Tesseract path that was applied, or None.
    """
    if not os.path.exists(path):
        print(f"Warning: dependencies.json not found at {path}")
        return None

    try:
        deps = _read_json(path)
    except Exception as exc:
        print(f"Warning: Could not load dependencies from {path}: {exc}")
        return None

    tess_rel = deps.get("tesseract_path")
    if not tess_rel:
        return None
    tess_abs = _resolve_path(PROJECT_ROOT, tess_rel)
    if not os.path.exists(tess_abs):
        print(f"Warning: Tesseract path from config does not exist: {tess_abs}")
        return None
    pytesseract.pytesseract.tesseract_cmd = tess_abs
    return tess_abs


def load_layout_settings(path: str = LAYOUT_CONFIG_PATH) -> LayoutSettings:
    """Load layout thresholds from config/layout.json, falling back to defaults.

    Unknown keys are ignored; a missing file silently yields the defaults.
    """
    defaults = LayoutSettings()
    if not os.path.exists(path):
        return defaults
    try:
        data = _read_json(path)
    except Exception as exc:
        print(f"Warning: Could not load layout settings from {path}: {exc}")
        return defaults

    values: Dict[str, Any] = {}
    for f in fields(LayoutSettings):
        if f.name not in data:
            continue
        default_value = getattr(defaults, f.name)
        try:
            values[f.name] = type(default_value)(data[f.name])
        except (TypeError, ValueError):
            print(f"Warning: ignoring invalid value for '{f.name}' in {path}: {data[f.name]!r}")
    return replace(defaults, **values)
