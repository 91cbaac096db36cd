"""Board configuration and env loading."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from pieceboard.core.models import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH


@dataclass(frozen=True, slots=True)
class BoardConfig:
    canvas_width: int = DEFAULT_CANVAS_WIDTH
    canvas_height: int = DEFAULT_CANVAS_HEIGHT
    # 0.0 means "use the host's reported ratio".
    pixel_ratio: float = 0.0
    background: str = "#ffffff"
    outline_color: str = "#000000"
    outline_width: float = 2.0
    debug_input: bool = False
    window_title: str = "Game Canvas"


_DEFAULT_ENV_FILES = (".env.pieceboard", ".env.pieceboard.local")
_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Copy ``KEY=VALUE`` lines from ``path`` into the process environment.

    Missing files are ignored. Blank lines, comments and lines without ``=``
    are skipped; one pair of matching quotes around a value is stripped.
    """
    env_path = Path(path)
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left-to-right; later files win."""
    for path in paths if paths is not None else _DEFAULT_ENV_FILES:
        load_env_file(path, override_existing=override_existing)


def _value(source: Mapping[str, str], name: str) -> str | None:
    raw = source.get(name)
    if raw is None:
        return None
    return str(raw).strip() or None


def _flag(source: Mapping[str, str], name: str, default: bool) -> bool:
    value = (_value(source, name) or "").lower()
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    return default


def _non_negative(source: Mapping[str, str], name: str, default: float) -> float:
    raw = _value(source, name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value) or value < 0:
        return default
    return value


def _canvas_size(source: Mapping[str, str]) -> tuple[int, int]:
    fallback = (DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT)
    width, sep, height = (_value(source, "PIECEBOARD_CANVAS_SIZE") or "").lower().partition("x")
    if not sep:
        return fallback
    try:
        return max(1, int(width)), max(1, int(height))
    except ValueError:
        return fallback


def _color(source: Mapping[str, str], name: str, default: str) -> str:
    value = _value(source, name) or default
    digits = value.removeprefix("#")
    if digits == value or len(digits) not in {3, 6, 8}:
        return default
    try:
        int(digits, 16)
    except ValueError:
        return default
    return value


def load_board_config(*, env: Mapping[str, str] | None = None) -> BoardConfig:
    """Read board configuration; malformed values fall back to defaults."""
    source = os.environ if env is None else env
    width, height = _canvas_size(source)
    return BoardConfig(
        canvas_width=width,
        canvas_height=height,
        pixel_ratio=_non_negative(source, "PIECEBOARD_PIXEL_RATIO", 0.0),
        background=_color(source, "PIECEBOARD_BACKGROUND", "#ffffff"),
        outline_color=_color(source, "PIECEBOARD_OUTLINE_COLOR", "#000000"),
        outline_width=_non_negative(source, "PIECEBOARD_OUTLINE_WIDTH", 2.0),
        debug_input=_flag(source, "PIECEBOARD_DEBUG_INPUT", False),
        window_title=_value(source, "PIECEBOARD_WINDOW_TITLE") or "Game Canvas",
    )
