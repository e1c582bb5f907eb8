"""Output settings for generated ``.scad`` files."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path

from yapscad import __version__ as _yapscad_version

logger = logging.getLogger(__name__)

DEFAULT_HEADER = f"/* Code generated by yapSCAD {_yapscad_version} */"
DEFAULT_RENDER_NAME = "yapscad_render"


@dataclass(frozen=True)
class OutputSettings:
    """Header, module name and invocation options used when writing files.

    ``render_name`` is the name of the module that wraps the rendered
    body.  When ``call_render_function`` is true the file ends with a
    call to that module, so opening the file in OpenSCAD shows the
    model right away.
    """

    header: str = DEFAULT_HEADER
    render_name: str = DEFAULT_RENDER_NAME
    call_render_function: bool = True
    openscad_path: str = "openscad"

    @classmethod
    def load(cls, path: Path | str) -> "OutputSettings":
        """Read settings from a YAML mapping; missing keys keep their defaults."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"settings file not found: {path}")
        import yaml

        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
        if not isinstance(data, dict):
            raise ValueError(f"settings file {path} does not contain a mapping")
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown settings in {path}: {', '.join(unknown)}")
        logger.debug("loaded output settings from %s", path)
        return cls(**data)

    def save(self, path: Path | str) -> None:
        import yaml

        path = Path(path)
        with path.open("w", encoding="utf-8") as fp:
            yaml.safe_dump(dataclasses.asdict(self), fp, sort_keys=False)


_current = OutputSettings()


def current() -> OutputSettings:
    """Return the process-wide output settings."""
    return _current


def configure(settings: OutputSettings | None = None, **changes) -> OutputSettings:
    """Replace the process-wide output settings.

    ``settings`` (default: the current settings) is used as the base and
    ``changes`` override individual fields.
    """
    global _current
    base = settings if settings is not None else _current
    _current = dataclasses.replace(base, **changes)
    return _current
