"""Write yapSCAD node trees to ``.scad`` files and hand them to OpenSCAD."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from yapscad import settings as _settings
from yapscad.render import NEWLINE, module_block, statement

logger = logging.getLogger(__name__)

SCAD_SUFFIX = '.scad'


class InvokerError(Exception):
    """Error while running the OpenSCAD executable."""
    pass


def scad_path(path) -> Path:
    """Return ``path`` with the ``.scad`` suffix appended when missing."""
    text = str(path)
    if not text.endswith(SCAD_SUFFIX):
        text += SCAD_SUFFIX
    return Path(text)


def scad_text(node, settings: Optional[_settings.OutputSettings] = None) -> str:
    """Return the complete file contents for ``node``.

    The file holds the settings header, the rendered node wrapped in
    ``module <render_name>()`` and, if enabled, a call to that module.
    """
    settings = settings or _settings.current()
    text = settings.header + NEWLINE
    text += module_block(settings.render_name, node.render())
    if settings.call_render_function:
        text += statement(f"{settings.render_name}()")
    return text


def write_scad(node, path, settings: Optional[_settings.OutputSettings] = None) -> "ScadInvoker":
    """Write ``node`` to ``path`` and return a ``ScadInvoker`` for the file."""
    settings = settings or _settings.current()
    target = scad_path(path)
    text = scad_text(node, settings)
    with target.open('w', encoding='utf-8', newline='\n') as fp:
        fp.write(text)
    logger.info("wrote %s (%d bytes)", target, len(text))
    return ScadInvoker(target, settings.openscad_path)


class ScadInvoker:
    """Runs the OpenSCAD executable on a written ``.scad`` file."""

    def __init__(self, path, executable: str = 'openscad'):
        self.path = Path(path)
        self.executable = executable

    def __repr__(self):
        return f"ScadInvoker({str(self.path)!r},{self.executable!r})"

    def open(self) -> subprocess.Popen:
        """Open the file in the OpenSCAD GUI without waiting for it to exit."""
        cmd = [self.executable, str(self.path)]
        logger.info("launching %s", ' '.join(cmd))
        try:
            return subprocess.Popen(cmd)
        except FileNotFoundError:
            raise InvokerError(f"OpenSCAD executable not found: {self.executable}")

    def export(self, output, extra_args: Sequence[str] = ()) -> Path:
        """Render the file to ``output`` (STL, OFF, PNG, ... chosen by
        OpenSCAD from the suffix) and return the output path."""
        output = Path(output)
        cmd = [self.executable, '-o', str(output), *extra_args, str(self.path)]
        logger.info("running %s", ' '.join(cmd))
        try:
            subprocess.run(cmd, capture_output=True, check=True)
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode('utf-8', errors='replace') if e.stderr else ''
            raise InvokerError(f"OpenSCAD export failed: {stderr}")
        except FileNotFoundError:
            raise InvokerError(f"OpenSCAD executable not found: {self.executable}")
        return output
