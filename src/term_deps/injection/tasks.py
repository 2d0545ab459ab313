"""Declarative list of the assets embedded into term.html."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from .constants import (
    ATTACH_MARKER_END,
    ATTACH_MARKER_START,
    CSS_MARKER_END,
    CSS_MARKER_START,
    FIT_MARKER_END,
    FIT_MARKER_START,
    XTERM_MARKER_END,
    XTERM_MARKER_START,
)


@dataclass(frozen=True)
class InjectionTask:
    """One dependency file and the marker pair it replaces."""
    name: str
    source: str  # relative to the dependency root (node_modules)
    start_marker: str
    end_marker: str
    description: str

    def resolve(self, deps_dir: Path) -> Path:
        """Return the dependency file location under ``deps_dir``."""
        return Path(deps_dir) / self.source


DEFAULT_TASKS: Tuple[InjectionTask, ...] = (
    InjectionTask(
        name="css",
        source="xterm/css/xterm.css",
        start_marker=CSS_MARKER_START,
        end_marker=CSS_MARKER_END,
        description="xterm CSS file",
    ),
    InjectionTask(
        name="xterm",
        source="xterm/lib/xterm.js",
        start_marker=XTERM_MARKER_START,
        end_marker=XTERM_MARKER_END,
        description="xterm JS file",
    ),
    InjectionTask(
        name="attach",
        source="xterm-addon-attach/lib/xterm-addon-attach.js",
        start_marker=ATTACH_MARKER_START,
        end_marker=ATTACH_MARKER_END,
        description="xterm attach addon file",
    ),
    InjectionTask(
        name="fit",
        source="xterm-addon-fit/lib/xterm-addon-fit.js",
        start_marker=FIT_MARKER_START,
        end_marker=FIT_MARKER_END,
        description="xterm fit addon file",
    ),
)
