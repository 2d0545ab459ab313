"""Marker-delimited content replacement and the term.html injection workflow."""
from __future__ import annotations

import os
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from .constants import END_MARKER_INDENT, FILE_ENCODING
from .errors import MissingDependencyError, MissingMarkerError, ReadFailureError, WriteFailureError
from .tasks import InjectionTask

HTML_DESCRIPTION = "term HTML file"


def find_marker_span(document: str, start_marker: str, end_marker: str) -> Tuple[int, int]:
    """Return ``(insertion_point, end_index)`` for a marker pair.

    The end marker is searched from the insertion point onward so an earlier
    occurrence of the same text can never produce an inverted slice.

    Raises:
        MissingMarkerError: If either marker cannot be located.
    """
    start_index = document.find(start_marker)
    if start_index == -1:
        raise MissingMarkerError(start_marker)
    insertion_point = start_index + len(start_marker)

    end_index = document.find(end_marker, insertion_point)
    if end_index == -1:
        raise MissingMarkerError(end_marker, after=insertion_point)
    return insertion_point, end_index


def inject(document: str, payload: str, start_marker: str, end_marker: str) -> str:
    """Replace everything between ``start_marker`` and ``end_marker`` with ``payload``.

    Both markers are kept. The payload is inserted verbatim on its own lines,
    and the end marker is re-indented to sit inside the enclosing tag:

        ``A<start>B<end>C`` -> ``A<start>\\nX\\n    <end>C``
    """
    insertion_point, end_index = find_marker_span(document, start_marker, end_marker)
    return (
        document[:insertion_point]
        + "\n"
        + payload
        + "\n"
        + END_MARKER_INDENT
        + document[end_index:]
    )


def read_text(path: Path) -> str:
    """Read a file without newline translation so payloads stay byte-exact."""
    try:
        with open(path, "r", encoding=FILE_ENCODING, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ReadFailureError(path, f"not valid {FILE_ENCODING} ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise ReadFailureError(path, e.strerror or str(e)) from e


def write_text_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` through a temporary sibling file.

    The original file is only swapped out once the new content is fully on
    disk; on any failure it is left as it was and the temporary file removed.
    """
    path = Path(path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=FILE_ENCODING,
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(content)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteFailureError(path, e.strerror or str(e)) from e


@dataclass
class TaskOutcome:
    """What a single task contributed to the document."""
    name: str
    source: Path
    chars: int


@dataclass
class InjectionResult:
    """Result of a full injection run."""
    output_path: Path
    content: str
    written: bool
    tasks: List[TaskOutcome] = field(default_factory=list)


@dataclass
class CheckResult:
    """Result of a pre-flight check; collects every problem instead of stopping."""
    errors: List[str] = field(default_factory=list)
    checked: int = 0

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, error: str) -> None:
        self.errors.append(error)

    def summary(self) -> str:
        if self.is_valid:
            return f"All {self.checked} dependencies and markers found"
        return f"{len(self.errors)} problem(s) found"


class DependencyInjector:
    """Applies the configured injection tasks to the term HTML document."""

    def __init__(self, config):
        self.config = config

    @property
    def html_path(self) -> Path:
        return Path(self.config.html_path)

    @property
    def deps_dir(self) -> Path:
        return Path(self.config.deps_dir)

    def load_document(self) -> str:
        if not self.html_path.is_file():
            raise MissingDependencyError(self.html_path, HTML_DESCRIPTION)
        return read_text(self.html_path)

    def load_dependency(self, task: InjectionTask) -> Tuple[Path, str]:
        source = task.resolve(self.deps_dir)
        if not source.is_file():
            raise MissingDependencyError(source, task.description)
        return source, read_text(source)

    def build(self) -> InjectionResult:
        """Fold every task into the document in memory without writing it."""
        current = self.load_document()
        outcomes = []
        for task in self.config.tasks:
            source, payload = self.load_dependency(task)
            current = inject(current, payload, task.start_marker, task.end_marker)
            outcomes.append(TaskOutcome(name=task.name, source=source, chars=len(payload)))
        return InjectionResult(output_path=self.html_path, content=current, written=False, tasks=outcomes)

    def run(self) -> InjectionResult:
        """Inject all dependencies and overwrite the base document.

        Every file and marker is checked before the single write, so any
        failure leaves the base document untouched.
        """
        result = self.build()
        if self.config.dry_run:
            return result

        write_text_atomic(self.html_path, result.content)
        result.written = True
        return result

    def check(self) -> CheckResult:
        """Report every missing file or marker pair without modifying anything."""
        result = CheckResult()
        try:
            document = self.load_document()
        except (MissingDependencyError, ReadFailureError) as e:
            result.add_error(str(e))
            document = None

        for task in self.config.tasks:
            result.checked += 1
            source = task.resolve(self.deps_dir)
            if not source.is_file():
                result.add_error(str(MissingDependencyError(source, task.description)))
            if document is None:
                continue
            try:
                find_marker_span(document, task.start_marker, task.end_marker)
            except MissingMarkerError as e:
                result.add_error(f"{task.name}: {e}")
        return result
