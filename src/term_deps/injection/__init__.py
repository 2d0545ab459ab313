"""Marker-based injection of xterm assets into term.html."""

from .errors import (
    InjectionError,
    MissingDependencyError,
    MissingMarkerError,
    ReadFailureError,
    WriteFailureError,
)
from .injector import (
    CheckResult,
    DependencyInjector,
    InjectionResult,
    TaskOutcome,
    find_marker_span,
    inject,
)
from .tasks import DEFAULT_TASKS, InjectionTask

__all__ = [
    # Content replacement
    'inject',
    'find_marker_span',

    # Workflow
    'DependencyInjector',
    'InjectionResult',
    'TaskOutcome',
    'CheckResult',
    'InjectionTask',
    'DEFAULT_TASKS',

    # Errors
    'InjectionError',
    'MissingDependencyError',
    'MissingMarkerError',
    'ReadFailureError',
    'WriteFailureError',
]
