"""
Domain Types for the Location Analyzer Capability.

Location descriptors, analysis results, sink events and processing outcomes.
"""

from __future__ import annotations

import asyncio
import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union


URL_LOCATION_TYPE = "url"


class ErrorCategory(str, Enum):
    TIMEOUT = "timeout"
    CONNECTION = "connection"
    BACKEND = "backend"
    PARSE = "parse"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class SkipReason(str, Enum):
    """Why a location was not claimed by the processor."""

    UNSUPPORTED_TYPE = "unsupported_type"
    DISABLED = "disabled"
    NOT_ALLOWED = "not_allowed"
    MISCONFIGURED = "misconfigured"


class ProcessingEventType(str, Enum):
    LOCATION_PROCESSED = "location-processed"
    ENTITY_DERIVED = "entity-derived"
    GENERAL_ERROR = "general-error"


@dataclass(eq=False)
class AnalysisError(Exception):
    """Raised by analyzers for unexpected conditions (never for "no findings")."""

    category: ErrorCategory
    message: str
    raw: Optional[Any] = None

    def __str__(self) -> str:
        return f"{self.category.value}: {self.message}"


@dataclass(frozen=True)
class LocationSpec:
    """Typed pointer to an external resource, as handed over by the host."""

    type: str
    target: str


@dataclass(frozen=True)
class AnalysisResult:
    count: int
    message: str

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValueError(f"count must be an integer, got {self.count!r}")
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")

    @property
    def has_findings(self) -> bool:
        return self.count > 0


@dataclass(frozen=True)
class ProcessingError:
    """Structured error value carried by general-error events."""

    category: ErrorCategory
    message: str
    detail: Optional[str] = None
    exception: Optional[BaseException] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.category.value}: {self.message}"


def categorize_exception(exc: BaseException) -> ProcessingError:
    """Map an arbitrary exception to a ProcessingError with its traceback."""
    detail = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    if isinstance(exc, AnalysisError):
        return ProcessingError(exc.category, exc.message, detail=detail, exception=exc)

    name = exc.__class__.__name__
    if isinstance(exc, asyncio.TimeoutError) or "Timeout" in name:
        category = ErrorCategory.TIMEOUT
    elif isinstance(exc, ConnectionError) or "Network" in name or "Connect" in name:
        category = ErrorCategory.CONNECTION
    else:
        category = ErrorCategory.UNKNOWN

    message = str(exc) or name
    return ProcessingError(category, message, detail=detail, exception=exc)


# =============================================================================
# SINK EVENTS
# =============================================================================

@dataclass(frozen=True)
class LocationProcessed:
    location: LocationSpec
    requeue: bool = False
    event_type: ProcessingEventType = field(
        default=ProcessingEventType.LOCATION_PROCESSED, init=False
    )


@dataclass(frozen=True)
class EntityDerived:
    entity: Dict[str, Any]
    location: LocationSpec
    event_type: ProcessingEventType = field(
        default=ProcessingEventType.ENTITY_DERIVED, init=False
    )


@dataclass(frozen=True)
class GeneralError:
    error: ProcessingError
    location: LocationSpec
    event_type: ProcessingEventType = field(
        default=ProcessingEventType.GENERAL_ERROR, init=False
    )


ProcessingEvent = Union[LocationProcessed, EntityDerived, GeneralError]
Emit = Callable[[ProcessingEvent], None]


# =============================================================================
# OUTCOMES
# =============================================================================

@dataclass(frozen=True)
class Skipped:
    location: LocationSpec
    reason: SkipReason
    claimed: bool = field(default=False, init=False)


@dataclass(frozen=True)
class Handled:
    location: LocationSpec
    result: AnalysisResult
    entity: Optional[Dict[str, Any]] = None
    claimed: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Failed:
    location: LocationSpec
    error: ProcessingError
    claimed: bool = field(default=False, init=False)


ProcessingOutcome = Union[Skipped, Handled, Failed]


__all__ = [
    "URL_LOCATION_TYPE",
    "ErrorCategory",
    "SkipReason",
    "ProcessingEventType",
    "AnalysisError",
    "LocationSpec",
    "AnalysisResult",
    "ProcessingError",
    "categorize_exception",
    "LocationProcessed",
    "EntityDerived",
    "GeneralError",
    "ProcessingEvent",
    "Emit",
    "Skipped",
    "Handled",
    "Failed",
    "ProcessingOutcome",
]
