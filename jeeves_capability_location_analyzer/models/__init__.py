from .types import (
    URL_LOCATION_TYPE,
    AnalysisError,
    AnalysisResult,
    Emit,
    EntityDerived,
    ErrorCategory,
    Failed,
    GeneralError,
    Handled,
    LocationProcessed,
    LocationSpec,
    ProcessingError,
    ProcessingEvent,
    ProcessingEventType,
    ProcessingOutcome,
    SkipReason,
    Skipped,
    categorize_exception,
)

__all__ = [
    "URL_LOCATION_TYPE",
    "AnalysisError",
    "AnalysisResult",
    "Emit",
    "EntityDerived",
    "ErrorCategory",
    "Failed",
    "GeneralError",
    "Handled",
    "LocationProcessed",
    "LocationSpec",
    "ProcessingError",
    "ProcessingEvent",
    "ProcessingEventType",
    "ProcessingOutcome",
    "SkipReason",
    "Skipped",
    "categorize_exception",
]
