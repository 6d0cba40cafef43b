"""
Jeeves Location Analyzer - Catalog Location Processing Capability

Inspects catalog locations handed over by a host pipeline, applies policy
gates, runs a pluggable analyzer against eligible targets and reports one
typed outcome per location.

Architecture:
    type check -> enablement -> allow-list -> analyze -> emit

Key components:
- capability/wiring.py: Registration with the host extension point
- orchestration/processor.py: LocationAnalyzerProcessor state machine
- policy/allow_list.py: Glob-based allow-list gate
- analyzers/: Analyzer contract and the default catalog file analyzer
- integrations/: SCM host lookup (credentials, raw content URLs)
- config/: Read-only configuration view and keys

Usage:
    from jeeves_capability_location_analyzer import register_capability
    from jeeves_capability_location_analyzer.config import load_config

    processor = register_capability(extension_point, config=load_config())

    handled = await processor.process(LocationSpec(type="url", target=url), emit)
"""

from jeeves_capability_location_analyzer.capability.wiring import (
    CAPABILITY_ID,
    CAPABILITY_VERSION,
    create_location_analyzer_from_app_context,
    create_processor,
    register_capability,
)
from jeeves_capability_location_analyzer.analyzers.base import (
    AnalyzerContext,
    AnalyzerFactory,
    LocationAnalyzer,
)
from jeeves_capability_location_analyzer.models.types import (
    AnalysisError,
    AnalysisResult,
    LocationSpec,
    ProcessingError,
)
from jeeves_capability_location_analyzer.orchestration.processor import LocationAnalyzerProcessor
from jeeves_capability_location_analyzer.policy.allow_list import is_allowed

__version__ = CAPABILITY_VERSION
__capability__ = CAPABILITY_ID

__all__ = [
    # Capability registration
    "register_capability",
    "create_processor",
    "create_location_analyzer_from_app_context",
    "CAPABILITY_ID",
    "CAPABILITY_VERSION",
    # Core
    "LocationAnalyzerProcessor",
    "LocationAnalyzer",
    "AnalyzerContext",
    "AnalyzerFactory",
    "is_allowed",
    # Types
    "LocationSpec",
    "AnalysisResult",
    "AnalysisError",
    "ProcessingError",
    # Metadata
    "__version__",
    "__capability__",
]
