"""Location Analyzer Capability registration.

Thin layer that plugs the LocationAnalyzerProcessor into a host catalog
pipeline. The host provides configuration, logging and the SCM integration
registry; the capability owns the policy gates and the analyzer dispatch.

Components:
- wiring.py: processor factory and extension point registration

Usage:
    from jeeves_capability_location_analyzer.capability import register_capability

    processor = register_capability(extension_point, config=config, logger=logger)
"""

from jeeves_capability_location_analyzer.capability.wiring import (
    CAPABILITY_ID,
    CAPABILITY_VERSION,
    create_location_analyzer_from_app_context,
    create_processor,
    register_capability,
)

__all__ = [
    "register_capability",
    "create_processor",
    "create_location_analyzer_from_app_context",
    "CAPABILITY_ID",
    "CAPABILITY_VERSION",
]
