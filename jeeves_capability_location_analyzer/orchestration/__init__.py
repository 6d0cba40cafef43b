"""
Orchestration for the Location Analyzer capability.

- processor.py: LocationAnalyzerProcessor (gates, analyzer dispatch, emission)
- entities.py: derived entity records for locations with findings
"""

from jeeves_capability_location_analyzer.orchestration.entities import build_analysis_entity
from jeeves_capability_location_analyzer.orchestration.processor import (
    EntityBuilder,
    LocationAnalyzerProcessor,
)

__all__ = [
    "LocationAnalyzerProcessor",
    "EntityBuilder",
    "build_analysis_entity",
]
