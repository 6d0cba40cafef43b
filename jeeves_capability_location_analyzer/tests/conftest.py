"""Shared fixtures for location analyzer tests."""

from typing import Any, Dict, Optional

import pytest

from jeeves_capability_location_analyzer.analyzers.base import LocationAnalyzer
from jeeves_capability_location_analyzer.integrations.registry import ScmIntegrationRegistry
from jeeves_capability_location_analyzer.models.types import LocationSpec
from jeeves_capability_location_analyzer.orchestration.processor import LocationAnalyzerProcessor
from jeeves_capability_location_analyzer.tests.fakes import (
    RecordingFactory,
    StaticAnalyzer,
    processor_config,
)


@pytest.fixture
def url_location():
    return LocationSpec(
        type="url",
        target="https://github.com/acme/repo/blob/main/catalog-info.yaml",
    )


@pytest.fixture
def events():
    """Sink collecting emitted events; use ``events.append`` as emit."""
    return []


@pytest.fixture
def make_processor(mock_logger):
    """Build a processor around a fake analyzer and inline settings."""

    def _make(
        analyzer: Optional[LocationAnalyzer] = None,
        settings: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> LocationAnalyzerProcessor:
        config = processor_config(**(settings or {}))
        factory = kwargs.pop("analyzer_factory", None) or RecordingFactory(
            analyzer or StaticAnalyzer()
        )
        return LocationAnalyzerProcessor(
            config=config,
            integrations=ScmIntegrationRegistry.from_config(config),
            analyzer_factory=factory,
            logger=mock_logger,
            **kwargs,
        )

    return _make
