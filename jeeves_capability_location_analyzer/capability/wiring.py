"""Capability Registration for the Location Analyzer.

Builds a LocationAnalyzerProcessor from host-provided services and adds it to
the host's catalog processing extension point.

Usage:
    from jeeves_capability_location_analyzer.capability.wiring import register_capability
    from jeeves_capability_location_analyzer.config import load_config

    processor = register_capability(extension_point, config=load_config())

    # Or, from a host app context exposing config/logger/integrations:
    processor = create_location_analyzer_from_app_context(app_context)
    extension_point.add_processor(processor)
"""

from typing import TYPE_CHECKING, Any, Optional, Protocol

from jeeves_capability_location_analyzer._logging import get_component_logger
from jeeves_capability_location_analyzer.analyzers.base import AnalyzerFactory
from jeeves_capability_location_analyzer.analyzers.catalog_file import create_catalog_file_analyzer
from jeeves_capability_location_analyzer.config.reader import ConfigReader
from jeeves_capability_location_analyzer.integrations.registry import (
    IntegrationRegistry,
    ScmIntegrationRegistry,
)
from jeeves_capability_location_analyzer.orchestration.processor import LocationAnalyzerProcessor

if TYPE_CHECKING:
    from jeeves_capability_location_analyzer.models.types import Emit, LocationSpec

# =============================================================================
# CAPABILITY CONSTANTS
# =============================================================================

CAPABILITY_ID = "location_analyzer"
CAPABILITY_VERSION = "0.1.0"

# Host plugin this capability extends
TARGET_PLUGIN_ID = "catalog"


class CatalogProcessor(Protocol):
    def get_processor_name(self) -> str:
        ...

    async def process(self, location: "LocationSpec", emit: "Emit") -> bool:
        ...


class ProcessingExtensionPoint(Protocol):
    """Host hook that accepts catalog processors."""

    def add_processor(self, processor: CatalogProcessor) -> None:
        ...


# =============================================================================
# CAPABILITY REGISTRATION
# =============================================================================

def create_processor(
    *,
    config: ConfigReader,
    logger: Optional[Any] = None,
    integrations: Optional[IntegrationRegistry] = None,
    analyzer_factory: Optional[AnalyzerFactory] = None,
) -> LocationAnalyzerProcessor:
    """Create the processor.

    Integrations default to the configured SCM hosts and the analyzer to a
    fresh CatalogFileAnalyzer per processing call.
    """
    if integrations is None:
        integrations = ScmIntegrationRegistry.from_config(config)

    return LocationAnalyzerProcessor(
        config=config,
        logger=logger,
        integrations=integrations,
        analyzer_factory=analyzer_factory or create_catalog_file_analyzer,
    )


def register_capability(
    extension_point: ProcessingExtensionPoint,
    *,
    config: ConfigReader,
    logger: Optional[Any] = None,
    integrations: Optional[IntegrationRegistry] = None,
    analyzer_factory: Optional[AnalyzerFactory] = None,
) -> LocationAnalyzerProcessor:
    """Register the location analyzer processor with the host.

    Returns:
        The processor instance added to ``extension_point``.
    """
    log = get_component_logger("location_analyzer_capability", logger)
    log.info("location_analyzer_module_initializing", plugin_id=TARGET_PLUGIN_ID)

    processor = create_processor(
        config=config,
        logger=logger,
        integrations=integrations,
        analyzer_factory=analyzer_factory,
    )
    extension_point.add_processor(processor)

    log.info(
        "location_analyzer_capability_registered",
        capability_id=CAPABILITY_ID,
        version=CAPABILITY_VERSION,
        processor=processor.get_processor_name(),
    )
    return processor


# =============================================================================
# APP CONTEXT HELPER
# =============================================================================

def create_location_analyzer_from_app_context(app_context: Any) -> LocationAnalyzerProcessor:
    """Create the processor from a host AppContext.

    Uses ``app_context.config`` (a ConfigReader or plain mapping),
    ``app_context.logger`` and, when present, ``app_context.integrations``.
    """
    config = app_context.config
    if not isinstance(config, ConfigReader):
        config = ConfigReader(config)

    return create_processor(
        config=config,
        logger=getattr(app_context, "logger", None),
        integrations=getattr(app_context, "integrations", None),
    )


__all__ = [
    "CAPABILITY_ID",
    "CAPABILITY_VERSION",
    "TARGET_PLUGIN_ID",
    "CatalogProcessor",
    "ProcessingExtensionPoint",
    "create_processor",
    "register_capability",
    "create_location_analyzer_from_app_context",
]
