"""LocationAnalyzerProcessor - policy gates and analyzer dispatch per location.

For each location handed over by the host pipeline:

    type check -> enablement -> allow-list -> analyze -> emit

Gate checks are synchronous reads of the configuration view; the analyzer
call is the only suspension point and runs under a timeout. Analyzer
failures are reported through the sink and never raised to the host.
"""

import asyncio
from typing import Any, Callable, Dict, Optional

from jeeves_capability_location_analyzer._logging import get_component_logger
from jeeves_capability_location_analyzer.analyzers.base import AnalyzerContext, AnalyzerFactory
from jeeves_capability_location_analyzer.config.reader import ConfigError, ConfigReader
from jeeves_capability_location_analyzer.config.settings import (
    ANALYSIS_TIMEOUT_KEY,
    DEFAULT_ANALYSIS_TIMEOUT_SECONDS,
    DEFAULT_EMIT_DERIVED_ENTITIES,
    DEFAULT_ENABLED,
    EMIT_DERIVED_ENTITIES_KEY,
    ENABLED_KEY,
)
from jeeves_capability_location_analyzer.integrations.registry import IntegrationRegistry
from jeeves_capability_location_analyzer.models.types import (
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
    ProcessingOutcome,
    SkipReason,
    Skipped,
    categorize_exception,
)
from jeeves_capability_location_analyzer.orchestration.entities import build_analysis_entity
from jeeves_capability_location_analyzer.policy.allow_list import configured_patterns, is_allowed

EntityBuilder = Callable[[LocationSpec, AnalysisResult], Dict[str, Any]]


class LocationAnalyzerProcessor:
    """
    Catalog processor that runs a pluggable analyzer against url locations.

    Holds only injected, read-only dependencies; concurrent calls to
    ``process`` share nothing else.
    """

    PROCESSOR_NAME = "LocationAnalyzerProcessor"

    def __init__(
        self,
        *,
        config: ConfigReader,
        integrations: IntegrationRegistry,
        analyzer_factory: AnalyzerFactory,
        logger: Optional[Any] = None,
        entity_builder: EntityBuilder = build_analysis_entity,
    ):
        self._config = config
        self._integrations = integrations
        self._analyzer_factory = analyzer_factory
        self._entity_builder = entity_builder
        self._base_logger = logger
        self._logger = get_component_logger(self.PROCESSOR_NAME, logger)

    def get_processor_name(self) -> str:
        return self.PROCESSOR_NAME

    # ------------------------------------------------------------------
    # Policy
    # ------------------------------------------------------------------

    def check_policy(self, location: LocationSpec) -> Optional[SkipReason]:
        """Run the synchronous gates; return why the location is skipped, if it is."""
        if location.type != URL_LOCATION_TYPE:
            self._logger.debug(
                "location_skipped",
                target=location.target,
                reason=SkipReason.UNSUPPORTED_TYPE.value,
                location_type=location.type,
            )
            return SkipReason.UNSUPPORTED_TYPE

        try:
            enabled = self._config.get_optional_bool(ENABLED_KEY)
        except ConfigError as e:
            self._logger.warning(
                "location_analyzer_misconfigured", key=e.key, error=str(e)
            )
            return SkipReason.MISCONFIGURED
        if enabled is None:
            enabled = DEFAULT_ENABLED
        if not enabled:
            self._logger.info("location_analyzer_disabled", target=location.target)
            return SkipReason.DISABLED

        if not is_allowed(location.target, configured_patterns(self._config)):
            self._logger.debug(
                "location_skipped",
                target=location.target,
                reason=SkipReason.NOT_ALLOWED.value,
            )
            return SkipReason.NOT_ALLOWED

        return None

    def _analysis_timeout(self) -> Optional[float]:
        try:
            timeout = self._config.get_optional_number(ANALYSIS_TIMEOUT_KEY)
        except ConfigError as e:
            self._logger.warning("analysis_timeout_invalid", error=str(e))
            timeout = None
        if timeout is None:
            timeout = DEFAULT_ANALYSIS_TIMEOUT_SECONDS
        return timeout if timeout > 0 else None

    def _derived_entities_enabled(self) -> bool:
        try:
            flag = self._config.get_optional_bool(EMIT_DERIVED_ENTITIES_KEY)
        except ConfigError as e:
            self._logger.warning("emit_derived_entities_invalid", error=str(e))
            return DEFAULT_EMIT_DERIVED_ENTITIES
        return DEFAULT_EMIT_DERIVED_ENTITIES if flag is None else flag

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    async def _run_analyzer(self, target: str) -> AnalysisResult:
        analyzer = self._analyzer_factory(
            AnalyzerContext(
                config=self._config,
                logger=self._base_logger or self._logger,
                integrations=self._integrations,
            )
        )
        timeout = self._analysis_timeout()
        if timeout is None:
            return await analyzer.analyze(target)
        return await asyncio.wait_for(analyzer.analyze(target), timeout=timeout)

    async def evaluate(self, location: LocationSpec) -> ProcessingOutcome:
        """Apply gates and run analysis without emitting anything."""
        reason = self.check_policy(location)
        if reason is not None:
            return Skipped(location=location, reason=reason)

        self._logger.info("location_analysis_started", target=location.target)
        try:
            result = await self._run_analyzer(location.target)
            if not isinstance(result, AnalysisResult):
                raise AnalysisError(
                    ErrorCategory.BACKEND,
                    f"analyzer returned {type(result).__name__}, expected AnalysisResult",
                )
            entity = None
            if result.has_findings and self._derived_entities_enabled():
                entity = self._entity_builder(location, result)
        except Exception as e:
            error = categorize_exception(e)
            self._logger.error(
                "location_analysis_failed",
                target=location.target,
                error=error.message,
                error_category=error.category.value,
                exc_info=e,
            )
            return Failed(location=location, error=error)

        self._logger.info(
            "location_analysis_complete",
            target=location.target,
            count=result.count,
            message=result.message,
        )
        return Handled(location=location, result=result, entity=entity)

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def emit_outcome(self, outcome: ProcessingOutcome, emit: Emit) -> bool:
        """Translate ``outcome`` into sink events; return whether it was claimed."""
        if isinstance(outcome, Handled):
            emit(LocationProcessed(location=outcome.location, requeue=False))
            if outcome.entity is not None:
                emit(EntityDerived(entity=outcome.entity, location=outcome.location))
        elif isinstance(outcome, Failed):
            emit(GeneralError(error=outcome.error, location=outcome.location))
        return outcome.claimed

    async def process(self, location: LocationSpec, emit: Emit) -> bool:
        """Process one location; True only when analysis succeeded."""
        outcome = await self.evaluate(location)
        return self.emit_outcome(outcome, emit)


__all__ = ["LocationAnalyzerProcessor", "EntityBuilder"]
