from __future__ import annotations

from typing import Any, Dict, Iterable

import httpx
import yaml

from jeeves_capability_location_analyzer._logging import get_component_logger
from jeeves_capability_location_analyzer.analyzers.base import AnalyzerContext, LocationAnalyzer
from jeeves_capability_location_analyzer.config.settings import DEFAULT_FETCH_TIMEOUT_SECONDS
from jeeves_capability_location_analyzer.models.types import (
    AnalysisError,
    AnalysisResult,
    ErrorCategory,
)


def _categorize_http_error(exc: Exception) -> AnalysisError:
    if isinstance(exc, httpx.TimeoutException):
        return AnalysisError(ErrorCategory.TIMEOUT, str(exc) or "request timed out")
    if isinstance(exc, httpx.TransportError):
        return AnalysisError(ErrorCategory.CONNECTION, str(exc) or type(exc).__name__)
    return AnalysisError(ErrorCategory.BACKEND, str(exc))


def is_catalog_entity(document: Any) -> bool:
    """A catalog entity is a mapping with a kind and a metadata.name."""
    if not isinstance(document, dict) or not document.get("kind"):
        return False
    metadata = document.get("metadata")
    return isinstance(metadata, dict) and bool(metadata.get("name"))


def count_catalog_entities(documents: Iterable[Any]) -> int:
    return sum(1 for doc in documents if is_catalog_entity(doc))


class CatalogFileAnalyzer(LocationAnalyzer):
    """
    Fetches a catalog descriptor file and counts the entities it declares.

    The target is resolved through the integration registry (raw content URL
    and auth headers) before fetching.
    """

    def __init__(self, context: AnalyzerContext, timeout: float = DEFAULT_FETCH_TIMEOUT_SECONDS):
        self.config = context.config
        self.integrations = context.integrations
        self.timeout = timeout
        self._logger = get_component_logger("CatalogFileAnalyzer", context.logger)

    def _request_for(self, target: str) -> tuple[str, Dict[str, str]]:
        integration = self.integrations.for_url(target)
        if integration is None:
            return target, {}
        return integration.resolve_raw_url(target), integration.auth_headers()

    async def _fetch(self, url: str, headers: Dict[str, str]) -> str:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            headers=headers,
            follow_redirects=True,
        ) as client:
            try:
                resp = await client.get(url)
            except httpx.HTTPError as exc:
                raise _categorize_http_error(exc) from exc

            if resp.status_code >= 400:
                raise AnalysisError(
                    ErrorCategory.BACKEND,
                    f"HTTP {resp.status_code} fetching {url}",
                    raw=resp.text,
                )
            return resp.text

    async def analyze(self, target: str) -> AnalysisResult:
        url, headers = self._request_for(target)
        self._logger.info("catalog_file_analysis_started", target=target, url=url)

        body = await self._fetch(url, headers)
        try:
            documents = list(yaml.safe_load_all(body))
        except yaml.YAMLError as exc:
            raise AnalysisError(ErrorCategory.PARSE, f"invalid YAML at {target}: {exc}") from exc

        count = count_catalog_entities(documents)
        self._logger.debug(
            "catalog_file_analysis_complete",
            target=target,
            documents=len(documents),
            count=count,
        )
        return AnalysisResult(
            count=count,
            message=f"Found {count} catalog entities in {target}.",
        )


def create_catalog_file_analyzer(context: AnalyzerContext) -> CatalogFileAnalyzer:
    """Default analyzer factory."""
    return CatalogFileAnalyzer(context)
