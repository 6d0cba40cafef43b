from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

from jeeves_capability_location_analyzer.config.reader import ConfigReader
from jeeves_capability_location_analyzer.integrations.registry import IntegrationRegistry
from jeeves_capability_location_analyzer.models.types import AnalysisResult


@dataclass(frozen=True)
class AnalyzerContext:
    """Read-only dependencies handed to an analyzer factory."""

    config: ConfigReader
    logger: Any
    integrations: IntegrationRegistry


class LocationAnalyzer(ABC):
    @abstractmethod
    async def analyze(self, target: str) -> AnalysisResult:
        """
        Inspect ``target`` and report what was found.

        "No findings" is ``count == 0``; raise only for unexpected conditions.
        """
        ...


AnalyzerFactory = Callable[[AnalyzerContext], LocationAnalyzer]
