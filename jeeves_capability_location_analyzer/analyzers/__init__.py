from .base import AnalyzerContext, AnalyzerFactory, LocationAnalyzer
from .catalog_file import CatalogFileAnalyzer, create_catalog_file_analyzer

__all__ = [
    "AnalyzerContext",
    "AnalyzerFactory",
    "LocationAnalyzer",
    "CatalogFileAnalyzer",
    "create_catalog_file_analyzer",
]
