"""Derived catalog entities built from analysis results."""

import hashlib
from typing import Any, Dict

from jeeves_capability_location_analyzer.models.types import AnalysisResult, LocationSpec

ANNOTATION_LOCATION = "backstage.io/managed-by-location"
ANNOTATION_ORIGIN_LOCATION = "backstage.io/managed-by-origin-location"
ANNOTATION_ANALYSIS_MESSAGE = "jeeves.io/analysis-message"
ANNOTATION_ITEM_COUNT = "jeeves.io/item-count"


def build_analysis_entity(location: LocationSpec, result: AnalysisResult) -> Dict[str, Any]:
    """Build a Location entity that records ``result`` for ``location``.

    The name is derived from the target so reprocessing the same location
    yields the same entity.
    """
    digest = hashlib.sha1(location.target.encode("utf-8")).hexdigest()[:12]
    location_ref = f"{location.type}:{location.target}"

    return {
        "apiVersion": "backstage.io/v1alpha1",
        "kind": "Location",
        "metadata": {
            "name": f"analysis-result-{digest}",
            "namespace": "default",
            "annotations": {
                ANNOTATION_ANALYSIS_MESSAGE: result.message,
                ANNOTATION_ITEM_COUNT: str(result.count),
                ANNOTATION_LOCATION: location_ref,
                ANNOTATION_ORIGIN_LOCATION: location_ref,
            },
        },
        "spec": {
            "type": location.type,
            "target": location.target,
        },
    }
