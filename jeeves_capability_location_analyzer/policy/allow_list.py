"""Allow-list gate for location targets.

Patterns use shell-glob semantics (fnmatch, case-sensitive): ``*`` matches
any run of characters including ``/``, ``?`` a single character.
"""

import re
from collections.abc import Iterable, Mapping
from fnmatch import fnmatchcase
from typing import Any, Optional, Sequence

from jeeves_capability_location_analyzer.config.reader import ConfigReader
from jeeves_capability_location_analyzer.config.settings import ALLOWED_TARGETS_KEY
from jeeves_capability_location_analyzer.models.types import LocationSpec


def _matches(target: str, pattern: Any) -> bool:
    if not isinstance(pattern, str) or not pattern:
        return False
    try:
        return fnmatchcase(target, pattern)
    except re.error:
        return False


def is_allowed(target: str, patterns: Optional[Iterable[Any]]) -> bool:
    """Return True if ``target`` is admitted by ``patterns``.

    ``None`` means no policy is configured and everything is admitted.
    A present collection of patterns (list, tuple, set; even empty) admits
    only targets matching one of its entries; malformed entries match
    nothing. A bare string or a mapping is not a pattern collection and
    admits nothing.
    """
    if patterns is None:
        return True
    if isinstance(patterns, (str, bytes, Mapping)) or not isinstance(patterns, Iterable):
        return False
    return any(_matches(target, pattern) for pattern in patterns)


def configured_patterns(config: ConfigReader) -> Optional[Sequence[Any]]:
    """Read the allow-list from config without raising on bad types.

    A value that is not a list is returned as an empty tuple, which admits
    nothing.
    """
    value = config.get_optional(ALLOWED_TARGETS_KEY)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return ()


def is_allowed_location(config: ConfigReader, location: LocationSpec) -> bool:
    """Check ``location.target`` against the configured allow-list."""
    return is_allowed(location.target, configured_patterns(config))


__all__ = ["is_allowed", "is_allowed_location", "configured_patterns"]
