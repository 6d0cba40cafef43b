from .allow_list import configured_patterns, is_allowed, is_allowed_location

__all__ = ["is_allowed", "is_allowed_location", "configured_patterns"]
