"""Configuration keys and defaults for the location analyzer.

All processor keys live under the capability's own namespace.
"""

# =============================================================================
# PROCESSOR KEYS
# =============================================================================

CONFIG_NAMESPACE = "catalog.processors.locationAnalyzer"

ENABLED_KEY = f"{CONFIG_NAMESPACE}.enabled"
ALLOWED_TARGETS_KEY = f"{CONFIG_NAMESPACE}.allowedLocationTargets"
EMIT_DERIVED_ENTITIES_KEY = f"{CONFIG_NAMESPACE}.emitDerivedEntities"
ANALYSIS_TIMEOUT_KEY = f"{CONFIG_NAMESPACE}.analysisTimeoutSeconds"

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_ENABLED = True
DEFAULT_EMIT_DERIVED_ENTITIES = False

# Upper bound for a single analyze() call; <= 0 disables the timeout
DEFAULT_ANALYSIS_TIMEOUT_SECONDS = 30.0

# Per-request HTTP timeout of the catalog file analyzer
DEFAULT_FETCH_TIMEOUT_SECONDS = 30.0

# =============================================================================
# INTEGRATIONS
# =============================================================================

INTEGRATIONS_KEY = "integrations"
