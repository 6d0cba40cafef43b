from .registry import (
    IntegrationKind,
    IntegrationRegistry,
    ScmIntegration,
    ScmIntegrationRegistry,
)

__all__ = [
    "IntegrationKind",
    "IntegrationRegistry",
    "ScmIntegration",
    "ScmIntegrationRegistry",
]
