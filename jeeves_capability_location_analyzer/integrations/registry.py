from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional
from urllib.parse import urlsplit

from jeeves_capability_location_analyzer.config.reader import ConfigReader
from jeeves_capability_location_analyzer.config.settings import INTEGRATIONS_KEY


class IntegrationKind(str, Enum):
    GITHUB = "github"
    GITLAB = "gitlab"


_GITHUB_BLOB = re.compile(r"^/(?P<owner>[^/]+)/(?P<repo>[^/]+)/(?:blob|raw)/(?P<rest>.+)$")


@dataclass(frozen=True)
class ScmIntegration:
    kind: IntegrationKind
    host: str
    token: Optional[str] = None
    api_base_url: Optional[str] = None
    raw_base_url: Optional[str] = None

    def auth_headers(self) -> Dict[str, str]:
        if not self.token:
            return {}
        if self.kind == IntegrationKind.GITLAB:
            return {"PRIVATE-TOKEN": self.token}
        return {"Authorization": f"token {self.token}"}

    def resolve_raw_url(self, url: str) -> str:
        """
        Rewrite a browse URL into one that serves the raw file content.

        URLs that are not blob URLs for this integration are returned unchanged.
        """
        parts = urlsplit(url)
        host = self.host.lower()
        if parts.hostname != host:
            return url

        if self.kind == IntegrationKind.GITHUB:
            match = _GITHUB_BLOB.match(parts.path)
            if not match:
                return url
            raw_base = self.raw_base_url or (
                "https://raw.githubusercontent.com"
                if host == "github.com"
                else f"{parts.scheme}://{host}/raw"
            )
            return (
                f"{raw_base.rstrip('/')}/{match['owner']}/{match['repo']}/{match['rest']}"
            )

        if self.kind == IntegrationKind.GITLAB and "/-/blob/" in parts.path:
            return url.replace("/-/blob/", "/-/raw/", 1)

        return url


class IntegrationRegistry(ABC):
    @abstractmethod
    def list(self) -> List[ScmIntegration]:
        ...

    @abstractmethod
    def by_host(self, host: str) -> Optional[ScmIntegration]:
        ...

    def for_url(self, url: str) -> Optional[ScmIntegration]:
        host = urlsplit(url).hostname
        if not host:
            return None
        return self.by_host(host)


class ScmIntegrationRegistry(IntegrationRegistry):
    """
    Static lookup from source-control host to access helpers.

    Usage:
        registry = ScmIntegrationRegistry.from_config(config)
        integration = registry.for_url("https://github.com/org/repo/blob/main/catalog-info.yaml")
        headers = integration.auth_headers() if integration else {}
    """

    DEFAULT_HOSTS = {
        IntegrationKind.GITHUB: "github.com",
        IntegrationKind.GITLAB: "gitlab.com",
    }

    def __init__(self, integrations: Iterable[ScmIntegration]):
        self._integrations = list(integrations)
        self._by_host = {i.host.lower(): i for i in self._integrations}

    @classmethod
    def from_config(cls, config: ConfigReader) -> "ScmIntegrationRegistry":
        integrations: List[ScmIntegration] = []
        section = config.get_optional_config(INTEGRATIONS_KEY)

        for kind in IntegrationKind:
            entries = section.get_config_array(kind.value) if section else []
            for entry in entries:
                host = entry.get_optional("host") or cls.DEFAULT_HOSTS[kind]
                integrations.append(
                    ScmIntegration(
                        kind=kind,
                        host=str(host).lower(),
                        token=entry.get_optional("token"),
                        api_base_url=entry.get_optional("apiBaseUrl"),
                        raw_base_url=entry.get_optional("rawBaseUrl"),
                    )
                )

        configured = {i.host for i in integrations}
        for kind, host in cls.DEFAULT_HOSTS.items():
            if host not in configured:
                integrations.append(ScmIntegration(kind=kind, host=host))

        return cls(integrations)

    def list(self) -> List[ScmIntegration]:
        return list(self._integrations)

    def by_host(self, host: str) -> Optional[ScmIntegration]:
        return self._by_host.get(host.lower())
