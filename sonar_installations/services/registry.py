"""Lookup of configured Sonar installations by name."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from sonar_installations.models.installation import SonarInstallation

logger = logging.getLogger("sonar_installations.services.registry")


class InstallationProvider(Protocol):
    """Host-side store that owns the configured installations."""

    def get_installations(self) -> Sequence[SonarInstallation]:
        ...


class InstallationDescriptor(InstallationProvider):
    """In-memory ordered store of installations, as held by the host descriptor."""

    def __init__(self, installations: Iterable[SonarInstallation] = ()) -> None:
        self._installations: List[SonarInstallation] = list(installations)

    def get_installations(self) -> Tuple[SonarInstallation, ...]:
        return tuple(self._installations)

    def set_installations(self, installations: Iterable[SonarInstallation]) -> None:
        self._installations = list(installations)


class InstallationRegistry:
    """Resolves installations through an injected provider.

    A ``None`` provider means the host is not available (for example when
    running outside the CI runtime); lookups then behave as if nothing is
    configured.
    """

    def __init__(self, provider: Optional[InstallationProvider] = None) -> None:
        self._provider = provider

    def all(self) -> List[SonarInstallation]:
        """Return every configured installation, never ``None``."""

        if self._provider is None:
            logger.debug("installation_registry_host_unavailable")
            return []
        return list(self._provider.get_installations())

    def get(self, name: Optional[str]) -> Optional[SonarInstallation]:
        """Return the installation called ``name``.

        An empty name selects the first configured installation. Returns
        ``None`` when nothing matches.
        """

        available = self.all()
        if not name and available:
            return available[0]
        for installation in available:
            if installation.name == name:
                return installation

        logger.debug(
            "installation_registry_lookup_miss",
            extra={"installation_name": name, "available": len(available)},
        )
        return None
