"""Named SonarQube installation profiles for CI build jobs."""

from sonar_installations.models.installation import SonarInstallation
from sonar_installations.models.triggers import TriggersConfig
from sonar_installations.services.registry import (
    InstallationDescriptor,
    InstallationProvider,
    InstallationRegistry,
)

__all__ = [
    "InstallationDescriptor",
    "InstallationProvider",
    "InstallationRegistry",
    "SonarInstallation",
    "TriggersConfig",
]
