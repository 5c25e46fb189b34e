import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("SONAR_ENVIRONMENT", "test")
os.environ.setdefault("SONAR_LOG_LEVEL", "debug")
os.environ.setdefault("SONAR_LOG_JSON", "true")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from sonar_installations.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from sonar_installations.models.installation import SonarInstallation  # noqa: E402
from sonar_installations.services.registry import InstallationDescriptor  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def installation() -> SonarInstallation:
    return SonarInstallation(
        "Primary",
        False,
        "http://sonar.internal:9000/",
        None,
        "jdbc:postgresql://db/sonar",
        "org.postgresql.Driver",
        "sonar",
        "  s3cret  ",
        "2.0",
        "-Dsonar.verbose=true",
        None,
    )


@pytest.fixture()
def descriptor() -> InstallationDescriptor:
    return InstallationDescriptor(
        [
            SonarInstallation("e1", server_url="http://one"),
            SonarInstallation("e2", server_url="http://two"),
        ]
    )
