"""Sonar installation profile exposed to build jobs."""

from __future__ import annotations

from typing import Optional

from sonar_installations.models.constants import (
    COMPONENT_INDEX_PATH,
    DEFAULT_SONAR_URL,
    PROJECT_INDEX_PATH,
)
from sonar_installations.models.triggers import TriggersConfig
from sonar_installations.services.scrambler import descramble, scramble


def _fix_empty_and_trim(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class SonarInstallation:
    """Connection profile for one Sonar server.

    Identity and database fields are read-only once constructed. The public URL
    and Maven plugin version stay settable so older configurations can be
    migrated in place. The database password is only ever held in scrambled
    form (see :mod:`sonar_installations.services.scrambler`).
    """

    def __init__(
        self,
        name: Optional[str],
        disabled: bool = False,
        server_url: Optional[str] = None,
        server_public_url: Optional[str] = None,
        database_url: Optional[str] = None,
        database_driver: Optional[str] = None,
        database_login: Optional[str] = None,
        database_password: Optional[str] = None,
        mojo_version: Optional[str] = None,
        additional_properties: Optional[str] = None,
        triggers: Optional[TriggersConfig] = None,
    ) -> None:
        self._name = name
        self._disabled = disabled
        self._server_url = server_url
        self.server_public_url = server_public_url
        self._database_url = database_url
        self._database_driver = database_driver
        self._database_login = database_login
        self._database_password: Optional[str] = None
        self.set_database_password(database_password)
        self.mojo_version = mojo_version
        self._additional_properties = additional_properties
        self._triggers = triggers

    @classmethod
    def from_name(cls, name: Optional[str]) -> "SonarInstallation":
        """Legacy form: only the name is known, everything else defaults."""

        return cls(name)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def disabled(self) -> bool:
        return self._disabled

    @property
    def server_url(self) -> Optional[str]:
        return self._server_url

    @property
    def database_url(self) -> Optional[str]:
        return self._database_url

    @property
    def database_driver(self) -> Optional[str]:
        return self._database_driver

    @property
    def database_login(self) -> Optional[str]:
        return self._database_login

    @property
    def database_password(self) -> Optional[str]:
        """Plain text database password, ``None`` when never set."""

        return descramble(self._database_password)

    def set_database_password(self, password: Optional[str]) -> None:
        self._database_password = scramble(_fix_empty_and_trim(password))

    @property
    def scrambled_database_password(self) -> Optional[str]:
        """Stored (scrambled) password. For migration and export only."""

        return self._database_password

    @property
    def additional_properties(self) -> Optional[str]:
        return self._additional_properties

    @property
    def triggers(self) -> TriggersConfig:
        if self._triggers is None:
            self._triggers = TriggersConfig()
        return self._triggers

    @property
    def server_link(self) -> str:
        """Base URL used for links shown to users.

        The public URL wins over the server URL; with neither configured the
        default local server address is used. One trailing slash is dropped.
        """

        url = (self.server_public_url or "").strip() or (self._server_url or "").strip()
        url = url or DEFAULT_SONAR_URL
        if url.endswith("/"):
            url = url[:-1]
        return url

    def project_link(self, group_id: str, artifact_id: str, branch: Optional[str] = None) -> str:
        """URL of the project dashboard, optionally for a branch."""

        return self._link(PROJECT_INDEX_PATH, group_id, artifact_id, branch)

    def component_link(self, group_id: str, artifact_id: str) -> str:
        return self._link(COMPONENT_INDEX_PATH, group_id, artifact_id)

    def _link(self, prefix: str, group_id: str, artifact_id: str, branch: Optional[str] = None) -> str:
        link = f"{self.server_link}{prefix}{group_id}:{artifact_id}"
        if branch:
            link = f"{link}:{branch}"
        return link

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, disabled={self._disabled!r}, "
            f"server_url={self._server_url!r}, server_public_url={self.server_public_url!r})"
        )
