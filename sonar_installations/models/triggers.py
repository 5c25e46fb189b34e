"""Trigger policy deciding when an analysis should be skipped."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SCM_CAUSE = "scm"
UPSTREAM_CAUSE = "upstream"


class TriggersConfig(BaseModel):
    """Skip rules attached to an installation."""

    model_config = ConfigDict(validate_assignment=True)

    skip_scm_cause: bool = False
    skip_upstream_cause: bool = False
    env_var: Optional[str] = Field(default=None)

    @field_validator("env_var", mode="before")
    @classmethod
    def empty_string_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    def should_skip(
        self,
        causes: Iterable[str] = (),
        env: Optional[Mapping[str, str]] = None,
    ) -> Optional[str]:
        """Return why the analysis should be skipped, or ``None`` to run it.

        ``causes`` holds the names of what started the build (``"scm"``,
        ``"upstream"``; other names are ignored).
        """

        for cause in causes:
            if cause == SCM_CAUSE and self.skip_scm_cause:
                return "Skipping Sonar analysis due to SCM changes"
            if cause == UPSTREAM_CAUSE and self.skip_upstream_cause:
                return "Skipping Sonar analysis due to upstream build"

        if self.env_var and env is not None:
            if str(env.get(self.env_var, "")).strip().lower() == "true":
                return f"Skipping Sonar analysis, {self.env_var} is set"

        return None
