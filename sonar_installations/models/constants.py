"""Well-known values shared by installation links."""

from __future__ import annotations

# Used when neither a public nor an internal server URL is configured.
DEFAULT_SONAR_URL = "http://localhost:9000"

PROJECT_INDEX_PATH = "/project/index/"
COMPONENT_INDEX_PATH = "/components/index/"
