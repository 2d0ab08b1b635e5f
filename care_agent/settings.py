"""
Environment-driven settings.

  export GOOGLE_CLOUD_PROJECT=...        # needed by Gemini-backed tools
  export BACKEND_URL=https://...         # optional, real record store
  export CARE_AGENT_LOG_LEVEL=DEBUG
"""

import os
from dataclasses import dataclass

DEFAULT_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class Settings:
    model: str = DEFAULT_MODEL
    project_id: str = ""
    location: str = "us-central1"
    backend_url: str = ""
    log_level: str = "INFO"
    language: str = "en"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            model=os.environ.get("CARE_AGENT_MODEL", DEFAULT_MODEL),
            project_id=os.environ.get("GOOGLE_CLOUD_PROJECT", ""),
            location=os.environ.get("GOOGLE_CLOUD_LOCATION", "us-central1"),
            backend_url=os.environ.get("BACKEND_URL", "").strip().rstrip("/"),
            log_level=os.environ.get("CARE_AGENT_LOG_LEVEL", "INFO").upper(),
            language=os.environ.get("CARE_AGENT_LANGUAGE", "en"),
        )
