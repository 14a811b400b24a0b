"""
Environment-backed settings for the composition root.

Values are read from the process environment (populated from a local .env
file by python-dotenv) when Settings.from_env() is called. Every credential is
optional here: adapters raise ConfigurationError, or fall back to demo data,
when the one they need is absent.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

TWELVE_DATA_BASE_URL = "https://api.twelvedata.com"


@dataclass(frozen=True)
class Settings:
    twelve_data_api_key: Optional[str] = None
    twelve_data_base_url: str = TWELVE_DATA_BASE_URL
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    supabase_service_role_key: Optional[str] = None
    supabase_jwt_secret: Optional[str] = None
    state_path: str = "runnr-storage.json"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()
        return cls(
            twelve_data_api_key=os.environ.get("TWELVE_DATA_API_KEY") or None,
            twelve_data_base_url=os.environ.get("TWELVE_DATA_BASE_URL", TWELVE_DATA_BASE_URL),
            supabase_url=(
                os.environ.get("SUPABASE_URL")
                or os.environ.get("NEXT_PUBLIC_SUPABASE_URL")
                or None
            ),
            supabase_anon_key=(
                os.environ.get("SUPABASE_ANON_KEY")
                or os.environ.get("NEXT_PUBLIC_SUPABASE_ANON_KEY")
                or None
            ),
            supabase_service_role_key=os.environ.get("SUPABASE_SERVICE_ROLE_KEY") or None,
            supabase_jwt_secret=os.environ.get("SUPABASE_JWT_SECRET") or None,
            state_path=os.environ.get("RUNNR_STATE_PATH", "runnr-storage.json"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
