# =============================================================================
# core/config.py  -  Environment-driven settings
# =============================================================================
#
# Every tunable of the tool server and the agent client lives here.  Other
# modules call get_settings() instead of reading os.environ directly.
#
# A .env file in the working directory is loaded once, at import time.
# Variables already present in the environment win over the file.
# =============================================================================

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


DEFAULT_WEATHER_API_BASE_URL = "https://api.weather.gov"
DEFAULT_WEATHER_USER_AGENT = "weather-tool/1.0"
DEFAULT_LOGISTICS_API_BASE_URL = "https://gocodeart.com"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the tool server and agent client."""

    # --- Remote APIs ---
    weather_api_base_url: str = DEFAULT_WEATHER_API_BASE_URL
    weather_user_agent: str = DEFAULT_WEATHER_USER_AGENT   # api.weather.gov rejects anonymous clients
    logistics_api_base_url: str = DEFAULT_LOGISTICS_API_BASE_URL

    # --- Transport ---
    http_timeout_seconds: float = 30.0

    # --- Logging ---
    log_level: str = "INFO"

    # --- Agent client ---
    agent_model: str = "openrouter/openai/gpt-4o"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build Settings from the environment (cached after the first call)."""
    return Settings(
        weather_api_base_url=os.environ.get("WEATHER_API_BASE_URL", DEFAULT_WEATHER_API_BASE_URL),
        weather_user_agent=os.environ.get("WEATHER_USER_AGENT", DEFAULT_WEATHER_USER_AGENT),
        logistics_api_base_url=os.environ.get("LOGISTICS_API_BASE_URL", DEFAULT_LOGISTICS_API_BASE_URL),
        http_timeout_seconds=float(os.environ.get("HTTP_TIMEOUT_SECONDS", "30")),
        log_level=os.environ.get("MCP_LOG_LEVEL", "INFO").upper(),
        agent_model=os.environ.get("AGENT_MODEL", "openrouter/openai/gpt-4o"),
    )
