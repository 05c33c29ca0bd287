"""Configuration for the slide deck server."""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Source document: local path or http(s) URL, fetched once at startup
    deck_source: str = "data.md"
    fetch_timeout: float = 10.0

    # Fullscreen capability: "flag" (renderer reads the flag) | "none"
    fullscreen_provider: str = "flag"

    # When True, next/previous are dropped while the TOC is open
    toc_blocks_navigation: bool = False

    # A transition unsettled for longer than this is reported as stuck (never auto-released)
    stuck_transition_seconds: float = 5.0

    # Events kept for polling renderers
    event_buffer_size: int = 256

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def get_fullscreen_provider(settings: Settings | None = None):
    """
    Factory: return the configured fullscreen provider.
    Resolved once at startup; the engine never checks which one it has.
    """
    s = settings or get_settings()
    if s.fullscreen_provider == "flag":
        from slidedeck.fullscreen import FlagFullscreen
        return FlagFullscreen()
    if s.fullscreen_provider == "none":
        from slidedeck.fullscreen import NoFullscreen
        return NoFullscreen()
    raise ValueError(f"Unknown fullscreen provider: {s.fullscreen_provider}")
