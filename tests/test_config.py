import pytest
from pydantic import ValidationError

from config import Settings, get_fullscreen_provider
from slidedeck.fullscreen import FlagFullscreen, NoFullscreen


def test_default_provider_is_flag():
    assert isinstance(get_fullscreen_provider(Settings()), FlagFullscreen)


def test_none_provider_never_activates():
    provider = get_fullscreen_provider(Settings(fullscreen_provider="none"))
    assert isinstance(provider, NoFullscreen)
    assert provider.toggle() is False


def test_flag_provider_toggles():
    provider = FlagFullscreen()
    assert provider.toggle() is True
    assert provider.toggle() is False


def test_unknown_provider():
    with pytest.raises(ValueError):
        get_fullscreen_provider(Settings(fullscreen_provider="vendor-x"))


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DECK_SOURCE", "https://example.com/talk.md")
    monkeypatch.setenv("TOC_BLOCKS_NAVIGATION", "true")
    s = Settings()
    assert s.deck_source == "https://example.com/talk.md"
    assert s.toc_blocks_navigation is True


def test_unknown_log_level_is_a_settings_error(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")
    with pytest.raises(ValidationError):
        Settings()
