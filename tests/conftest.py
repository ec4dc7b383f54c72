"""
Pytest configuration and fixtures
"""

import io
from pathlib import Path

import pytest

from locale_sync.config.settings import Settings, TranslatorSettings, RunSettings
from locale_sync.services.reporter import ConsoleReporter
from locale_sync.services.translation_service import TranslationService

from helpers import StubTranslator, write_locale_file


@pytest.fixture
def locales_root(tmp_path: Path) -> Path:
    """Locale tree with 'fr' as reference, a partial 'en' and an empty 'de'"""
    root = tmp_path / "locales"
    write_locale_file(root, "fr", "common.json", {
        "greeting": {"hello": "Bonjour", "bye": "Au revoir"},
        "title": "Titre"
    })
    write_locale_file(root, "fr", "pages/home.json", {"header": {"welcome": "Bienvenue"}})
    write_locale_file(root, "en", "common.json", {
        "greeting": {"hello": "Hello"},
        "title": "Title"
    })
    (root / "de").mkdir(parents=True)
    (root / "assets").mkdir(parents=True)
    return root


@pytest.fixture
def stub_translator() -> StubTranslator:
    return StubTranslator()


@pytest.fixture
def report_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(report_stream: io.StringIO) -> ConsoleReporter:
    return ConsoleReporter(stream=report_stream, use_color=False)


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        translator=TranslatorSettings(
            api_key="test_openai_key",
            base_url="https://api.openai.com/v1",
            model="gpt-4"
        ),
        run=RunSettings(log_level="DEBUG")
    )


@pytest.fixture
def translation_service(test_settings: Settings) -> TranslationService:
    """Create translation service for testing."""
    return TranslationService(test_settings.translator)
