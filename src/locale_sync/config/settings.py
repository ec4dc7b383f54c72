"""
Configuration settings with validation
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, 'true' if default else 'false').strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class TranslatorSettings:
    """Translation backend configuration"""
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: str = 'gpt-4'
    timeout: Optional[float] = None
    max_attempts: int = 1
    retry_delay: float = 1.0

    def __post_init__(self):
        # The API key is only checked when a translation is actually requested
        if not self.model:
            raise ValueError("Translation model name must not be empty")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("OPENAI_TIMEOUT must be a positive number of seconds")

        if self.max_attempts < 1:
            raise ValueError("TRANSLATION_MAX_ATTEMPTS must be at least 1")


@dataclass
class RunSettings:
    """Command behaviour"""
    log_level: str = 'WARNING'
    allow_failures: bool = False

    def __post_init__(self):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")

        self.log_level = self.log_level.upper()


@dataclass
class Settings:
    """Main configuration settings"""
    translator: TranslatorSettings = field(default_factory=TranslatorSettings)
    run: RunSettings = field(default_factory=RunSettings)

    @classmethod
    def from_env(cls) -> 'Settings':
        """Create settings from environment variables"""
        timeout_str = os.getenv('OPENAI_TIMEOUT', '').strip()
        attempts_str = os.getenv('TRANSLATION_MAX_ATTEMPTS', '1').strip()
        try:
            timeout = float(timeout_str) if timeout_str else None
            max_attempts = int(attempts_str)
        except ValueError:
            raise ValueError("OPENAI_TIMEOUT must be a number and TRANSLATION_MAX_ATTEMPTS an integer")

        return cls(
            translator=TranslatorSettings(
                api_key=os.getenv('OPENAI_API_KEY') or None,
                base_url=os.getenv('OPENAI_BASE_URL') or None,
                model=os.getenv('OPENAI_MODEL', 'gpt-4'),
                timeout=timeout,
                max_attempts=max_attempts
            ),
            run=RunSettings(
                log_level=os.getenv('LOG_LEVEL', 'WARNING'),
                allow_failures=_env_bool('ALLOW_LOCALE_FAILURES')
            )
        )
