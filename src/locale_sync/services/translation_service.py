"""
AI-backed translation of missing locale entries
"""

import json
import logging
from typing import Any, Dict, Iterable, Optional, Protocol, Tuple

from openai import AsyncOpenAI, OpenAIError

from ..config.settings import TranslatorSettings
from ..exceptions import TranslationServiceError
from ..models.entry import KEY_SEPARATOR, MissingEntries, MissingEntryKey
from ..models.report import TranslationResult
from ..utils.retry import retry_async

logger = logging.getLogger(__name__)


class Translator(Protocol):
    """Anything that can translate a batch of missing entries into one locale"""

    async def translate(self, entries: MissingEntries, target_locale: str) -> TranslationResult:
        ...


def format_value(value: Any) -> str:
    """Encode a leaf as a single-line JSON literal"""
    return json.dumps(value, ensure_ascii=False)


def parse_value(text: str) -> str:
    """Decode a JSON string literal from a reply; bare text is kept as-is"""
    text = text.strip()
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        try:
            decoded = json.loads(text)
        except ValueError:
            return text
        if isinstance(decoded, str):
            return decoded
    return text


def format_entries(entries: MissingEntries) -> str:
    """Render entries as 'relative/path.json:::json.path: "text"' lines"""
    return '\n'.join(f"{key.encode()}: {format_value(value)}" for key, value in entries.items())


def _split_line(line: str) -> Tuple[Optional[MissingEntryKey], str]:
    # The key ends at the first ':' after the ':::' separator
    sep_index = line.find(KEY_SEPARATOR)
    if sep_index < 0:
        return None, ''
    colon_index = line.find(':', sep_index + len(KEY_SEPARATOR))
    if colon_index < 0:
        return None, ''
    return MissingEntryKey.decode(line[:colon_index]), line[colon_index + 1:]


def _match_requested_prefix(line: str, requested: Dict[str, MissingEntryKey]) -> Optional[MissingEntryKey]:
    # Fallback for keys whose path itself contains ':'
    best = None
    for encoded, key in requested.items():
        if line.startswith(encoded + ':') and (best is None or len(encoded) > len(best)):
            best = encoded
    return requested[best] if best is not None else None


def parse_translation_response(text: str, requested: Iterable[MissingEntryKey]) -> TranslationResult:
    """
    Parse 'relative/path.json:::json.path: "translated text"' lines

    The key ends at the first ':' following the ':::' separator; any further
    colons belong to the value. Values are JSON string literals, bare text is
    accepted too. Lines that cannot be mapped back to a requested key are
    counted as malformed and skipped.
    """
    lookup = {key.encode(): key for key in requested}
    requested_keys = set(lookup.values())
    result = TranslationResult()

    for raw_line in (text or '').splitlines():
        line = raw_line.strip()
        if not line or line.startswith('```'):
            continue

        key, value = _split_line(line)
        if key is None or key not in requested_keys:
            key = _match_requested_prefix(line, lookup)
            if key is None:
                logger.debug(f"Skipping malformed translation line: {line!r}")
                result.malformed_lines += 1
                continue
            value = line[len(key.encode()) + 1:]

        result.translations[key] = parse_value(value)

    return result


class TranslationService:
    """Translation capability backed by an OpenAI-compatible chat model"""

    def __init__(self, settings: TranslatorSettings):
        self.settings = settings
        self._client: Optional[AsyncOpenAI] = None

    @property
    def client(self) -> AsyncOpenAI:
        """Chat client, created on first use so dry runs need no credentials"""
        if self._client is None:
            if not self.settings.api_key:
                raise TranslationServiceError("OPENAI_API_KEY is not set; it is required to translate")
            kwargs = {'api_key': self.settings.api_key, 'base_url': self.settings.base_url}
            if self.settings.timeout is not None:
                kwargs['timeout'] = self.settings.timeout
            self._client = AsyncOpenAI(**kwargs)
        return self._client

    def _build_prompt(self, entries: MissingEntries, target_locale: str) -> str:
        """Build the translation prompt"""
        return (
            f"Translate the following content into the locale \"{target_locale}\" without changing the keys.\n"
            f"Each line has the form <source file>{KEY_SEPARATOR}<json.key.path>: <text to translate as a JSON string>.\n"
            "Reply with exactly one line per entry in the same format, the translation being a JSON string "
            "literal with newlines escaped as \\n. Keep placeholders such as "
            "{name} or {{count}} and HTML tags untouched, and do not add any commentary.\n\n"
            f"{format_entries(entries)}"
        )

    async def _complete(self, prompt: str, target_locale: str) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=self.settings.model,
                messages=[{"role": "user", "content": prompt}]
            )
        except OpenAIError as e:
            raise TranslationServiceError(f"Translation request failed: {e}", locale=target_locale) from e

        if not response.choices:
            return ''
        return response.choices[0].message.content or ''

    async def translate(self, entries: MissingEntries, target_locale: str) -> TranslationResult:
        """Translate entries into target_locale, returning whatever could be parsed"""
        if not entries:
            return TranslationResult()
        if not self.settings.api_key:
            raise TranslationServiceError("OPENAI_API_KEY is not set; it is required to translate", locale=target_locale)

        prompt = self._build_prompt(entries, target_locale)
        logger.info(f"Requesting {len(entries)} translations for {target_locale} with model: {self.settings.model}")

        complete = retry_async(
            max_attempts=self.settings.max_attempts,
            delay=self.settings.retry_delay,
            exceptions=(TranslationServiceError,)
        )(self._complete)
        content = await complete(prompt, target_locale)

        result = parse_translation_response(content, entries.keys())
        logger.info(
            f"Received {len(result.translations)}/{len(entries)} translations for {target_locale}"
            f" ({result.malformed_lines} malformed lines)"
        )
        return result
