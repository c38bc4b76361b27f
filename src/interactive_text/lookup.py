from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Set

from .config import InteractiveTextConfig

logger = logging.getLogger(__name__)


class TranslationLookup(ABC):
    """Abstract interface for the service that translates words in context."""

    @abstractmethod
    def translate_sentence(
        self, sentence: str, target_language: str, from_language: str
    ) -> Optional[str]:
        """Return the sentence translated into the target language."""
        raise NotImplementedError

    @abstractmethod
    def translate_word_in_sentence(
        self, word: str, sentence: str, target_language: str, from_language: str
    ) -> Optional[str]:
        """Return the translation of ``word`` as it is used in ``sentence``."""
        raise NotImplementedError


class NoOpLookup(TranslationLookup):
    """Never produces a translation."""

    def translate_sentence(
        self, sentence: str, target_language: str, from_language: str
    ) -> Optional[str]:
        return None

    def translate_word_in_sentence(
        self, word: str, sentence: str, target_language: str, from_language: str
    ) -> Optional[str]:
        return None


class CallableLookup(TranslationLookup):
    """Adapt a pair of callables into the TranslationLookup interface."""

    def __init__(
        self,
        word_func: Callable[[str, str, str, str], Optional[str]],
        sentence_func: Callable[[str, str, str], Optional[str]] | None = None,
    ) -> None:
        self._word_func = word_func
        self._sentence_func = sentence_func

    def translate_sentence(
        self, sentence: str, target_language: str, from_language: str
    ) -> Optional[str]:
        if self._sentence_func is None:
            return None
        return self._sentence_func(sentence, target_language, from_language)

    def translate_word_in_sentence(
        self, word: str, sentence: str, target_language: str, from_language: str
    ) -> Optional[str]:
        return self._word_func(word, sentence, target_language, from_language)


class TranslationCache:
    """Per-text cache of word and sentence translations.

    Word translations are keyed by normalized word, sentence translations by
    the sentence text returned from ``extract_context``.
    """

    def __init__(
        self,
        lookup: TranslationLookup,
        extract_context: Callable[[int], str],
        from_language: str,
        target_language: str,
    ) -> None:
        self._lookup = lookup
        self._extract_context = extract_context
        self.from_language = from_language
        self.target_language = target_language
        self._word_translations: Dict[str, str] = {}
        self._sentence_translations: Dict[str, str] = {}
        self._translating: Set[str] = set()

    @classmethod
    def from_config(
        cls,
        lookup: TranslationLookup,
        extract_context: Callable[[int], str],
        config: InteractiveTextConfig,
    ) -> "TranslationCache":
        """Build a cache for the language pair named in the configuration."""
        return cls(
            lookup,
            extract_context,
            from_language=config.from_language,
            target_language=config.target_language,
        )

    @property
    def word_translations(self) -> Dict[str, str]:
        return dict(self._word_translations)

    @property
    def sentence_translations(self) -> Dict[str, str]:
        return dict(self._sentence_translations)

    def is_translating(self, normalized_word: str) -> bool:
        return normalized_word in self._translating

    def set_word_translation(self, normalized_word: str, translation: str) -> None:
        self._word_translations[normalized_word] = translation

    def translate(self, normalized_word: str, index: int) -> Optional[str]:
        """Translate the word at ``index`` using its sentence as context."""
        cached = self._word_translations.get(normalized_word)
        if cached is not None:
            logger.debug("Cache hit for %r", normalized_word)
            return cached

        self._translating.add(normalized_word)
        try:
            sentence = self._extract_context(index)
            if sentence not in self._sentence_translations:
                target_sentence = self._lookup.translate_sentence(
                    sentence, self.target_language, self.from_language
                )
                if target_sentence:
                    self._sentence_translations[sentence] = target_sentence

            translation = self._lookup.translate_word_in_sentence(
                normalized_word, sentence, self.target_language, self.from_language
            )
            if translation:
                self._word_translations[normalized_word] = translation
            logger.debug(
                "Translated %r (%s→%s): %r",
                normalized_word,
                self.from_language,
                self.target_language,
                translation,
            )
            return translation or None
        finally:
            self._translating.discard(normalized_word)
