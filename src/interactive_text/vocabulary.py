from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set

from .models import WordToken


@dataclass(slots=True)
class VocabularyItem:
    """A saved vocabulary entry for one language pair."""

    from_word: str
    target_word: str
    from_language_id: int
    target_language_id: int
    id: int | None = None
    definition: str | None = None


class SavedWords:
    """Case-insensitive view of saved vocabulary for a single language pair.

    Used in render paths to highlight words that the reader already saved.
    When either language id is unknown nothing counts as saved.
    """

    def __init__(
        self,
        items: Iterable[VocabularyItem],
        from_language_id: int | None,
        target_language_id: int | None,
    ) -> None:
        self.from_language_id = from_language_id
        self.target_language_id = target_language_id
        if from_language_id is None or target_language_id is None:
            self._items: List[VocabularyItem] = []
        else:
            self._items = [
                item
                for item in items
                if item.from_language_id == from_language_id
                and item.target_language_id == target_language_id
            ]
        self.saved_original_words: Set[str] = {
            item.from_word.lower() for item in self._items if item.from_word
        }
        self.saved_target_words: Set[str] = {
            item.target_word.lower() for item in self._items if item.target_word
        }

    def find_by_original_word(self, word: str) -> Optional[VocabularyItem]:
        normalized = word.lower()
        for item in self._items:
            if item.from_word and item.from_word.lower() == normalized:
                return item
        return None

    def find_by_target_word(self, word: str) -> Optional[VocabularyItem]:
        normalized = word.lower()
        for item in self._items:
            if item.target_word and item.target_word.lower() == normalized:
                return item
        return None

    def is_saved(self, token: WordToken) -> bool:
        return token.normalized_word in self.saved_original_words
