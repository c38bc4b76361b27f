from __future__ import annotations

from bisect import bisect_left
from typing import Dict, List, Sequence, Tuple, Union

from .models import Token
from .tokenization import token_text

SENTENCE_TERMINATORS = frozenset(".!?")


class SentenceIndexError(IndexError):
    """Raised when the requested element does not exist in the sequence."""


class SentenceLocator:
    """Resolve sentence context for many elements of one sequence.

    The elements are joined once and terminator positions are indexed, so
    each lookup costs a binary search plus the slice of its sentence.
    Tokens are addressed by their ``segment_index``; plain strings by their
    position in ``words``.
    """

    def __init__(self, words: Sequence[Union[Token, str]]) -> None:
        pieces: List[str] = []
        # key -> (start offset, offset where the closing scan begins)
        self._spans: Dict[int, Tuple[int, int]] = {}
        offset = 0
        for position, element in enumerate(words):
            if isinstance(element, str):
                text, key = element, position
            else:
                text, key = token_text(element), element.segment_index
            if key not in self._spans:
                # Last non-whitespace character, so "fine." and "! " close
                # their own sentence while "3.14" does not.
                close_from = max(offset, offset + len(text.rstrip()) - 1)
                self._spans[key] = (offset, close_from)
            pieces.append(text)
            offset += len(text)
        self._size = len(pieces)
        self.text = "".join(pieces)
        self._sentences: Dict[Tuple[int, int], str] = {}
        self._terminators = [
            position
            for position, char in enumerate(self.text)
            if char in SENTENCE_TERMINATORS
        ]

    def sentence_at(self, index: int) -> str:
        """Return the sentence that contains the element addressed by ``index``."""
        span = self._spans.get(index)
        if span is None:
            raise SentenceIndexError(
                f"No element at index {index} (sequence has {self._size} elements)."
            )
        start, close_from = span

        before = bisect_left(self._terminators, start)
        sentence_start = self._terminators[before - 1] + 1 if before else 0

        after = bisect_left(self._terminators, close_from)
        if after < len(self._terminators):
            sentence_end = self._terminators[after] + 1
        else:
            sentence_end = len(self.text)

        bounds = (sentence_start, sentence_end)
        sentence = self._sentences.get(bounds)
        if sentence is None:
            sentence = self.text[sentence_start:sentence_end].strip()
            self._sentences[bounds] = sentence
        return sentence


def extract_sentence_context(words: Sequence[Union[Token, str]], index: int) -> str:
    """Return the sentence that contains the element addressed by ``index``.

    Sentences are delimited by ``.``, ``!`` and ``?`` only, so abbreviations
    ("Dr.") and decimals ("3.14") split sentences too. Use
    :class:`SentenceLocator` when resolving many elements of the same text.
    """
    return SentenceLocator(words).sentence_at(index)
