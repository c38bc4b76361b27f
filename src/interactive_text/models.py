from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union


@dataclass(frozen=True, slots=True)
class WhitespaceToken:
    """A maximal run of whitespace, kept verbatim."""

    segment_index: int
    text: str
    kind: Literal["whitespace"] = field(default="whitespace", init=False)


@dataclass(frozen=True, slots=True)
class PunctToken:
    """A segment with no leading word characters (pure punctuation/symbols)."""

    segment_index: int
    text: str
    kind: Literal["punct"] = field(default="punct", init=False)


@dataclass(frozen=True, slots=True)
class WordToken:
    """A segment that starts with letters, digits or apostrophes.

    ``raw`` is the full segment, ``clean_word`` its leading word-like prefix,
    ``normalized_word`` the lower-cased prefix and ``punctuation`` whatever
    trails the prefix with no space in between.
    """

    segment_index: int
    raw: str
    clean_word: str
    normalized_word: str
    punctuation: str
    kind: Literal["word"] = field(default="word", init=False)


Token = Union[WhitespaceToken, PunctToken, WordToken]


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True)
class WordContext:
    """A clickable word together with the sentence it appears in."""

    segment_index: int
    clean_word: str
    normalized_word: str
    sentence: str
    saved: bool = False


@dataclass(slots=True)
class DocumentContexts:
    """Per-document result of running the tokenizer and the context extractor."""

    doc_id: str
    token_count: int
    word_count: int
    sentence_count: int
    words: list[WordContext]


@dataclass(frozen=True, slots=True)
class TranslationWordToken:
    """Word of a translated text with both language sides and metadata."""

    from_word: str
    to_word: str
    from_lemma: str
    to_lemma: str
    pos: str | None = None
    difficulty: str | None = None
    from_definition: str | None = None
    type: Literal["word"] = field(default="word", init=False)


@dataclass(frozen=True, slots=True)
class TranslationPunctuationToken:
    value: str
    type: Literal["punctuation"] = field(default="punctuation", init=False)


@dataclass(frozen=True, slots=True)
class TranslationWhitespaceToken:
    value: str
    type: Literal["whitespace"] = field(default="whitespace", init=False)


TranslationToken = Union[
    TranslationWordToken, TranslationPunctuationToken, TranslationWhitespaceToken
]


@dataclass(frozen=True, slots=True)
class TokenSentenceContexts:
    """Sentence around a translation token on the source and target side."""

    from_sentence: str
    target_sentence: str
