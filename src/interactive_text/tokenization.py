from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable, Iterable, Iterator, List, Tuple

import regex

from .models import PunctToken, Token, WhitespaceToken, WordToken

logger = logging.getLogger(__name__)

WHITESPACE_SPLIT_PATTERN = regex.compile(r"(\s+)")
WHITESPACE_PATTERN = regex.compile(r"\s+")
# Letters, numbers, straight and curly apostrophes.
LEADING_WORD_PATTERN = regex.compile(r"[\p{L}\p{N}'’]+")


def tokenize(text: str) -> List[Token]:
    """Split text into whitespace, punctuation and word tokens.

    Concatenating the text of every token in order gives back ``text``.
    Blank input yields no tokens at all.
    """
    if not text.strip():
        return []

    tokens: List[Token] = []
    for segment_index, segment in enumerate(WHITESPACE_SPLIT_PATTERN.split(text)):
        if not segment:
            continue

        if WHITESPACE_PATTERN.fullmatch(segment):
            tokens.append(WhitespaceToken(segment_index=segment_index, text=segment))
            continue

        match = LEADING_WORD_PATTERN.match(segment)
        if match:
            clean_word = match.group()
            tokens.append(
                WordToken(
                    segment_index=segment_index,
                    raw=segment,
                    clean_word=clean_word,
                    normalized_word=clean_word.lower(),
                    punctuation=segment[len(clean_word) :],
                )
            )
            continue

        tokens.append(PunctToken(segment_index=segment_index, text=segment))

    logger.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
    return tokens


def token_text(token: Token) -> str:
    """Return the original text a token was built from."""
    if isinstance(token, WordToken):
        return token.raw
    return token.text


def reconstruct_text(tokens: Iterable[Token]) -> str:
    return "".join(token_text(token) for token in tokens)


def word_tokens(tokens: Iterable[Token]) -> Iterator[WordToken]:
    """Yield only the word tokens, in order."""
    for token in tokens:
        if isinstance(token, WordToken):
            yield token


def make_cached_tokenizer(maxsize: int = 128) -> Callable[[str], Tuple[Token, ...]]:
    """Build a tokenizer memoized on the input text.

    Results are tuples so that cached values can be shared between callers.
    """

    @lru_cache(maxsize=maxsize)
    def cached_tokenize(text: str) -> Tuple[Token, ...]:
        return tuple(tokenize(text))

    return cached_tokenize
