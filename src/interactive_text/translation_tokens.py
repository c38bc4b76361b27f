from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Literal, Mapping, Sequence

from .models import (
    TokenSentenceContexts,
    TranslationPunctuationToken,
    TranslationToken,
    TranslationWhitespaceToken,
    TranslationWordToken,
)
from .sentences import extract_sentence_context

logger = logging.getLogger(__name__)

PART_OF_SPEECH = frozenset(
    {
        "noun",
        "verb",
        "adjective",
        "adverb",
        "pronoun",
        "preposition",
        "conjunction",
        "interjection",
        "article",
        "determiner",
        "other",
    }
)
CEFR_LEVELS = frozenset({"a1", "a2", "b1", "b2", "c1", "c2"})

_REQUIRED_WORD_FIELDS = ("from_word", "to_word", "from_lemma", "to_lemma")


class TranslationTokenError(ValueError):
    """Raised when a stored or generated translation token is malformed."""


def translation_token_from_dict(data: Mapping[str, Any], index: int = 0) -> TranslationToken:
    """Build a translation token from its dictionary form.

    Required fields must be strings; unknown part-of-speech or difficulty
    values are dropped to ``None`` rather than rejected.
    """
    token_type = data.get("type")
    if token_type == "word":
        missing = [
            name for name in _REQUIRED_WORD_FIELDS if not isinstance(data.get(name), str)
        ]
        if missing:
            raise TranslationTokenError(
                f"Word token at index {index} missing required fields: {', '.join(missing)}"
            )
        return TranslationWordToken(
            from_word=data["from_word"],
            to_word=data["to_word"],
            from_lemma=data["from_lemma"],
            to_lemma=data["to_lemma"],
            pos=_coerce_choice(data.get("pos"), PART_OF_SPEECH, "pos", index),
            difficulty=_coerce_choice(
                data.get("difficulty"), CEFR_LEVELS, "difficulty", index
            ),
            from_definition=_coerce_definition(data.get("from_definition"), index),
        )
    if token_type in ("punctuation", "whitespace"):
        value = data.get("value")
        if not isinstance(value, str):
            raise TranslationTokenError(
                f"{token_type.capitalize()} token at index {index} has no string value"
            )
        if token_type == "punctuation":
            return TranslationPunctuationToken(value=value)
        return TranslationWhitespaceToken(value=value)
    raise TranslationTokenError(f"Unknown token type at index {index}: {token_type!r}")


def translation_tokens_from_dicts(
    items: Iterable[Mapping[str, Any]],
) -> List[TranslationToken]:
    return [translation_token_from_dict(item, idx) for idx, item in enumerate(items)]


def translation_tokens_to_dicts(tokens: Iterable[TranslationToken]) -> List[Dict[str, Any]]:
    """Serialize tokens so they can be stored or emitted as JSON."""
    payload: List[Dict[str, Any]] = []
    for token in tokens:
        if isinstance(token, TranslationWordToken):
            payload.append(
                {
                    "type": token.type,
                    "from_word": token.from_word,
                    "to_word": token.to_word,
                    "from_lemma": token.from_lemma,
                    "to_lemma": token.to_lemma,
                    "pos": token.pos,
                    "difficulty": token.difficulty,
                    "from_definition": token.from_definition,
                }
            )
        else:
            payload.append({"type": token.type, "value": token.value})
    return payload


def side_segments(
    tokens: Sequence[TranslationToken], side: Literal["from", "to"]
) -> List[str]:
    """Return the surface text of every token on one language side."""
    if side not in ("from", "to"):
        raise ValueError(f"side must be 'from' or 'to', got {side!r}")
    segments: List[str] = []
    for token in tokens:
        if isinstance(token, TranslationWordToken):
            segments.append(token.from_word if side == "from" else token.to_word)
        else:
            segments.append(token.value)
    return segments


def token_sentence_contexts(
    tokens: Sequence[TranslationToken], position: int | None
) -> TokenSentenceContexts:
    """Sentence around ``position`` on both the source and target side."""
    if position is None or not tokens:
        return TokenSentenceContexts(from_sentence="", target_sentence="")
    return TokenSentenceContexts(
        from_sentence=extract_sentence_context(side_segments(tokens, "from"), position),
        target_sentence=extract_sentence_context(side_segments(tokens, "to"), position),
    )


def _coerce_choice(
    value: Any, allowed: frozenset[str], name: str, index: int
) -> str | None:
    if value is None:
        return None
    if isinstance(value, str) and value.lower() in allowed:
        return value.lower()
    logger.warning("Token %d has invalid %s %r; using None", index, name, value)
    return None


def _coerce_definition(value: Any, index: int) -> str | None:
    if value is None or isinstance(value, str):
        return value
    logger.warning("Token %d has non-string from_definition; using None", index)
    return None
