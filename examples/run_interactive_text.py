"""Minimal example: tokenize a passage and translate each word in its sentence."""

from __future__ import annotations

import sys
from typing import Optional

from interactive_text.config import load_config
from interactive_text.lookup import CallableLookup, TranslationCache
from interactive_text.sentences import SentenceLocator
from interactive_text.tokenization import tokenize, word_tokens


def fake_translate(
    word: str, sentence: str, target_language: str, from_language: str
) -> Optional[str]:
    return f"<{word}:{target_language}>"


def main() -> None:
    # Optional YAML config path; defaults translate en -> es.
    config = load_config(sys.argv[1] if len(sys.argv) > 1 else None)
    text = "The ferry left at dawn. Gulls followed it, crying loudly!"
    tokens = tokenize(text)
    locator = SentenceLocator(tokens)
    cache = TranslationCache.from_config(
        CallableLookup(fake_translate), locator.sentence_at, config
    )

    for token in word_tokens(tokens):
        sentence = locator.sentence_at(token.segment_index)
        translation = cache.translate(token.normalized_word, token.segment_index)
        print(f"{token.segment_index:>3} {token.clean_word:<10} {translation:<16} {sentence}")


if __name__ == "__main__":
    main()
