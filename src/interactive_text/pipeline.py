from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence, Set

from .config import InteractiveTextConfig
from .models import Document, DocumentContexts, Token, WordContext
from .sentences import SentenceLocator
from .tokenization import make_cached_tokenizer, tokenize, word_tokens
from .vocabulary import SavedWords

logger = logging.getLogger(__name__)

Tokenizer = Callable[[str], Sequence[Token]]


def process_document(
    doc: Document,
    config: InteractiveTextConfig,
    saved_words: SavedWords | None = None,
    tokenizer: Tokenizer = tokenize,
) -> DocumentContexts:
    """Tokenize a document once and attach sentence context to every word."""
    tokens = tokenizer(doc.text)
    locator = SentenceLocator(tokens)
    words: List[WordContext] = []
    seen: Set[str] = set()
    sentences: Set[str] = set()
    word_count = 0

    for token in word_tokens(tokens):
        word_count += 1
        if config.unique_words:
            if token.normalized_word in seen:
                continue
            seen.add(token.normalized_word)
        sentence = locator.sentence_at(token.segment_index)
        sentences.add(sentence)
        words.append(
            WordContext(
                segment_index=token.segment_index,
                clean_word=token.clean_word,
                normalized_word=token.normalized_word,
                sentence=sentence,
                saved=saved_words.is_saved(token) if saved_words else False,
            )
        )

    logger.info(
        "Processed doc=%s tokens=%d words=%d sentences=%d",
        doc.doc_id,
        len(tokens),
        word_count,
        len(sentences),
    )
    return DocumentContexts(
        doc_id=doc.doc_id,
        token_count=len(tokens),
        word_count=word_count,
        sentence_count=len(sentences),
        words=words,
    )


def process_corpus(
    documents: List[Document],
    config: InteractiveTextConfig,
    saved_words: SavedWords | None = None,
) -> Dict[str, DocumentContexts]:
    """Process all documents and return the per-document outputs."""
    tokenizer = make_cached_tokenizer(max(1, config.tokenize_cache_size))
    results: Dict[str, DocumentContexts] = {}
    for document in documents:
        results[document.doc_id] = process_document(
            document, config, saved_words, tokenizer
        )
    return results
