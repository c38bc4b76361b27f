"""
interactive_text package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import InteractiveTextConfig, config_from_dict, config_from_yaml, load_config
from .models import PunctToken, Token, WhitespaceToken, WordToken
from .pipeline import process_corpus, process_document
from .sentences import SentenceIndexError, extract_sentence_context
from .tokenization import make_cached_tokenizer, reconstruct_text, tokenize
from .translation_tokens import token_sentence_contexts

__all__ = [
    "InteractiveTextConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Token",
    "WhitespaceToken",
    "PunctToken",
    "WordToken",
    "tokenize",
    "reconstruct_text",
    "make_cached_tokenizer",
    "extract_sentence_context",
    "SentenceIndexError",
    "token_sentence_contexts",
    "process_corpus",
    "process_document",
]

__version__ = "0.1.0"
