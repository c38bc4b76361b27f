from __future__ import annotations

from pathlib import Path
from typing import Iterable

from interactive_text.models import Token
from interactive_text.tokenization import token_text


def write_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus with a nested text file and an ignored file."""
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(
        "The storm rolled in. Sailors watched the storm.", encoding="utf-8"
    )
    (corpus_dir / "nested" / "notes.txt").write_text("Short note", encoding="utf-8")
    (corpus_dir / "readme.md").write_text("Not a story.", encoding="utf-8")
    return corpus_dir


def texts(tokens: Iterable[Token]) -> list[str]:
    return [token_text(token) for token in tokens]
