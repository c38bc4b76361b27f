from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, TypedDict

import typer
import yaml

from .config import InteractiveTextConfig, load_config
from .models import Document, DocumentContexts, Token, WhitespaceToken
from .pipeline import process_corpus
from .sentences import SentenceIndexError, extract_sentence_context
from .tokenization import tokenize

app = typer.Typer(help="Interactive text tokenizer CLI.", no_args_is_help=True)


@app.callback()
def main_options(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log tokenization details to stderr."
    ),
) -> None:
    """Tokenize texts and recover sentence context for individual words."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command("tokenize")
def tokenize_command(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline text."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    include_whitespace: bool | None = typer.Option(
        None,
        "--include-whitespace/--no-include-whitespace",
        help="Override config include_whitespace flag.",
    ),
) -> None:
    """Tokenize a text and print the tokens as JSON."""
    cfg = load_config(config)
    if include_whitespace is not None:
        cfg.include_whitespace = include_whitespace
    source = _read_source(input_path, text)
    tokens = [
        _token_dict(token)
        for token in tokenize(source)
        if cfg.include_whitespace or not isinstance(token, WhitespaceToken)
    ]
    typer.echo(json.dumps({"tokens": tokens}, indent=cfg.json_indent, ensure_ascii=False))


@app.command()
def context(
    index: int = typer.Option(..., "--index", "-i", help="Segment index of the word."),
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline text."),
) -> None:
    """Print the sentence around the token at the given segment index."""
    source = _read_source(input_path, text)
    try:
        sentence = extract_sentence_context(tokenize(source), index)
    except SentenceIndexError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(sentence)


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    unique_words: bool | None = typer.Option(
        None,
        "--unique-words/--all-words",
        help="Report each normalized word once per document.",
    ),
) -> None:
    """Annotate every word in the input with its sentence and emit JSON."""
    cfg = load_config(config)
    if unique_words is not None:
        cfg.unique_words = unique_words
    documents = _load_documents(input_path)
    summary = _build_summary(process_corpus(documents, cfg))
    typer.echo(
        json.dumps({"documents": summary}, indent=cfg.json_indent, ensure_ascii=False)
    )


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = InteractiveTextConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}


class DocumentSummary(TypedDict):
    doc_id: str
    token_count: int
    word_count: int
    sentence_count: int
    words: List[Dict[str, Any]]


def _read_source(input_path: Path | None, text: str | None) -> str:
    """Return inline text or the contents of the input file (exactly one)."""
    if (input_path is None) == (text is None):
        raise typer.BadParameter("Provide exactly one of --input-path or --text.")
    if text is not None:
        return text
    return input_path.read_text(encoding="utf-8")


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [
            Document(doc_id=input_path.name, text=input_path.read_text(encoding="utf-8"))
        ]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    # Relative POSIX paths keep doc ids stable across platforms.
    return [
        Document(
            doc_id=file.relative_to(input_path).as_posix(),
            text=file.read_text(encoding="utf-8"),
        )
        for file in files
    ]


def _token_dict(token: Token) -> Dict[str, Any]:
    """Serialize a token with its discriminant first."""
    payload = asdict(token)
    return {"kind": payload.pop("kind"), **payload}


def _build_summary(results: Dict[str, DocumentContexts]) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each processed document."""
    summary: List[DocumentSummary] = []
    for doc_id, contexts in sorted(results.items()):
        summary.append(
            {
                "doc_id": doc_id,
                "token_count": contexts.token_count,
                "word_count": contexts.word_count,
                "sentence_count": contexts.sentence_count,
                "words": [asdict(word) for word in contexts.words],
            }
        )
    return summary


if __name__ == "__main__":
    main()
