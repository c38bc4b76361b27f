import json
from pathlib import Path

from typer.testing import CliRunner

from interactive_text.cli import app
from tests.utils import write_sample_corpus

runner = CliRunner()


def test_cli_tokenize_inline_text():
    """tokenize prints word and punctuation tokens, skipping whitespace by default."""
    result = runner.invoke(app, ["tokenize", "--text", "Hello, world! ---"])
    assert result.exit_code == 0
    tokens = json.loads(result.stdout)["tokens"]
    assert [token["kind"] for token in tokens] == ["word", "word", "punct"]
    assert tokens[0]["clean_word"] == "Hello"
    assert tokens[0]["punctuation"] == ","
    assert tokens[2] == {"kind": "punct", "segment_index": 4, "text": "---"}


def test_cli_tokenize_file_with_whitespace(tmp_path: Path):
    source = tmp_path / "story.txt"
    source.write_text("It's  fine.", encoding="utf-8")
    result = runner.invoke(
        app, ["tokenize", "--input-path", str(source), "--include-whitespace"]
    )
    assert result.exit_code == 0
    tokens = json.loads(result.stdout)["tokens"]
    assert "".join(t.get("raw", t.get("text")) for t in tokens) == "It's  fine."


def test_cli_tokenize_requires_exactly_one_source(tmp_path: Path):
    source = tmp_path / "story.txt"
    source.write_text("Hi.", encoding="utf-8")
    assert runner.invoke(app, ["tokenize"]).exit_code != 0
    result = runner.invoke(
        app, ["tokenize", "--text", "Hi.", "--input-path", str(source)]
    )
    assert result.exit_code != 0


def test_cli_context_prints_sentence():
    result = runner.invoke(
        app, ["context", "--text", "Hello, world! This is fine.", "--index", "6"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "This is fine."


def test_cli_context_out_of_range_fails():
    result = runner.invoke(app, ["context", "--text", "Hello.", "--index", "5"])
    assert result.exit_code == 1


def test_cli_analyze_outputs_summary(tmp_path: Path):
    """analyze reports per-word sentences for every .txt file under a directory."""
    corpus_dir = write_sample_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0
    documents = json.loads(result.stdout)["documents"]
    assert [doc["doc_id"] for doc in documents] == ["chapter1.txt", "nested/notes.txt"]
    chapter = documents[0]
    assert chapter["word_count"] == 8
    assert chapter["sentence_count"] == 2
    assert chapter["words"][4]["sentence"] == "Sailors watched the storm."


def test_cli_analyze_unique_words_with_config(tmp_path: Path):
    corpus_dir = write_sample_corpus(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("unique_words: true\njson_indent: 0\n", encoding="utf-8")
    result = runner.invoke(
        app,
        [
            "analyze",
            "--input-path",
            str(corpus_dir / "chapter1.txt"),
            "--config",
            str(config_path),
        ],
    )
    assert result.exit_code == 0
    (document,) = json.loads(result.stdout)["documents"]
    assert document["doc_id"] == "chapter1.txt"
    assert len(document["words"]) == 6


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "target_language" in result.stdout
