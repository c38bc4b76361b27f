from interactive_text.config import InteractiveTextConfig
from interactive_text.models import Document
from interactive_text.pipeline import process_corpus, process_document
from interactive_text.vocabulary import SavedWords, VocabularyItem


def test_process_document_attaches_sentences_to_words():
    doc = Document(doc_id="doc", text="The storm rolled in. Sailors watched the storm.")

    result = process_document(doc, InteractiveTextConfig())

    assert result.token_count == 15
    assert result.word_count == 8
    assert result.sentence_count == 2
    assert result.words[0].clean_word == "The"
    assert result.words[0].sentence == "The storm rolled in."
    assert result.words[-1].normalized_word == "storm"
    assert result.words[-1].segment_index == 14
    assert result.words[-1].sentence == "Sailors watched the storm."


def test_process_document_unique_words_and_saved_flags():
    doc = Document(doc_id="doc", text="The storm rolled in. Sailors watched the storm.")
    saved = SavedWords(
        [VocabularyItem("Storm", "tormenta", from_language_id=1, target_language_id=2)],
        from_language_id=1,
        target_language_id=2,
    )

    result = process_document(doc, InteractiveTextConfig(unique_words=True), saved)

    assert [w.normalized_word for w in result.words] == [
        "the",
        "storm",
        "rolled",
        "in",
        "sailors",
        "watched",
    ]
    assert result.word_count == 8
    assert [w.saved for w in result.words] == [False, True, False, False, False, False]


def test_process_document_blank_text():
    result = process_document(Document("blank", "   "), InteractiveTextConfig())

    assert (result.token_count, result.word_count, result.sentence_count) == (0, 0, 0)
    assert result.words == []


def test_process_corpus_returns_result_per_document():
    documents = [
        Document("a", "Hello there."),
        Document("b", "Hello there."),
        Document("c", "--- ***"),
    ]

    results = process_corpus(documents, InteractiveTextConfig(tokenize_cache_size=2))

    assert sorted(results) == ["a", "b", "c"]
    assert results["a"].words == results["b"].words
    assert results["c"].word_count == 0
    assert results["c"].token_count == 3


def test_process_document_handles_book_length_text():
    """Sentence lookup stays linear so long documents finish quickly."""
    text = "Ship sails on. " * 20000 + "word " * 20000
    doc = Document(doc_id="book", text=text)

    result = process_document(doc, InteractiveTextConfig())

    assert result.word_count == 80000
    assert result.sentence_count == 2
    assert result.words[0].sentence == "Ship sails on."
    assert result.words[-1].sentence.startswith("word word")
    assert result.words[-1].sentence.endswith("word")
