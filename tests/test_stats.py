import pytest

from markup_metrics.models import Document, DocumentMetrics
from markup_metrics.stats import compute_corpus_metrics, compute_metrics
from tests.utils import SAMPLE_PAGE


def test_compute_metrics_empty_document():
    assert compute_metrics("") == DocumentMetrics(
        word_count=0, char_count=0, readability_score=0, readability_label="N/A"
    )


def test_compute_metrics_simple_page():
    html = "<html><body><p>The cat sat.</p></body></html>"
    metrics = compute_metrics(html)
    assert metrics.char_count == len(html)
    assert metrics.word_count == 3
    assert metrics.readability_score == 100
    assert metrics.readability_label == "Very Easy"


def test_compute_metrics_ignores_style_content():
    metrics = compute_metrics("<style>body{color:red}</style><p>Hello world</p>")
    assert metrics.word_count == 2


def test_compute_metrics_counts_raw_markup_characters():
    metrics = compute_metrics(SAMPLE_PAGE)
    assert metrics.char_count == len(SAMPLE_PAGE)
    assert metrics.word_count == 16


def test_compute_metrics_markup_only_document():
    metrics = compute_metrics("<html><head><title>x</title></head><body></body></html>")
    assert metrics.word_count == 0
    assert metrics.readability_score == 0
    assert metrics.readability_label == "N/A"
    assert metrics.char_count > 0


def test_compute_metrics_is_idempotent():
    assert compute_metrics(SAMPLE_PAGE) == compute_metrics(SAMPLE_PAGE)


@pytest.mark.parametrize(
    "document",
    [
        "<<<>>>",
        "<p",
        "<script>",
        "&&&;&#xZZ;",
        "<!-->",
        "</p></p>",
        "\x00\x01",
        "12345 67890",
        "a" * 5000,
        "?!.",
        "<![CDATA[ odd ]]><p>after</p>",
    ],
)
def test_compute_metrics_is_total(document: str):
    metrics = compute_metrics(document)
    assert isinstance(metrics.readability_score, int)
    assert 0 <= metrics.readability_score <= 100
    assert metrics.word_count >= 0
    assert metrics.char_count == len(document)


def test_compute_metrics_to_dict():
    payload = compute_metrics("<p>Hello world</p>").to_dict()
    assert set(payload) == {
        "word_count",
        "char_count",
        "readability_score",
        "readability_label",
    }


def test_compute_corpus_metrics_keys_by_doc_id():
    documents = [
        Document(doc_id="a.html", text="<p>The cat sat.</p>"),
        Document(doc_id="b.html", text=""),
    ]
    results = compute_corpus_metrics(documents, language="pt")
    assert results["a.html"].readability_label == "Muito Fácil"
    assert results["b.html"].readability_label == "N/A"


def test_compute_metrics_ignores_byte_order_mark_in_word_count():
    document = "\ufeff<html><body><p>Hi</p></body></html>"
    metrics = compute_metrics(document)
    assert metrics.word_count == 1
    assert metrics.char_count == len(document)
