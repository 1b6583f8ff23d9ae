from __future__ import annotations

import logging
from typing import Dict, List

from .extraction import extract_text
from .models import Document, DocumentMetrics
from .readability import score_readability
from .tokenization import count_words

logger = logging.getLogger(__name__)


def compute_metrics(document: str, language: str = "en") -> DocumentMetrics:
    """
    Compute word count, character count and readability for a markup document.

    ``char_count`` measures the raw document, markup included, while the word
    count and readability are computed on the extracted reader-visible text.
    """
    text = extract_text(document)
    readability = score_readability(text, language)
    return DocumentMetrics(
        word_count=count_words(text),
        char_count=len(document),
        readability_score=int(readability.score),
        readability_label=readability.label,
    )


def compute_corpus_metrics(
    documents: List[Document], language: str = "en"
) -> Dict[str, DocumentMetrics]:
    """Compute metrics for every document, keyed by ``doc_id``."""
    results: Dict[str, DocumentMetrics] = {}
    for document in documents:
        metrics = compute_metrics(document.text, language)
        logger.debug("%s: %s", document.doc_id, metrics)
        results[document.doc_id] = metrics
    return results
