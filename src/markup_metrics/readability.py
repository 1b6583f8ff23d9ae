from __future__ import annotations

import logging
import math
import re
from typing import Dict, Tuple

from .models import ReadabilityResult
from .syllables import estimate_syllables
from .tokenization import tokenize_words

logger = logging.getLogger(__name__)

# Flesch Reading Ease coefficients.
FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6

MIN_SCORE = 0.0
MAX_SCORE = 100.0

NOT_AVAILABLE = "N/A"

SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")

# Lower bounds, evaluated top-down; first match wins.
READABILITY_THRESHOLDS: Tuple[float, ...] = (90.0, 80.0, 70.0, 60.0, 50.0, 30.0, 0.0)

READABILITY_LABELS: Dict[str, Tuple[str, ...]] = {
    "en": (
        "Very Easy",
        "Easy",
        "Fairly Easy",
        "Standard",
        "Fairly Difficult",
        "Difficult",
        "Very Difficult",
    ),
    "pt": (
        "Muito Fácil",
        "Fácil",
        "Razoavelmente Fácil",
        "Padrão",
        "Razoavelmente Difícil",
        "Difícil",
        "Muito Difícil",
    ),
}


def count_sentences(text: str) -> int:
    """
    Count sentences as runs of text terminated by ``.``, ``!`` or ``?``.

    Unpunctuated text falls back to the number of non-empty lines, and the
    result is never lower than 1.
    """
    sentences = len(SENTENCE_RE.findall(text))
    if sentences:
        return sentences
    lines = sum(1 for line in text.split("\n") if line.strip())
    logger.debug("No terminal punctuation found; using %d line(s).", lines)
    return max(1, lines)


def readability_label(score: float, language: str = "en") -> str:
    """Map a clamped reading-ease score onto its qualitative label."""
    labels = _labels_for(language)
    for threshold, label in zip(READABILITY_THRESHOLDS, labels):
        if score >= threshold:
            return label
    return labels[-1]


def readability_tone(score: float) -> str:
    """Coarse good/fair/poor grading used when presenting a score."""
    if score > 60:
        return "good"
    if score > 40:
        return "fair"
    return "poor"


def score_readability(text: str, language: str = "en") -> ReadabilityResult:
    """
    Compute a normalized Flesch Reading Ease score for plain text.

    Blank text, or text without any word, yields ``(0, "N/A")``. Otherwise the
    raw score is clamped to [0, 100], labelled, then rounded half up.
    """
    _labels_for(language)
    if not text.strip():
        return ReadabilityResult(score=0, label=NOT_AVAILABLE)

    sentences = count_sentences(text)
    words = tokenize_words(text)
    if not words:
        return ReadabilityResult(score=0, label=NOT_AVAILABLE)

    total_syllables = sum(estimate_syllables(token.text) for token in words)
    word_count = len(words)
    raw = (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * (word_count / sentences)
        - FLESCH_SYLLABLE_WEIGHT * (total_syllables / word_count)
    )
    clamped = min(MAX_SCORE, max(MIN_SCORE, raw))
    label = readability_label(clamped, language)
    logger.debug(
        "sentences=%d words=%d syllables=%d raw=%.3f label=%s",
        sentences,
        word_count,
        total_syllables,
        raw,
        label,
    )
    return ReadabilityResult(score=_round_half_up(clamped), label=label)


def _labels_for(language: str) -> Tuple[str, ...]:
    try:
        return READABILITY_LABELS[language]
    except KeyError as exc:
        raise ValueError(f"Unknown label language '{language}'.") from exc


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
