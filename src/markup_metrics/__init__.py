"""
markup_metrics package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import MetricsConfig, config_from_dict, config_from_yaml, load_config
from .extraction import extract_text
from .models import DocumentMetrics, ReadabilityResult
from .readability import score_readability
from .stats import compute_corpus_metrics, compute_metrics
from .syllables import estimate_syllables

__all__ = [
    "MetricsConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "DocumentMetrics",
    "ReadabilityResult",
    "extract_text",
    "estimate_syllables",
    "score_readability",
    "compute_metrics",
    "compute_corpus_metrics",
]

__version__ = "0.1.0"
