from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True)
class Document:
    """Represents a raw markup input document."""

    doc_id: str
    text: str


@dataclass(slots=True)
class Token:
    """Represents a token and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


@dataclass(frozen=True, slots=True)
class ReadabilityResult:
    """Flesch reading-ease score and its qualitative label."""

    score: float
    label: str


@dataclass(frozen=True, slots=True)
class DocumentMetrics:
    """Writing-quality metrics computed for a single document."""

    word_count: int
    char_count: int
    readability_score: int
    readability_label: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return dict(asdict(self))
