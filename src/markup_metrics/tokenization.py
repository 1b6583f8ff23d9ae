from __future__ import annotations

import re
from typing import List

from .models import Token

# Punctuation stays attached to the token ("sat." is one word).
TOKEN_PATTERN = re.compile(r"\S+", re.UNICODE)


def tokenize_words(text: str) -> List[Token]:
    """Split text on whitespace into word tokens with character offsets."""
    tokens: List[Token] = []
    for match in TOKEN_PATTERN.finditer(text):
        tokens.append(
            Token(text=match.group(), start_char=match.start(), end_char=match.end())
        )
    return tokens


def count_words(text: str) -> int:
    """Return the number of whitespace-delimited tokens in text."""
    return sum(1 for _ in TOKEN_PATTERN.finditer(text))
