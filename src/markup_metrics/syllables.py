from __future__ import annotations

import re

# A trailing -es/-e after a consonant (the consonant goes too) or any -ed.
# "l" is excluded from the consonant class, so "-le" endings keep their e.
SILENT_SUFFIX_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)\Z")
LEADING_Y_RE = re.compile(r"\Ay")
NUCLEUS_RE = re.compile(r"[aeiouy]{1,2}")


def estimate_syllables(word: str) -> int:
    """
    Heuristically estimate the number of syllables in a single word.

    The approximation is tuned for English/Portuguese vowel patterns and is
    not linguistically exact. Words of three characters or fewer count as one
    syllable, and every word has at least one.
    """
    word = word.lower()
    if len(word) <= 3:
        return 1
    word = SILENT_SUFFIX_RE.sub("", word, count=1)
    word = LEADING_Y_RE.sub("", word, count=1)
    nuclei = NUCLEUS_RE.findall(word)
    return len(nuclei) or 1
