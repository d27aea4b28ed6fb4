"""Tokenization of generated text into candidate network words."""

import logging
import re
from dataclasses import dataclass, field

from tensegrity.preprocessing.profiles import LanguageProfile

logger = logging.getLogger(__name__)

# Han, Hiragana, Katakana and Hangul syllables
CJK_RUN_PATTERN = re.compile(r"[\u4e00-\u9fff\u3040-\u309f\u30a0-\u30ff\uac00-\ud7af]+")
LATIN_RUN_PATTERN = re.compile(r"[a-zA-Z]+")
# \w minus digits and underscore == Unicode letters
LETTER_RUN_PATTERN = re.compile(r"[^\W\d_]+")

MIN_WORD_LENGTH = 2


@dataclass
class TokenizedText:
    """Deduplicated candidate words and their literal frequencies."""

    unique_words: list[str] = field(default_factory=list)
    frequency: dict[str, int] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.unique_words


def cjk_candidates(text: str) -> list[str]:
    """
    Extract candidate words from CJK text.

    Every CJK run yields its overlapping 2-character windows, followed by
    single characters that occur at least twice in that run. Latin runs
    embedded in the text are appended as lowercase words.

    Args:
        text: Raw text

    Returns:
        Candidate words in extraction order (with repeats)
    """
    words: list[str] = []

    for match in CJK_RUN_PATTERN.finditer(text):
        run = match.group(0)
        for i in range(len(run) - 1):
            words.append(run[i:i + 2])

        char_counts: dict[str, int] = {}
        for char in run:
            char_counts[char] = char_counts.get(char, 0) + 1
        words.extend(char for char, count in char_counts.items() if count >= 2)

    words.extend(m.lower() for m in LATIN_RUN_PATTERN.findall(text))
    return words


def alphabetic_candidates(text: str) -> list[str]:
    """Extract lowercase runs of Unicode letters."""
    return [m.lower() for m in LETTER_RUN_PATTERN.findall(text)]


def count_occurrences(text: str, word: str, profile: LanguageProfile) -> int:
    """
    Count literal occurrences of word in the source text.

    CJK profiles count raw substrings; other profiles count whole words,
    case-insensitively.
    """
    if not word:
        return 0
    if profile.is_cjk:
        return text.count(word)
    # Match against the lowercased text so words whose lowercase form has a
    # different length (e.g. Turkish dotted I) still count
    pattern = re.compile(r"\b" + re.escape(word.lower()) + r"\b")
    return len(pattern.findall(text.lower()))


def tokenize(text: str, profile: LanguageProfile) -> TokenizedText:
    """
    Turn raw text into the deduplicated word set used to build a network.

    Args:
        text: Raw generated text
        profile: Language profile (tokenizer rule, stop words, node cap)

    Returns:
        TokenizedText with first-seen word order and literal frequencies
    """
    if not text:
        return TokenizedText()

    if profile.is_cjk:
        candidates = cjk_candidates(text)
        words = [w for w in candidates if w and not profile.is_stop_word(w)]
    else:
        candidates = alphabetic_candidates(text)
        words = [
            w for w in candidates
            if len(w) >= MIN_WORD_LENGTH and not profile.is_stop_word(w)
        ]

    # dict preserves first-seen order
    candidate_counts: dict[str, int] = {}
    for word in words:
        candidate_counts[word] = candidate_counts.get(word, 0) + 1
    unique_words = list(candidate_counts)

    if profile.max_nodes is not None and len(unique_words) > profile.max_nodes:
        # sorted() is stable, so ties keep first-seen order
        ranked = sorted(unique_words, key=lambda w: candidate_counts[w], reverse=True)
        unique_words = ranked[: profile.max_nodes]
        logger.debug(
            f"Capped {len(candidate_counts)} candidate words to {profile.max_nodes}"
        )

    frequency = {word: count_occurrences(text, word, profile) for word in unique_words}

    return TokenizedText(unique_words=unique_words, frequency=frequency)
