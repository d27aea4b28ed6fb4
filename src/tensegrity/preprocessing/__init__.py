"""Preprocessing modules for Tensegrity."""

from .profiles import (
    CJK_LANGUAGES,
    STOPWORDS,
    SUPPORTED_LANGUAGES,
    LanguageProfile,
    TokenizerRule,
    get_profile,
)
from .tokenizer import (
    TokenizedText,
    alphabetic_candidates,
    cjk_candidates,
    count_occurrences,
    tokenize,
)

__all__ = [
    # Profiles
    "CJK_LANGUAGES",
    "STOPWORDS",
    "SUPPORTED_LANGUAGES",
    "LanguageProfile",
    "TokenizerRule",
    "get_profile",
    # Tokenizer
    "TokenizedText",
    "alphabetic_candidates",
    "cjk_candidates",
    "count_occurrences",
    "tokenize",
]
