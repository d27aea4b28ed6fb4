"""Language profiles: tokenizer rule, stop words and graph limits per language."""

import logging
from dataclasses import dataclass
from enum import Enum

from tensegrity.config import Settings, settings

logger = logging.getLogger(__name__)


class TokenizerRule(str, Enum):
    """How raw text is cut into candidate words."""

    ALPHABETIC = "alphabetic"  # Runs of Unicode letters, lowercased
    CJK = "cjk"  # Overlapping 2-character windows over CJK runs


STOPWORDS: dict[str, frozenset[str]] = {
    "en": frozenset([
        "and", "the", "a", "an", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "from", "as", "is", "are", "was", "were", "be", "been",
        "being", "have", "has", "had", "do", "does", "did", "will", "would",
        "could", "should", "may", "might", "must", "can", "this", "that", "these",
        "those", "it", "its", "they", "them", "their", "there", "then", "than",
        "when", "where", "what", "which", "who", "whom", "whose", "why", "how",
        "if", "else", "all", "each", "every", "some", "any", "no", "not", "only",
        "just", "also", "too", "very", "so", "such", "more", "most", "much",
        "many", "few", "little", "other", "another", "one", "two", "three",
        "first", "second", "last", "next", "previous",
    ]),
    "es": frozenset([
        "y", "el", "la", "los", "las", "un", "una", "unos", "unas", "o", "pero",
        "en", "de", "a", "por", "para", "con", "sin", "sobre", "entre", "es",
        "son", "era", "eran", "fue", "fueron", "ser", "estar", "tener", "haber",
        "hacer", "poder", "deber", "querer", "este", "esta", "estos", "estas",
        "ese", "esa", "esos", "esas", "aquel", "aquella", "aquellos", "aquellas",
        "que", "cual", "quien", "cuando", "donde", "como", "porque", "si", "no",
        "también", "muy", "más", "menos", "mucho", "poco", "todo", "todos",
        "cada", "alguno", "ninguno",
    ]),
    "fr": frozenset([
        "et", "le", "la", "les", "un", "une", "des", "ou", "mais", "dans", "de",
        "à", "pour", "avec", "sans", "sur", "entre", "est", "sont", "était",
        "étaient", "être", "avoir", "faire", "pouvoir", "devoir", "vouloir", "ce",
        "cette", "ces", "celui", "celle", "ceux", "celles", "que", "qui", "quoi",
        "quand", "où", "comment", "pourquoi", "si", "non", "aussi", "très",
        "plus", "moins", "beaucoup", "peu", "tout", "tous", "chaque", "quelque",
        "aucun",
    ]),
    "de": frozenset([
        "und", "der", "die", "das", "den", "dem", "des", "ein", "eine", "eines",
        "einem", "einen", "oder", "aber", "in", "auf", "an", "zu", "für", "mit",
        "von", "aus", "ist", "sind", "war", "waren", "sein", "haben", "werden",
        "können", "müssen", "sollen", "wollen", "dieser", "diese", "dieses",
        "jener", "jene", "jenes", "welcher", "welche", "welches", "wann", "wo",
        "was", "wie", "warum", "wenn", "nicht", "auch", "sehr", "mehr",
        "weniger", "viel", "wenig", "alle", "jeder", "einige", "kein",
    ]),
    "it": frozenset([
        "e", "il", "la", "lo", "gli", "le", "un", "una", "uno", "o", "ma", "in",
        "di", "a", "da", "per", "con", "su", "tra", "fra", "è", "sono", "era",
        "erano", "essere", "avere", "fare", "potere", "dovere", "volere",
        "questo", "questa", "questi", "queste", "quello", "quella", "quelli",
        "quelle", "che", "chi", "quando", "dove", "come", "perché", "se", "non",
        "anche", "molto", "più", "meno", "tanto", "poco", "tutto", "ogni",
        "alcuni", "nessuno",
    ]),
    "pt": frozenset([
        "e", "o", "a", "as", "os", "um", "uma", "uns", "umas", "ou", "mas", "em",
        "de", "para", "por", "com", "sem", "sobre", "entre", "é", "são", "era",
        "eram", "ser", "estar", "ter", "haver", "fazer", "poder", "dever",
        "querer", "este", "esta", "estes", "estas", "esse", "essa", "esses",
        "essas", "aquele", "aquela", "aqueles", "aquelas", "que", "qual", "quem",
        "quando", "onde", "como", "porque", "se", "não", "também", "muito",
        "mais", "menos", "todo", "todos", "cada", "algum", "nenhum",
    ]),
    "ja": frozenset([
        "の", "に", "は", "を", "た", "が", "で", "て", "と", "し", "れ", "さ", "ある",
        "いる", "も", "する", "から", "な", "こと", "として", "い", "や", "れる",
        "など", "なっ", "ない", "この", "ため", "その", "あの", "どの", "いつ",
        "どこ", "どう", "なぜ", "もし", "とても", "より", "あまり", "たくさん",
        "少し", "すべて", "各", "いくつか", "何も",
    ]),
    "zh": frozenset([
        "的", "了", "在", "是", "我", "有", "和", "就", "不", "人", "都", "一", "一个",
        "上", "也", "很", "到", "说", "要", "去", "你", "会", "着", "没有", "看", "好",
        "自己", "这", "那", "这些", "那些", "什么", "哪个", "谁", "什么时候", "哪里",
        "怎么", "为什么", "如果", "更", "最", "很多", "一点", "所有", "每个", "一些",
    ]),
    "ko": frozenset([
        "은", "는", "이", "가", "을", "를", "의", "에", "에서", "와", "과", "도", "로",
        "으로", "만", "부터", "까지", "처럼", "같이", "보다", "하고", "그리고", "또",
        "또한", "또는", "그런데", "하지만", "그러나", "그래서", "그러므로", "그러면",
        "만약", "만일", "이것", "그것", "저것", "이런", "그런", "저런", "어떤", "무엇",
        "누구", "언제", "어디", "어떻게", "왜", "모든", "모두", "각", "각각", "어느",
        "몇", "많은", "적은", "많이", "조금", "전혀", "아니다", "있다", "없다", "하다",
        "되다", "이다", "그", "저", "그의", "이의", "저의", "그들의", "이들의", "저들의",
    ]),
    "ar": frozenset([
        "في", "من", "إلى", "على", "عن", "مع", "هذا", "هذه", "هؤلاء", "ذلك", "تلك",
        "أولئك", "الذي", "التي", "الذين", "اللاتي", "اللائي", "اللذان", "اللتان",
        "اللذين", "اللتين", "ما", "ماذا", "متى", "أين", "كيف", "لماذا", "إذا", "إن",
        "أن", "كان", "كانت", "كانوا", "يكون", "تكون", "يكونون", "ليس", "ليست",
        "ليسوا", "له", "لها", "لهم", "لهن", "لهما", "هو", "هي", "هم", "هن", "هما",
        "أنت", "أنتم", "أنتن", "أنا", "نحن", "و", "أو", "لكن", "بل", "ف", "ثم",
        "حتى", "أيضاً", "كذلك", "كل", "جميع", "بعض", "أي", "لا", "لم", "لن", "لما",
        "قد", "سوف", "س", "كانتا", "كن", "كنت", "كنتم", "كنتن", "كنا",
    ]),
    "tr": frozenset([
        "ve", "ile", "veya", "ya", "ama", "fakat", "ancak", "lakin", "de", "da",
        "ki", "mi", "mı", "mu", "mü", "bu", "şu", "o", "bunlar", "şunlar",
        "onlar", "bunun", "şunun", "onun", "bunların", "şunların", "onların",
        "ben", "sen", "biz", "siz", "benim", "senin", "bizim", "sizin", "ne",
        "kim", "hangi", "nasıl", "nerede", "nereden", "nereye", "niçin", "niye",
        "neden", "her", "tüm", "bütün", "bazı", "birkaç", "hiç", "hiçbir", "bir",
        "iki", "üç", "var", "yok", "olmak", "etmek", "yapmak", "gitmek",
        "gelmek", "görmek", "bilmek", "istemek", "daha", "en", "çok", "az",
        "biraz", "fazla", "kadar", "gibi", "için", "göre", "sonra", "önce",
        "şimdi", "böyle", "şöyle", "öyle",
    ]),
}

CJK_LANGUAGES: frozenset[str] = frozenset(["zh", "ja", "ko"])

# Languages offered by the host; those without a stop-word table use English
SUPPORTED_LANGUAGES: tuple[str, ...] = (
    "en", "es", "fr", "de", "it", "pt", "ja", "zh", "ko", "ar", "tr", "hr", "sr",
)


@dataclass(frozen=True)
class LanguageProfile:
    """Everything language-specific, selected once per text."""

    code: str
    rule: TokenizerRule = TokenizerRule.ALPHABETIC
    stop_words: frozenset[str] = frozenset()
    edge_threshold: float = 0.55
    max_nodes: int | None = None  # Keep only the top-N most frequent words
    max_degree: int | None = None  # Soft cap on edges per node

    @property
    def is_cjk(self) -> bool:
        return self.rule == TokenizerRule.CJK

    @property
    def vertical_ticker(self) -> bool:
        """CJK layouts reserve a vertical ticker strip on the right edge."""
        return self.is_cjk

    def is_stop_word(self, word: str) -> bool:
        """Exact match for CJK, case-insensitive otherwise."""
        if self.is_cjk:
            return word in self.stop_words
        return word.lower() in self.stop_words


def get_profile(code: str, config: Settings | None = None) -> LanguageProfile:
    """
    Build the profile for a language code.

    Unknown codes (and languages without their own table, e.g. hr/sr)
    use the English stop words.

    Args:
        code: ISO 639-1 language code
        config: Settings override (defaults to global settings)

    Returns:
        LanguageProfile for the language
    """
    config = config or settings
    code = (code or config.default_language).lower()

    if code not in STOPWORDS:
        logger.debug(f"No stop-word table for '{code}', using English")

    stop_words = STOPWORDS.get(code, STOPWORDS["en"])

    if code in CJK_LANGUAGES:
        return LanguageProfile(
            code=code,
            rule=TokenizerRule.CJK,
            stop_words=stop_words,
            edge_threshold=config.cjk_edge_threshold,
            max_nodes=config.cjk_max_nodes,
            max_degree=config.cjk_max_degree,
        )

    return LanguageProfile(
        code=code,
        rule=TokenizerRule.ALPHABETIC,
        stop_words=stop_words,
        edge_threshold=config.edge_threshold,
    )
