"""
passgen.lang
Localized strength labels.

Scores are split into five buckets (0-20, 21-40, 41-60, 61-80, 81-100) and
each language carries one label per bucket, weakest first.
"""

from enum import Enum
from typing import Dict, Tuple, Union


class Language(Enum):
    ENGLISH = "english"
    CHINESE = "chinese"
    SPANISH = "spanish"
    HINDI = "hindi"
    ARABIC = "arabic"
    PORTUGUESE = "portuguese"
    BENGALI = "bengali"
    RUSSIAN = "russian"
    JAPANESE = "japanese"
    PUNJABI = "punjabi"
    GERMAN = "german"
    KOREAN = "korean"
    FRENCH = "french"
    TURKISH = "turkish"
    ITALIAN = "italian"


DEFAULT_LANGUAGE = Language.ENGLISH
UNKNOWN_LEVEL = "Unknown"

LABELS: Dict[Language, Tuple[str, str, str, str, str]] = {
    Language.ENGLISH: ("Very Weak", "Weak", "Fair", "Strong", "Very Strong"),
    Language.CHINESE: ("非常弱", "弱", "一般", "强", "非常强"),
    Language.SPANISH: ("Muy Débil", "Débil", "Aceptable", "Fuerte", "Muy Fuerte"),
    Language.HINDI: ("बहुत कमजोर", "कमजोर", "मध्यम", "मजबूत", "बहुत मजबूत"),
    Language.ARABIC: ("ضعيف جداً", "ضعيف", "مقبول", "قوي", "قوي جداً"),
    Language.PORTUGUESE: ("Muito Fraco", "Fraco", "Razoável", "Forte", "Muito Forte"),
    Language.BENGALI: ("খুব দুর্বল", "দুর্বল", "মধ্যম", "শক্তিশালী", "খুব শক্তিশালী"),
    Language.RUSSIAN: ("Очень слабый", "Слабый", "Удовлетворительный", "Сильный", "Очень сильный"),
    Language.JAPANESE: ("非常に弱い", "弱い", "普通", "強い", "非常に強い"),
    Language.PUNJABI: ("ਬਹੁਤ ਕਮਜ਼ੋਰ", "ਕਮਜ਼ੋਰ", "ਸ਼ਾਤ", "ਮਜ਼ਬੂਤ", "ਬਹੁਤ ਮਜ਼ਬੂਤ"),
    Language.GERMAN: ("Sehr Schwach", "Schwach", "Mittel", "Stark", "Sehr Stark"),
    Language.KOREAN: ("매우 약함", "약함", "보통", "강함", "매우 강함"),
    Language.FRENCH: ("Très Faible", "Faible", "Moyen", "Fort", "Très Fort"),
    Language.TURKISH: ("Çok Zayıf", "Zayıf", "Orta", "Güçlü", "Çok Güçlü"),
    Language.ITALIAN: ("Molto Debole", "Debole", "Discreto", "Forte", "Molto Forte"),
}


def parse_language(value: Union[str, Language]) -> Language:
    """Accept a Language or its name ("russian", "RUSSIAN", "Russian")."""
    if isinstance(value, Language):
        return value
    if not isinstance(value, str):
        raise ValueError(f"language must be a name, got {value!r}")
    try:
        return Language(value.strip().lower())
    except ValueError:
        names = ", ".join(lang.value for lang in Language)
        raise ValueError(f"unknown language {value!r} (expected one of: {names})") from None


def bucket_index(score: int) -> int:
    """Index of the label bucket for score, or -1 when score is outside 0..100."""
    if score < 0 or score > 100:
        return -1
    if score <= 20:
        return 0
    return (score - 1) // 20


def strength_level(score: int, language: Language = DEFAULT_LANGUAGE) -> str:
    idx = bucket_index(score)
    if idx < 0:
        return UNKNOWN_LEVEL
    return LABELS[language][idx]
