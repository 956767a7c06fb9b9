"""
passgen.evaluator

Heuristic password strength scorer:
- length, character-class variety and character uniqueness earn points
- exact matches against a short list of very common passwords score 0
- weak substrings, ascending runs, repeated characters and single-class
  passwords are penalized (total penalty capped at 30)
- a bounded entropy estimate adds up to 10 points

score_password(password) returns a breakdown dict; strength_score(password)
returns only the 0-100 integer.
"""

import math
import string
from typing import Dict, List

from .lang import DEFAULT_LANGUAGE, Language, strength_level

MIN_SCORED_LENGTH = 4

# exact matches, compared case-insensitively
COMMON_PASSWORDS = (
    "password", "123456", "qwerty", "admin", "welcome",
    "12345678", "123456789", "12345", "1234", "111111",
)

# substrings, each one found costs PATTERN_PENALTY
WEAK_PATTERNS = ("password", "123", "qwerty", "admin", "letmein")

PATTERN_PENALTY = 15
STRUCTURE_PENALTY = 10
MAX_PENALTY = 30
MAX_VARIETY = 25
MAX_UNIQUENESS = 20
MAX_ENTROPY_BONUS = 10

# class bonus by number of distinct classes present
MULTI_CLASS_BONUS = {2: 5, 3: 10, 4: 15}

SPECIAL_CHARS = string.punctuation


def length_score(length: int) -> int:
    if length <= 4:
        return 0
    if length <= 6:
        return 5
    if length <= 8:
        return 10
    if length <= 10:
        return 15
    if length <= 12:
        return 20
    return 25


def char_classes(password: str) -> Dict[str, bool]:
    """Which of the four classes (lower, upper, digit, special) appear in password."""
    return {
        "lower": any(c.islower() for c in password),
        "upper": any(c.isupper() for c in password),
        "digit": any(c.isdigit() for c in password),
        "special": any(c in SPECIAL_CHARS for c in password),
    }


def variety_score(classes: Dict[str, bool]) -> int:
    score = 0
    for name in ("lower", "upper", "digit"):
        if classes[name]:
            score += 5
    if classes["special"]:
        score += 10
    score += MULTI_CLASS_BONUS.get(sum(classes.values()), 0)
    return min(score, MAX_VARIETY)


def uniqueness_score(password: str) -> int:
    if not password:
        return 0
    # integer form of int(distinct / length * 20)
    return len(set(password)) * MAX_UNIQUENESS // len(password)


def detect_weak_patterns(password: str) -> List[str]:
    """Return the weak substrings (case-insensitive) contained in password."""
    lower = password.lower()
    return [p for p in WEAK_PATTERNS if p in lower]


def has_ascending_run(password: str, run: int = 3) -> bool:
    """True if `run` consecutive characters ascend by one code point each, e.g. 'abc', '123'."""
    codes = [ord(c) for c in password]
    for i in range(len(codes) - run + 1):
        if all(codes[i + k] == codes[i] + k for k in range(1, run)):
            return True
    return False


def has_repeated_chars(password: str, run: int = 3) -> bool:
    """True if `run` identical characters appear back to back, e.g. 'aaa'."""
    for i in range(len(password) - run + 1):
        if password[i:i + run] == password[i] * run:
            return True
    return False


def estimate_entropy(password: str) -> float:
    """
    Charset-size entropy estimate in bits:
    pool = 26 (lower) + 26 (upper) + 10 (digits) + 32 (special), counting
    only the classes present; bits = length * log2(pool).
    """
    classes = char_classes(password)
    pool = 0
    if classes["lower"]:
        pool += 26
    if classes["upper"]:
        pool += 26
    if classes["digit"]:
        pool += 10
    if classes["special"]:
        pool += 32
    if pool == 0:
        return 0.0
    return len(password) * math.log2(pool)


def entropy_bonus(password: str) -> int:
    return int(min(estimate_entropy(password) / 10, MAX_ENTROPY_BONUS))


def _empty_report(password: str, language: Language, explanation: str) -> Dict:
    return {
        "password": password,
        "score": 0,
        "label": strength_level(0, language),
        "length_score": 0,
        "variety_score": 0,
        "uniqueness_score": 0,
        "penalty": 0,
        "entropy_bonus": 0,
        "explanations": [explanation],
    }


def score_password(password: str, language: Language = DEFAULT_LANGUAGE) -> Dict:
    """
    Score password and explain the result.

    Returns a dict:
    {
        "password": password,
        "score": int,  # 0..100
        "label": str,  # localized bucket label
        "length_score": int,
        "variety_score": int,
        "uniqueness_score": int,
        "penalty": int,  # after the cap
        "entropy_bonus": int,
        "explanations": [str]
    }
    """
    length = len(password)
    if length < MIN_SCORED_LENGTH:
        return _empty_report(password, language, f"Password is shorter than {MIN_SCORED_LENGTH} characters.")

    l_score = length_score(length)
    classes = char_classes(password)
    class_count = sum(classes.values())
    v_score = variety_score(classes)
    u_score = uniqueness_score(password)
    score = l_score + v_score + u_score

    if password.lower() in COMMON_PASSWORDS:
        return _empty_report(password, language, "Password is one of the most common passwords.")

    explanations: List[str] = []
    penalty = 0

    patterns = detect_weak_patterns(password)
    if patterns:
        explanations.append(f"Contains weak pattern(s): {', '.join(patterns)}")
        penalty += PATTERN_PENALTY * len(patterns)

    if has_ascending_run(password):
        explanations.append("Contains an ascending sequence (e.g. 'abc', '123').")
        penalty += STRUCTURE_PENALTY
    if has_repeated_chars(password):
        explanations.append("Contains three or more identical characters in a row.")
        penalty += STRUCTURE_PENALTY
    if class_count < 2:
        explanations.append("Uses fewer than two character classes.")
        penalty += STRUCTURE_PENALTY

    penalty = min(penalty, MAX_PENALTY)
    score -= penalty

    bonus = entropy_bonus(password)
    score += bonus
    score = max(0, min(100, score))

    if not explanations:
        explanations.append("No weak patterns, sequences or repeats detected.")

    return {
        "password": password,
        "score": score,
        "label": strength_level(score, language),
        "length_score": l_score,
        "variety_score": v_score,
        "uniqueness_score": u_score,
        "penalty": penalty,
        "entropy_bonus": bonus,
        "explanations": explanations,
    }


def strength_score(password: str) -> int:
    """Return only the 0-100 score of password."""
    return score_password(password)["score"]
