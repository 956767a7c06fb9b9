"""
Rule-based password generator with a heuristic strength scorer and
localized strength labels.
"""

from .evaluator import score_password, strength_score
from .generator import Passgen, Rule, Rules, RulesetError
from .lang import Language, strength_level

__all__ = [
    "Passgen",
    "Rule",
    "Rules",
    "RulesetError",
    "Language",
    "score_password",
    "strength_score",
    "strength_level",
]
