"""
passgen.generator
Rule-based password generator using Python's secrets module.

A Passgen instance holds a ruleset (which character classes to use, the
"strong & usability" mode, or a custom charset), the current password and
the language used for strength labels. generate() draws candidates until
one contains every class the ruleset requires.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from secrets import choice
from typing import List, Optional, Union

from . import charsets
from .evaluator import strength_score
from .lang import DEFAULT_LANGUAGE, Language, parse_language, strength_level

logger = logging.getLogger(__name__)

MIN_LENGTH = 4


class RulesetError(ValueError):
    """Raised when the assembled pool cannot satisfy the classes the rules require."""


class Rule(Enum):
    LETTERS = "letters"
    UPPERCASE = "uppercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"
    STRONG_USAB = "strong_usab"


@dataclass
class Rules:
    letters: bool = False
    uppercase: bool = False
    numbers: bool = False
    symbols: bool = False
    # First char is a letter, last is a simple symbol, ambiguous chars are
    # excluded. Overrides the four class flags for pool assembly.
    strong_usab: bool = False
    # Non-empty custom_charset overrides every other rule.
    custom_charset: str = ""

    def is_clean(self) -> bool:
        return not (
            self.letters
            or self.uppercase
            or self.numbers
            or self.symbols
            or self.strong_usab
            or self.custom_charset
        )

    def required_classes(self) -> List[str]:
        """Character classes a generated password must contain at least once."""
        required = []
        if self.letters or self.strong_usab:
            required.append(charsets.LETTERS)
        if self.uppercase or self.strong_usab:
            required.append(charsets.UPPERCASE_LETTERS)
        if self.numbers or self.strong_usab:
            required.append(charsets.NUMBERS)
        if self.symbols or self.strong_usab:
            required.append(charsets.SPEC_SYMBOLS)
        return required


def assemble_pool(rules: Rules) -> str:
    """Characters eligible for a uniform draw under rules."""
    if rules.custom_charset:
        return rules.custom_charset
    if rules.strong_usab or not (rules.letters or rules.uppercase or rules.numbers or rules.symbols):
        return charsets.STRONG_USAB

    pools = []
    if rules.letters:
        pools.append(charsets.LETTERS)
    if rules.uppercase:
        pools.append(charsets.UPPERCASE_LETTERS)
    if rules.numbers:
        pools.append(charsets.NUMBERS)
    if rules.symbols:
        pools.append(charsets.SPEC_SYMBOLS)
    return "".join(pools)


def draw_candidate(rules: Rules, pool: str, length: int) -> str:
    """
    Draw one candidate of exactly `length` characters.

    In strong & usability mode (without a custom charset) the first
    character comes from the unambiguous letters, the last from the simple
    symbols and the rest from pool. Otherwise every position is drawn from
    pool.
    """
    if rules.strong_usab and not rules.custom_charset:
        if length < 2:
            raise ValueError("strong & usability mode needs length >= 2")
        chars = [choice(charsets.STRONG_USAB_LETTERS)]
        chars.extend(choice(pool) for _ in range(length - 2))
        chars.append(choice(charsets.STRONG_USAB_SYMBOLS))
        return "".join(chars)
    return "".join(choice(pool) for _ in range(length))


def is_valid_by_consist(password: str, rules: Rules) -> bool:
    """True if password has at least one character of every required class."""
    return all(any(c in cls for c in password) for cls in rules.required_classes())


def ensure_satisfiable(rules: Rules, pool: str) -> None:
    """
    Raise RulesetError when no candidate drawn from pool can pass
    is_valid_by_consist, so the retry loop in Passgen.generate always ends.
    """
    if rules.custom_charset:
        return
    available = pool
    if rules.strong_usab:
        available += charsets.STRONG_USAB_LETTERS + charsets.STRONG_USAB_SYMBOLS
    missing = [cls for cls in rules.required_classes() if not any(c in available for c in cls)]
    if missing:
        raise RulesetError(
            "pool cannot satisfy the rules; missing class(es): " + ", ".join(repr(m) for m in missing)
        )


class Passgen:
    """
    Password generator with a mutable ruleset.

    Setters return the instance so calls can be chained:

        Passgen.new().set_enabled_letters(True).set_enabled_numbers(True).generate(12)
    """

    def __init__(self, rules: Optional[Rules] = None, language: Language = DEFAULT_LANGUAGE) -> None:
        self.rules = rules if rules is not None else Rules()
        self.language = language
        self.password = ""

    @classmethod
    def new(cls) -> "Passgen":
        """Instance without any rules; generate() returns ""."""
        return cls()

    @classmethod
    def default(cls) -> "Passgen":
        """All four simple rules enabled."""
        return cls(Rules(letters=True, uppercase=True, numbers=True, symbols=True))

    @classmethod
    def default_strong_and_usab(cls) -> "Passgen":
        """Only the strong & usability rule enabled."""
        return cls(Rules(strong_usab=True))

    # --- rules ---

    def set_enabled_letters(self, value: bool) -> "Passgen":
        self.rules.letters = value
        return self

    def set_enabled_uppercase_letters(self, value: bool) -> "Passgen":
        self.rules.uppercase = value
        return self

    def set_enabled_numbers(self, value: bool) -> "Passgen":
        self.rules.numbers = value
        return self

    def set_enabled_spec_symbols(self, value: bool) -> "Passgen":
        self.rules.symbols = value
        return self

    def set_enabled_strong_usab(self, value: bool) -> "Passgen":
        self.rules.strong_usab = value
        return self

    def set_custom_charset(self, value: str) -> "Passgen":
        self.rules.custom_charset = value
        return self

    def set_rule(self, rule: Union[Rule, str], value: bool) -> "Passgen":
        setattr(self.rules, Rule(rule).value, bool(value))
        return self

    def get_rule(self, rule: Union[Rule, str]) -> bool:
        return getattr(self.rules, Rule(rule).value)

    def is_ruleset_clean(self) -> bool:
        return self.rules.is_clean()

    # --- language ---

    def set_language(self, language: Union[Language, str]) -> "Passgen":
        self.language = parse_language(language)
        return self

    # --- password ---

    def set_password(self, value: str) -> "Passgen":
        self.password = value
        return self

    def get_password(self) -> str:
        return self.password

    def generate(self, length: int) -> str:
        """
        Generate, store and return a password of max(length, 4) characters.

        Returns "" when the ruleset is clean. Without a custom charset the
        candidate is redrawn until it satisfies the rules.
        """
        if self.rules.is_clean():
            return ""

        length = max(length, MIN_LENGTH)
        pool = assemble_pool(self.rules)
        ensure_satisfiable(self.rules, pool)
        pwd = draw_candidate(self.rules, pool, length)

        if not self.rules.custom_charset:
            attempts = 1
            while not is_valid_by_consist(pwd, self.rules):
                logger.debug("candidate %d rejected by rules", attempts)
                pwd = draw_candidate(self.rules, pool, length)
                attempts += 1
            if attempts > 1:
                logger.debug("accepted candidate after %d attempts", attempts)

        self.password = pwd
        return pwd

    def validate_password(self) -> bool:
        """
        Check the current password against the rules.

        With a custom charset every character must belong to it; otherwise
        every required class must be present.
        """
        if self.rules.custom_charset:
            return all(c in self.rules.custom_charset for c in self.password)
        return is_valid_by_consist(self.password, self.rules)

    def password_strength_score(self) -> int:
        return strength_score(self.password)

    def password_strength_level(self) -> str:
        return strength_level(self.password_strength_score(), self.language)
