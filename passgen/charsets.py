"""
passgen.charsets
Character classes used for pool assembly and rule validation.
"""

LETTERS = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS = "0123456789"
SPEC_SYMBOLS = ")([]{}*&^%$#@!~"

# "Strong & usability" sets: no ambiguous characters (0 o O i I l L 1).
# The simple symbols are a subset of SPEC_SYMBOLS that is easy to type.
STRONG_USAB_LETTERS = "ABCDEFGHJKMNPQRSTUVWXYZabcdefghjkmnpqrstuvwxyz"
STRONG_USAB_SYMBOLS = "*&%$#@!"
STRONG_USAB = STRONG_USAB_LETTERS + "23456789"
