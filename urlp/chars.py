"""Character classes

Every class function answers whether a character is *excluded*,
a token is the run of characters for which it returns False.
"""

from string import ascii_letters, digits


__all__ = [
    'not_host_char', 'not_path_char', 'not_digit', 'not_alpha'
]


ALPHA = frozenset(ascii_letters)
DIGIT = frozenset(digits)
HOST = ALPHA | DIGIT | {'-'}
PATH = HOST | {'.'}


def not_host_char(c: str) -> bool:
    return c not in HOST


def not_path_char(c: str) -> bool:
    return c not in PATH


def not_digit(c: str) -> bool:
    return c not in DIGIT


def not_alpha(c: str) -> bool:
    return c not in ALPHA
