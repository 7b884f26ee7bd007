"""Classification of atomic tokens into typed literals."""

import re
from typing import Callable

from .types import Atom, BoolLiteral, FloatLiteral, IntLiteral, Literal, StringLiteral, Var

INTEGER_PAT = re.compile(r"-?[0-9]+")
FLOAT_PAT = re.compile(r"-?[0-9]+\.[0-9]+")  # no scientific notation
BOOL_PAT = re.compile(r"#t|#f")
STRING_PAT = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)

_SYMBOL_CHARS = r"!@$%&*_=+|<>/?\-"
VAR_PAT = re.compile(rf"[a-zA-Z{_SYMBOL_CHARS}][a-zA-Z0-9{_SYMBOL_CHARS}]*")

# Below the smallest value sys.set_int_max_str_digits() accepts.
_INT_CHUNK = 500


def _to_int(tok: str) -> IntLiteral:
    # int() rejects decimal strings over the interpreter digit limit.
    digits = tok.lstrip("-")
    value = 0
    for i in range(0, len(digits), _INT_CHUNK):
        chunk = digits[i:i + _INT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return IntLiteral(-value if tok.startswith("-") else value)


def _to_bool(tok: str) -> BoolLiteral:
    if tok == "#t":
        return BoolLiteral(True)
    if tok == "#f":
        return BoolLiteral(False)
    raise ValueError(tok)


# First match wins; a token matching a pattern is never retried further down.
_CLASSES: list[tuple[re.Pattern, Callable[[str], Literal]]] = [
    (INTEGER_PAT, _to_int),
    (FLOAT_PAT, lambda tok: FloatLiteral(float(tok))),
    (BOOL_PAT, _to_bool),
    (STRING_PAT, StringLiteral),
    (VAR_PAT, Var),
]


def classify(token: str) -> Literal:
    """Determine the literal category of an atomic token.

    Raises:
        SyntaxError: if the token is not a legal atom, or a numeric token
            fails to convert.
    """
    for pattern, build in _CLASSES:
        if pattern.fullmatch(token):
            try:
                return build(token)
            except ValueError as e:
                raise _failure(token) from e
    raise _failure(token)


def parse_atom(token: str) -> Atom:
    """Classify a token and wrap it as a leaf expression."""
    return Atom(classify(token))


def _failure(token: str) -> SyntaxError:
    return SyntaxError(f"Invalid atomic symbol `{token}`")
