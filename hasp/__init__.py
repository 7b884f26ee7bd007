from .atoms import classify, parse_atom
from .parser import parse, parse_source
from .tokenizer import tokenize
from .types import Atom, BoolLiteral, Expr, FloatLiteral, IntLiteral, List, Literal, StringLiteral, Var

__all__ = [
    "parse", "parse_source", "classify", "parse_atom", "tokenize",
    "Atom", "List", "Expr", "Literal",
    "IntLiteral", "FloatLiteral", "BoolLiteral", "StringLiteral", "Var",
]
