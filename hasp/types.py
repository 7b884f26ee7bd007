from dataclasses import dataclass
from typing import Iterable

# Literal values carried by leaf expressions.

@dataclass(frozen=True)
class IntLiteral:
    value: int

@dataclass(frozen=True)
class FloatLiteral:
    value: float

@dataclass(frozen=True)
class BoolLiteral:
    value: bool

@dataclass(frozen=True)
class StringLiteral:
    # Raw token text, delimiting quotes and escapes included.
    text: str

@dataclass(frozen=True)
class Var:
    name: str


Literal = IntLiteral | FloatLiteral | BoolLiteral | StringLiteral | Var


@dataclass(frozen=True)
class Atom:
    literal: Literal


@dataclass(frozen=True)
class List:
    items: tuple["Expr", ...] = ()

    def __init__(self, items: Iterable["Expr"] = ()):
        object.__setattr__(self, "items", tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


Expr = Atom | List
