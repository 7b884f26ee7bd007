"""Pushdown parser turning hasp token sequences into expression trees.

The parser walks the tokens once, left to right, keeping a stack of the lists
that are still open and the top-level expressions finished so far:

    "(":   push a new empty list onto the stack.
    ")":   close the list on top of the stack. It becomes the last item of
           the list below it, or a top-level expression when nothing is below.
    other: classify the atom and append it to the list on top of the stack.
           With an empty stack it is a loose atom and is emitted directly.

The first error aborts the whole parse; no partial result is returned.
"""

import logging
from typing import Iterable

from .atoms import parse_atom
from .tokenizer import tokenize
from .types import Expr, List

logger = logging.getLogger(__name__)

OPEN = "("
CLOSE = ")"


def _squash(stack: list[list[Expr]]) -> None:
    # Close the top frame and append it to the frame below. Needs depth >= 2.
    top = stack.pop()
    stack[-1].append(List(top))


def parse(tokens: Iterable[str]) -> list[Expr]:
    """Parse a token sequence into its top-level expressions, in order.

    Raises:
        SyntaxError: on an unmatched bracket or an invalid atom.
    """
    stack: list[list[Expr]] = []
    exprs: list[Expr] = []
    count = 0
    for tok in tokens:
        count += 1
        if tok == OPEN:
            stack.append([])
        elif tok == CLOSE:
            if not stack:
                logger.debug("unmatched ) at token %d", count)
                raise SyntaxError("Extra )")
            if len(stack) == 1:
                exprs.append(List(stack.pop()))
            else:
                _squash(stack)
        else:
            atom = parse_atom(tok)
            if stack:
                stack[-1].append(atom)
            else:
                exprs.append(atom)
    if stack:
        logger.debug("%d list(s) still open at end of input", len(stack))
        raise SyntaxError("Missing )")
    logger.debug("parsed %d expression(s) from %d token(s)", len(exprs), count)
    return exprs


def parse_source(src: str) -> list[Expr]:
    """Tokenize and parse hasp source text."""
    return parse(tokenize(src))
