"""Tokenizer for hasp source text."""

BRACKETS = ("(", ")")
COMMENT = ";"


def tokenize(src: str) -> list[str]:
    """Split source text into bracket, string and bare atom tokens.

    String tokens keep their quotes and backslash escapes verbatim. Comments
    run from ``;`` to the end of the line.
    """
    tokens: list[str] = []
    buf = ""
    in_str = False
    escaped = False
    in_comment = False
    for ch in src:
        if in_comment:
            if ch == "\n":
                in_comment = False
            continue
        if in_str:
            buf += ch
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_str = False
                tokens.append(buf)
                buf = ""
            continue
        if ch == '"':
            tokens.extend(buf.split())
            buf = '"'
            in_str = True
            continue
        if ch == COMMENT:
            tokens.extend(buf.split())
            buf = ""
            in_comment = True
            continue
        if ch in BRACKETS:
            tokens.extend(buf.split())
            tokens.append(ch)
            buf = ""
            continue
        buf += ch
    if in_str:
        raise SyntaxError("Unterminated string")
    tokens.extend(buf.split())
    return tokens
