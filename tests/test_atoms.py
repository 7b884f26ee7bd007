import pytest
from hasp.atoms import classify, parse_atom
from hasp.types import Atom, BoolLiteral, FloatLiteral, IntLiteral, StringLiteral, Var


def test_classify_integer():
    assert classify("42") == IntLiteral(42)


def test_classify_negative_integer():
    assert classify("-7") == IntLiteral(-7)


def test_classify_big_integer():
    assert classify("123456789012345678901234567890") == IntLiteral(123456789012345678901234567890)


def test_classify_integer_beyond_str_digit_limit():
    assert classify("1" * 5000) == IntLiteral((10 ** 5000 - 1) // 9)


def test_classify_negative_integer_beyond_str_digit_limit():
    assert classify("-" + "9" * 4500) == IntLiteral(-(10 ** 4500 - 1))


def test_classify_negative_float():
    assert classify("-3.5") == FloatLiteral(-3.5)


def test_classify_float():
    lit = classify("0.25")
    assert isinstance(lit, FloatLiteral)
    assert lit.value == 0.25


def test_classify_bool_true():
    assert classify("#t") == BoolLiteral(True)


def test_classify_bool_false():
    assert classify("#f") == BoolLiteral(False)


def test_classify_string_keeps_quotes():
    assert classify('"hello world"') == StringLiteral('"hello world"')


def test_classify_empty_string():
    assert classify('""') == StringLiteral('""')


def test_classify_string_with_escaped_quote():
    assert classify(r'"say \"hi\""') == StringLiteral(r'"say \"hi\""')


def test_classify_var():
    assert classify("x1") == Var("x1")


@pytest.mark.parametrize("tok", ["-", "+", "<=", "set!", "null?", "a->b", "*global*", "|x|"])
def test_classify_symbol_vars(tok):
    assert classify(tok) == Var(tok)


def test_integer_wins_over_float():
    assert isinstance(classify("10"), IntLiteral)


def test_negative_number_is_not_a_var():
    assert classify("-1") == IntLiteral(-1)


def test_parse_atom_wraps_literal():
    assert parse_atom("#t") == Atom(BoolLiteral(True))


class TestInvalidAtoms:
    def test_trailing_decimal_point(self):
        with pytest.raises(SyntaxError, match="Invalid atomic symbol `4.`"):
            classify("4.")

    def test_leading_decimal_point(self):
        with pytest.raises(SyntaxError, match="Invalid atomic symbol"):
            classify(".5")

    def test_scientific_notation(self):
        with pytest.raises(SyntaxError, match="Invalid atomic symbol"):
            classify("1e10")

    def test_digit_leading_identifier(self):
        with pytest.raises(SyntaxError, match="Invalid atomic symbol `1abc`"):
            classify("1abc")

    def test_unknown_hash_literal(self):
        with pytest.raises(SyntaxError, match="Invalid atomic symbol `#true`"):
            classify("#true")

    def test_unescaped_interior_quote(self):
        with pytest.raises(SyntaxError, match="Invalid atomic symbol"):
            classify('"a"b"')

    def test_lone_quote(self):
        with pytest.raises(SyntaxError, match="Invalid atomic symbol"):
            classify('"')

    def test_empty_token(self):
        with pytest.raises(SyntaxError, match="Invalid atomic symbol ``"):
            classify("")

    def test_trailing_newline(self):
        with pytest.raises(SyntaxError, match="Invalid atomic symbol"):
            classify("42\n")

    def test_message_is_exact(self):
        with pytest.raises(SyntaxError) as exc:
            classify("a.b")
        assert exc.value.msg == "Invalid atomic symbol `a.b`"
