import pytest

from proptable.errors import LexError
from proptable.lexer import lex
from proptable.tokens import TokenKind as K


def kinds(source):
    return [token.kind for token in lex(source)]


def lexemes(source):
    return [token.lexeme for token in lex(source)]


def test_keywords_and_symbols_lex_to_same_kinds():
    expected = [K.VARIABLE, K.AND, K.VARIABLE, K.EOF]
    for source in ["p and q", "p & q", "p ∧ q", "p ^ q", "p AND q"]:
        assert kinds(source) == expected

    assert lexemes("p AnD q") == ["p", "AnD", "q", ""]


def test_operator_glyphs():
    assert kinds("a | b v c ∨ d or e") == [K.VARIABLE, K.OR] * 4 + [K.VARIABLE, K.EOF]
    assert kinds("! ~ ¬ not x") == [K.NOT] * 4 + [K.VARIABLE, K.EOF]
    assert kinds("a -> b → c if d") == [K.VARIABLE, K.IF] * 3 + [K.VARIABLE, K.EOF]
    assert kinds("a <-> b ↔ c iff d") == [K.VARIABLE, K.IFF] * 3 + [K.VARIABLE, K.EOF]
    assert kinds("(p)") == [K.LEFT_PAREN, K.VARIABLE, K.RIGHT_PAREN, K.EOF]


def test_longest_keyword_wins():
    assert kinds("iff") == [K.IFF, K.EOF]
    assert kinds("if") == [K.IF, K.EOF]
    assert kinds("Iff") == [K.IFF, K.EOF]
    assert kinds("IF") == [K.IF, K.EOF]
    assert kinds("I") == [K.VARIABLE, K.EOF]
    assert kinds("iffy") == [K.IFF, K.VARIABLE, K.EOF]


def test_keyword_prefix_falls_back_to_variable():
    assert lexemes("a") == ["a", ""]
    assert kinds("tru") == [K.VARIABLE, K.VARIABLE, K.VARIABLE, K.EOF]
    assert kinds("f1 & t2") == [K.VARIABLE, K.AND, K.VARIABLE, K.EOF]
    assert kinds("pand") == [K.VARIABLE, K.AND, K.EOF]


def test_literals():
    for source in ["true", "TRUE", "True", "⊤"]:
        assert kinds(source) == [K.TRUE, K.EOF]
    for source in ["false", "FALSE", "⊥"]:
        assert kinds(source) == [K.FALSE, K.EOF]


def test_variables_take_trailing_digits_only():
    assert lexemes("p12 q3") == ["p12", "q3", ""]
    assert kinds("p1a") == [K.VARIABLE, K.VARIABLE, K.EOF]
    assert lexemes("é2") == ["é2", ""]
    # lowercase v is OR, uppercase V is a variable
    assert kinds("V") == [K.VARIABLE, K.EOF]


def test_positions():
    tokens = lex("p -> q")
    assert [token.position for token in tokens] == [0, 2, 5, 6]
    assert tokens[-1].kind == K.EOF


def test_whitespace():
    assert kinds(" p\nq ") == [K.VARIABLE, K.VARIABLE, K.EOF]
    assert kinds("") == [K.EOF]


@pytest.mark.parametrize("source,position", [
    ("1p", 0),
    ("p -", 2),
    ("p <-", 2),
    ("p -x", 3),
    ("p <=> q", 3),
    ("p\tq", 1),
    ("p $ q", 2),
    ("中", 0),
])
def test_lex_errors(source, position):
    with pytest.raises(LexError) as info:
        lex(source)
    assert info.value.position == position


def test_lex_error_message():
    with pytest.raises(LexError, match="non-letter"):
        lex("1p")
    with pytest.raises(LexError, match="end of input"):
        lex("a -")
