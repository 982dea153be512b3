from proptable.errors import LexError
from proptable.tokens import Token, TokenKind

# ----------------------- lexical tables -----------------------
whitespace = set([' ', '\n']) # skipped between tokens
parens = {'(': TokenKind.LEFT_PAREN, ')': TokenKind.RIGHT_PAREN}
single_char_ops = {
    '&': TokenKind.AND, '^': TokenKind.AND, '∧': TokenKind.AND,
    '|': TokenKind.OR, 'v': TokenKind.OR, '∨': TokenKind.OR,
    '!': TokenKind.NOT, '~': TokenKind.NOT, '¬': TokenKind.NOT,
    '→': TokenKind.IF,
    '↔': TokenKind.IFF,
}
multi_char_ops = {'-': ('->', TokenKind.IF), '<': ('<->', TokenKind.IFF)}
literal_glyphs = {'⊤': TokenKind.TRUE, '⊥': TokenKind.FALSE}
# keywords by (lowercase) first letter, longest first
keywords = {
    'a': [('and', TokenKind.AND)],
    'o': [('or', TokenKind.OR)],
    'n': [('not', TokenKind.NOT)],
    'i': [('iff', TokenKind.IFF), ('if', TokenKind.IF)],
    't': [('true', TokenKind.TRUE)],
    'f': [('false', TokenKind.FALSE)],
}
keyword_starts = set('AaOoNnIiTtFf')
digits = set('0123456789')
# --------------------------------------------------------------

def is_letter(c):
    '''
    Checks whether c may start a variable name.

    A letter is any character with distinct lower and upper case forms, so
    'p', 'Q', 'é' and 'ß' qualify while digits, punctuation and caseless
    scripts do not.

    Args:
        c (str): single character.

    Returns:
        bool.
    '''
    return c.lower() != c.upper()


class Lexer():

    def __init__(self, source):
        self.source = source
        self.length = len(source)
        self.cursor = 0
        self.tokens = []

    def run(self):
        while self.cursor < self.length:
            c = self.source[self.cursor]

            if c in whitespace:
                self.cursor += 1
            elif c in parens:
                self.emit(parens[c], 1)
            elif c in single_char_ops:
                self.emit(single_char_ops[c], 1)
            elif c in multi_char_ops:
                self.lex_multi_char_op()
            elif c in literal_glyphs:
                self.emit(literal_glyphs[c], 1)
            elif c in keyword_starts:
                self.lex_keyword_or_variable()
            else:
                self.lex_variable()

        self.tokens.append(Token.eof(self.length))
        return self.tokens

    def emit(self, kind, width):
        start = self.cursor
        self.cursor += width
        self.tokens.append(Token(kind, self.source[start:self.cursor], start))

    def lex_multi_char_op(self):
        operator, kind = multi_char_ops[self.source[self.cursor]]
        end = self.cursor + len(operator)

        if end > self.length:
            raise LexError(f"Unexpected end of input while reading '{operator}'", self.cursor)

        for offset in range(1, len(operator)):
            c = self.source[self.cursor + offset]
            if c != operator[offset]:
                raise LexError(f"Unexpected character '{c}' while reading '{operator}'", self.cursor + offset)

        self.emit(kind, len(operator))

    def lex_keyword_or_variable(self):
        for word, kind in keywords[self.source[self.cursor].lower()]:
            candidate = self.source[self.cursor:self.cursor + len(word)]
            if candidate.lower() == word:
                self.emit(kind, len(word))
                return
        self.lex_variable() # no keyword here, same character starts a variable

    def lex_variable(self):
        start = self.cursor
        c = self.source[start]
        if not is_letter(c):
            raise LexError(f"Variable started with non-letter '{c}'", start)

        self.cursor += 1
        while self.cursor < self.length and self.source[self.cursor] in digits:
            self.cursor += 1

        self.tokens.append(Token(TokenKind.VARIABLE, self.source[start:self.cursor], start))


def lex(source):
    '''
    Splits a formula into tokens.

    Args:
        source (str): formula text.

    Returns:
        list(Token): tokens in source order, terminated by a single EOF token.

    Raises:
        LexError: on a malformed operator or a variable not starting with a letter.
    '''
    return Lexer(source).run()
