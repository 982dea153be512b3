from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    VARIABLE = 'VARIABLE'
    TRUE = 'TRUE'
    FALSE = 'FALSE'
    AND = 'AND'
    OR = 'OR'
    NOT = 'NOT'
    IF = 'IF' # material implication
    IFF = 'IFF' # biconditional
    LEFT_PAREN = 'LEFT_PAREN'
    RIGHT_PAREN = 'RIGHT_PAREN'
    EOF = 'EOF'


BINARY_OPS = frozenset([TokenKind.AND, TokenKind.OR, TokenKind.IF, TokenKind.IFF])


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str # text as written in the source
    position: int # offset of the first character

    @staticmethod
    def eof(position):
        return Token(TokenKind.EOF, '', position)

    def __repr__(self):
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.position})"
