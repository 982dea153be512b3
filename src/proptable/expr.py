from dataclasses import dataclass

from proptable.tokens import BINARY_OPS, TokenKind


class Expr():
    '''
    Base of the closed set of formula nodes: Binary, Unary, LiteralTrue,
    LiteralFalse, Variable and Group. Nodes are immutable and compare by
    structure, so trees parsed from different spellings of the same formula
    are equal.
    '''


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: TokenKind # AND, OR, IF or IFF
    right: Expr

    def __post_init__(self):
        if self.operator not in BINARY_OPS:
            raise ValueError(f"{self.operator} is not a binary operator")


@dataclass(frozen=True)
class Unary(Expr):
    operator: TokenKind
    operand: Expr

    def __post_init__(self):
        if self.operator != TokenKind.NOT:
            raise ValueError(f"{self.operator} is not a unary operator")


@dataclass(frozen=True)
class LiteralTrue(Expr):
    pass


@dataclass(frozen=True)
class LiteralFalse(Expr):
    pass


@dataclass(frozen=True)
class Variable(Expr):
    name: str


@dataclass(frozen=True)
class Group(Expr):
    inner: Expr # parenthesized in the source
