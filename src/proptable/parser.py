from proptable.errors import ParseError
from proptable.expr import Binary, Group, LiteralFalse, LiteralTrue, Unary, Variable
from proptable.tokens import TokenKind


class Parser():
    '''
    Recursive-descent parser over a token list ending with EOF.

    Grammar, loosest binding first (every binary level folds to the left):

        expression  := iff
        iff         := implication ( IFF implication )*
        implication := disjunction ( IF disjunction )*
        disjunction := conjunction ( OR conjunction )*
        conjunction := negation ( AND negation )*
        negation    := NOT negation | primary
        primary     := TRUE | FALSE | VARIABLE | '(' expression ')'
    '''

    def __init__(self, tokens):
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ParseError("Token sequence must end with EOF")
        self.tokens = tokens
        self.cursor = 0

    def run(self, strict=False):
        try:
            expr = self.parse_expression()
        except RecursionError:
            raise ParseError("Formula nested too deeply", self.peek().position) from None
        if strict and self.peek().kind != TokenKind.EOF:
            token = self.peek()
            raise ParseError(f"Expected end of formula, found '{token.lexeme}'", token.position)
        return expr

    def parse_expression(self):
        return self.parse_iff()

    def parse_iff(self):
        return self.parse_left_assoc(TokenKind.IFF, self.parse_implication)

    def parse_implication(self):
        return self.parse_left_assoc(TokenKind.IF, self.parse_disjunction)

    def parse_disjunction(self):
        return self.parse_left_assoc(TokenKind.OR, self.parse_conjunction)

    def parse_conjunction(self):
        return self.parse_left_assoc(TokenKind.AND, self.parse_negation)

    def parse_left_assoc(self, kind, parse_operand):
        expr = parse_operand()
        while self.peek().kind == kind:
            self.consume()
            expr = Binary(expr, kind, parse_operand())
        return expr

    def parse_negation(self):
        depth = 0 # stacked NOTs
        while self.peek().kind == TokenKind.NOT:
            self.consume()
            depth += 1

        expr = self.parse_primary()
        for _ in range(depth):
            expr = Unary(TokenKind.NOT, expr)
        return expr

    def parse_primary(self):
        token = self.consume()

        if token.kind == TokenKind.TRUE:
            return LiteralTrue()
        if token.kind == TokenKind.FALSE:
            return LiteralFalse()
        if token.kind == TokenKind.VARIABLE:
            return Variable(token.lexeme)
        if token.kind == TokenKind.LEFT_PAREN:
            inner = self.parse_expression()
            closing = self.consume()
            if closing.kind != TokenKind.RIGHT_PAREN:
                raise ParseError(f"Expected ')' to close '(' at position {token.position}", closing.position)
            return Group(inner)

        found = 'end of formula' if token.kind == TokenKind.EOF else f"'{token.lexeme}'"
        raise ParseError(f"Expected variable, literal or '(', found {found}", token.position)

    def peek(self):
        return self.tokens[self.cursor]

    def consume(self):
        token = self.tokens[self.cursor]
        if token.kind != TokenKind.EOF: # never move past EOF
            self.cursor += 1
        return token


def parse(tokens, strict=False):
    '''
    Builds the syntax tree of a lexed formula.

    Args:
        tokens (list(Token)): output of lex();
        strict (bool): reject tokens left over after a complete expression.

    Returns:
        Expr: root node.

    Raises:
        ParseError: when no rule matches or a parenthesis is left open.
    '''
    return Parser(tokens).run(strict)
