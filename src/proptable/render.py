from proptable.errors import EvalError
from proptable.expr import Binary, Group, LiteralFalse, LiteralTrue, Unary, Variable
from proptable.tokens import TokenKind

canonical_glyphs = {
    TokenKind.AND: '∧',
    TokenKind.OR: '∨',
    TokenKind.IF: '→',
    TokenKind.IFF: '↔',
    TokenKind.NOT: '¬',
    TokenKind.TRUE: '⊤',
    TokenKind.FALSE: '⊥',
}


def render_canonical(expr):
    '''
    Writes expr back as text with one fixed glyph per operator. Only Group
    nodes get parentheses, so the result parses back into the same tree.

    Args:
        expr (Expr): formula node.

    Returns:
        str: label such as 'p ∧ ¬(q ∨ r)'.
    '''
    stack = [(expr, False)] # (node, children already rendered)
    parts = []

    while stack:
        node, done = stack.pop()

        if isinstance(node, (Binary, Unary, Group)) and not done:
            stack.append((node, True))
            if isinstance(node, Binary):
                stack.append((node.right, False))
                stack.append((node.left, False))
            elif isinstance(node, Unary):
                stack.append((node.operand, False))
            else:
                stack.append((node.inner, False))
        elif isinstance(node, Binary):
            right = parts.pop()
            left = parts.pop()
            parts.append(f"{left} {canonical_glyphs[node.operator]} {right}")
        elif isinstance(node, Unary):
            parts.append(f"{canonical_glyphs[node.operator]}{parts.pop()}")
        elif isinstance(node, Group):
            parts.append(f"({parts.pop()})")
        elif isinstance(node, LiteralTrue):
            parts.append(canonical_glyphs[TokenKind.TRUE])
        elif isinstance(node, LiteralFalse):
            parts.append(canonical_glyphs[TokenKind.FALSE])
        elif isinstance(node, Variable):
            parts.append(node.name)
        else:
            raise EvalError(f"Unknown node type {type(node).__name__}")

    return parts.pop()
