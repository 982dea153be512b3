import numpy as np

from proptable.errors import EvalError
from proptable.expr import Binary, Group, LiteralFalse, LiteralTrue, Unary, Variable
from proptable.tokens import TokenKind

# ---------------------------- utils -----------------------------
def gen_table(n):
    '''
    Generates truth table for n variables in lexicographic order.

    Row i holds the n-bit binary representation of i, most significant bit
    first, with 0 read as False and 1 as True.

    Args:
        n (int): number of variables.

    Returns:
        np.array((2**n, n), dtype=bool).
    '''
    if n == 0: # a single empty assignment
        return np.zeros((1, 0), dtype=bool)
    return np.array([[c == '1' for c in s] for s in np.vectorize(np.binary_repr)(np.arange(2**n), n)])

def gen_combinations(n):
    '''
    Generates vector containing bit patterns for n variables in lexicographic order.

    Args:
        n (int): number of variables.

    Returns:
        np.array(2**n, dtype=str)
    '''
    if n == 0:
        return np.array([''], dtype=np.str_)
    return np.vectorize(np.binary_repr)(np.arange(2**n), n)

def find_variables(expr):
    '''
    Collects the distinct variable names of expr, in order of first
    appearance in a left-to-right depth-first walk.

    Args:
        expr (Expr): root of the formula.

    Returns:
        list(str).
    '''
    found = {} # insertion ordered
    stack = [expr]

    while stack:
        node = stack.pop()
        if isinstance(node, Binary):
            stack.append(node.right)
            stack.append(node.left)
        elif isinstance(node, Unary):
            stack.append(node.operand)
        elif isinstance(node, Group):
            stack.append(node.inner)
        elif isinstance(node, Variable):
            found.setdefault(node.name, None)
        elif isinstance(node, (LiteralTrue, LiteralFalse)):
            continue
        else:
            raise EvalError(f"Unknown node type {type(node).__name__}")

    return list(found)

def apply_binary(operator, left, right):
    if operator == TokenKind.AND:
        return left and right
    if operator == TokenKind.OR:
        return left or right
    if operator == TokenKind.IF:
        return (not left) or right
    if operator == TokenKind.IFF:
        return left == right
    raise EvalError(f"Unexpected binary operator {operator}")

def eval_expr(expr, truth_val_mapping):
    '''
    Evaluates expr under one assignment.

    Walks the tree with an explicit stack, so long chains of operators do
    not hit the interpreter's recursion limit.

    Args:
        expr (Expr): formula node;
        truth_val_mapping (dict): mapping from variables to truth values.

    Returns:
        bool: truth value of expr.
    '''
    stack = [(expr, False)] # (node, children already evaluated)
    results = []

    while stack:
        node, done = stack.pop()

        if isinstance(node, Binary):
            if done:
                right = results.pop()
                left = results.pop()
                results.append(apply_binary(node.operator, left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))

        elif isinstance(node, Unary):
            if node.operator != TokenKind.NOT:
                raise EvalError(f"Unexpected unary operator {node.operator}")
            if done:
                results.append(not results.pop())
            else:
                stack.append((node, True))
                stack.append((node.operand, False))

        elif isinstance(node, Group): # transparent
            stack.append((node.inner, False))

        elif isinstance(node, LiteralTrue):
            results.append(True)
        elif isinstance(node, LiteralFalse):
            results.append(False)

        elif isinstance(node, Variable):
            if node.name not in truth_val_mapping:
                raise EvalError(f"Variable '{node.name}' has no assigned value")
            results.append(truth_val_mapping[node.name])

        else:
            raise EvalError(f"Unknown node type {type(node).__name__}")

    return results.pop()
# ----------------------------------------------------------------

def evaluate_rows(expr, var_list, var_table):
    '''
    Evaluates expr on each row of an assignment table.

    Args:
        expr (Expr): root of the formula;
        var_list (list(str)): variable names, one per column of var_table;
        var_table (np.array): assignments, as built by gen_table.

    Returns:
        np.array(len(var_table), dtype=bool).
    '''
    values = np.zeros(len(var_table), dtype=bool)
    for i, row in enumerate(var_table):
        truth_val_mapping = {var: bool(val) for var, val in zip(var_list, row)}
        values[i] = eval_expr(expr, truth_val_mapping)
    return values

def evaluate(expr):
    '''
    Evaluates expr for every assignment of its variables.

    Each row gets its own mapping, so one tree can be evaluated by several
    callers at once.

    Args:
        expr (Expr): root of the formula.

    Returns:
        tuple(list(str), np.array(2**n, dtype=bool)): variable names in
        column order and the value of expr for each row of gen_table(n).
    '''
    var_list = find_variables(expr)
    return var_list, evaluate_rows(expr, var_list, gen_table(len(var_list)))
