from proptable.errors import EvalError, FormulaError, LexError, ParseError
from proptable.evaluator import evaluate, find_variables, gen_table
from proptable.expr import Binary, Expr, Group, LiteralFalse, LiteralTrue, Unary, Variable
from proptable.lexer import lex
from proptable.parser import parse
from proptable.render import render_canonical
from proptable.table import TruthTable, truth_table
from proptable.tokens import Token, TokenKind
