import pytest

from proptable.errors import EvalError
from proptable.evaluator import eval_expr, evaluate, find_variables, gen_combinations, gen_table
from proptable.expr import Variable
from proptable.lexer import lex
from proptable.parser import parse

T, F = True, False


def table_of(source):
    names, values = evaluate(parse(lex(source)))
    return names, values.tolist()


def test_gen_table_order():
    assert gen_table(2).tolist() == [[F, F], [F, T], [T, F], [T, T]]
    assert gen_table(0).shape == (1, 0)
    assert gen_combinations(3).tolist() == ['000', '001', '010', '011', '100', '101', '110', '111']
    assert gen_combinations(0).tolist() == ['']


def test_rows_are_binary_counts():
    for n in range(5):
        table = gen_table(n)
        assert table.shape == (2**n, n)
        for i, row in enumerate(table):
            assert int(''.join('1' if bit else '0' for bit in row) or '0', 2) == i


def test_variables_in_first_occurrence_order():
    assert find_variables(parse(lex("b & a | b & c"))) == ['b', 'a', 'c']
    assert find_variables(parse(lex("!(q2 -> p1) <-> q2"))) == ['q2', 'p1']
    assert find_variables(parse(lex("true | false"))) == []


def test_connectives():
    assert table_of("p & q") == (['p', 'q'], [F, F, F, T])
    assert table_of("p | q") == (['p', 'q'], [F, T, T, T])
    assert table_of("p -> q") == (['p', 'q'], [T, T, F, T])
    assert table_of("p <-> q") == (['p', 'q'], [T, F, F, T])
    assert table_of("!p") == (['p'], [T, F])


def test_row_order_follows_first_occurrence():
    # q comes first, so it is the most significant bit
    assert table_of("q -> p") == (['q', 'p'], [T, T, F, T])
    assert table_of("q & !p") == (['q', 'p'], [F, F, T, F])


def test_constant_formulas():
    assert table_of("true & false") == ([], [F])
    assert table_of("⊤") == ([], [T])
    assert table_of("(⊥ -> ⊥)") == ([], [T])


def test_double_negation():
    assert table_of("!!p") == table_of("p")


def test_spellings_evaluate_identically():
    expected = table_of("p & q")
    assert table_of("p and q") == expected
    assert table_of("p ∧ q") == expected


def test_row_count():
    names, values = table_of("a & b & c & d")
    assert len(names) == 4
    assert len(values) == 16
    assert values == [F] * 15 + [T]


def test_groups_are_transparent():
    assert table_of("(p | q) & r") == (["p", "q", "r"], [F, F, F, T, F, T, F, T])
    assert table_of("((p))") == table_of("p")


def test_tree_can_be_evaluated_again():
    expr = parse(lex("a iff !b"))
    first = evaluate(expr)
    second = evaluate(expr)
    assert first[0] == second[0]
    assert first[1].tolist() == second[1].tolist()


def test_missing_variable_is_an_internal_error():
    with pytest.raises(EvalError):
        eval_expr(Variable('x'), {'y': True})


def test_unknown_node_is_an_internal_error():
    with pytest.raises(EvalError):
        eval_expr(object(), {})
    with pytest.raises(EvalError):
        find_variables(object())


def test_long_chains_evaluate():
    names, values = table_of("p" + " & p" * 1500)
    assert names == ['p']
    assert values == [F, T]

    assert table_of("!" * 1500 + "p") == (['p'], [F, T])
    assert table_of("!" * 1501 + "p") == (['p'], [T, F])
    assert table_of("a -> " * 1200 + "b")[1][-1] is T
