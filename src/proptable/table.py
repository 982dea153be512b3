import argparse
import re
import sys

import numpy as np

from proptable.errors import FormulaError
from proptable.evaluator import evaluate_rows, find_variables, gen_combinations, gen_table
from proptable.lexer import lex
from proptable.parser import parse
from proptable.render import render_canonical

# ----------------------- global variables -----------------------
DEFAULT_MAX_VARS = 20 # largest variable count evaluated by the command line
comment_pattern = re.compile(r'#.*$') # text after '#' is ignored in formula files
# ----------------------------------------------------------------

class TruthTable():

    def __init__(self, variables, label, rows, values):
        self.variables = variables # names in column order
        self.label = label # canonical rendering of the formula
        self.rows = rows # all assignments, as built by gen_table
        self.values = values # value of the formula for each row

    def __len__(self):
        return len(self.values)

    def patterns(self):
        return gen_combinations(len(self.variables))

    def ones(self):
        '''
        Selects the assignments satisfying the formula.

        Returns:
            tuple(np.array, np.array): rows and bit patterns where the value is True.
        '''
        return self.rows[self.values], self.patterns()[self.values]

    def is_tautology(self):
        return bool(self.values.all())

    def is_contradiction(self):
        return not self.values.any()

    def is_satisfiable(self):
        return bool(self.values.any())

    def as_array(self):
        return np.hstack((self.rows, self.values[:, None])) * 1

    def format(self, true_char='T', false_char='F', only_ones=False):
        '''
        Lays the table out as text, one line per row.

        Args:
            true_char (str): symbol for True;
            false_char (str): symbol for False;
            only_ones (bool): keep only the rows where the formula is true.

        Returns:
            list(str): header line followed by the rows.
        '''
        lines = [' '.join(self.variables + [self.label])]
        symbol = {True: true_char, False: false_char}

        for row, val in zip(self.rows, self.values):
            if only_ones and not val:
                continue
            cells = [symbol[bool(bit)] for bit in row] + [symbol[bool(val)]]
            lines.append(' '.join(cells))

        return lines


def truth_table(source, strict=False, max_vars=None):
    '''
    Runs the whole pipeline on one formula.

    Args:
        source (str): formula text;
        strict (bool): reject tokens after a complete formula;
        max_vars (int): refuse formulas with more distinct variables.

    Returns:
        TruthTable.

    Raises:
        FormulaError: if the formula cannot be lexed, parsed or evaluated.
    '''
    expr = parse(lex(source), strict)

    var_list = find_variables(expr)
    if max_vars is not None and len(var_list) > max_vars:
        raise FormulaError(f"Found {len(var_list)} variables, at most {max_vars} allowed")

    var_table = gen_table(len(var_list))
    values = evaluate_rows(expr, var_list, var_table)
    return TruthTable(var_list, render_canonical(expr), var_table, values)


def read_formulas(file_name):
    '''
    Reads one formula per line, dropping comments and blank lines.

    Args:
        file_name (str): path of the formula file.

    Returns:
        list(str).
    '''
    formulas = []
    with open(file_name, encoding='utf-8') as file:
        for line in file:
            formula = comment_pattern.sub('', line).strip()
            if formula:
                formulas.append(formula)
    return formulas


def show(table, binary=False, only_ones=False):
    if binary:
        array = table.as_array()
        if only_ones:
            array = array[table.values]
        print(' '.join(table.variables + [table.label]))
        sys.stdout.flush()
        np.savetxt(sys.stdout.buffer, array, fmt="%d")
        sys.stdout.buffer.flush()
    else:
        for line in table.format(only_ones=only_ones):
            print(line)


def build_arg_parser():
    ap = argparse.ArgumentParser(prog='proptable', description="Truth-table generator for propositional formulas")
    ap.add_argument('formulas', nargs='*', metavar='FORMULA', help="Formula to show the truth table for (e.g. 'p & (q -> r)')")
    ap.add_argument('-f', '--file', dest='file', help="Read formulas from a file, one per line ('#' starts a comment)")
    ap.add_argument('--ones', action='store_true', help="Show only the rows where the formula is true")
    ap.add_argument('--binary', action='store_true', help="Print rows as 0/1 instead of F/T")
    ap.add_argument('--strict', action='store_true', help="Reject tokens left after a complete formula")
    ap.add_argument('--max-vars', dest='max_vars', type=int, default=DEFAULT_MAX_VARS, help=f"Largest number of variables to enumerate (default: {DEFAULT_MAX_VARS})")
    return ap


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    formulas = list(args.formulas)
    if args.file:
        try:
            formulas.extend(read_formulas(args.file))
        except OSError as error:
            print(f"{args.file}: {error}")
            return 1

    failed = False
    first = True
    for formula in formulas:
        if not formula.strip(): # no formula, nothing to show
            continue
        try:
            table = truth_table(formula, strict=args.strict, max_vars=args.max_vars)
        except FormulaError as error:
            print(f"{formula}: {error}")
            failed = True
            continue

        if not first:
            print()
        first = False
        show(table, binary=args.binary, only_ones=args.ones)

    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
