class FormulaError(Exception):
    '''
    Base class of every error raised while turning a formula into a truth table.
    '''
    kind = 'Formula'

    def __init__(self, message, position=None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self):
        if self.position is None:
            return f"{self.kind} error: {self.message}"
        return f"{self.kind} error at position {self.position}: {self.message}"


class LexError(FormulaError):
    kind = 'Lexer'


class ParseError(FormulaError):
    kind = 'Parser'


class EvalError(FormulaError):
    '''
    Raised on an internal inconsistency of the evaluator (e.g. a variable
    missing from the assignment). Never caused by user input.
    '''
    kind = 'Evaluator'
