
class SprigError(Exception):
    """ Base class for all Sprig errors"""
    label = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

class SprigParseError(SprigError):
    """ Raised when source text cannot be tokenized or parsed"""
    label = "ParseError"

class SprigEvalError(SprigError):
    """ Raised when a parsed expression cannot be evaluated"""
    label = "EvalError"

class SprigArityError(SprigEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class SprigTypeError(SprigEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class SprigNameError(SprigEvalError):
    """ Raised when an unresolved symbol is used as a function or an operand"""

class SprigInvalidSymbol(SprigEvalError):
    """ Raised when something other than a symbol is defined or used as a parameter"""

class SprigDivisionByZero(SprigEvalError):
    """ Raised when dividing by an exact zero"""
