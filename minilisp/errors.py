class LispError(Exception):
    """ Base class for all minilisp errors"""

    @property
    def kind(self) -> str:
        return type(self).__name__


class LispSyntaxError(LispError):
    """ Raised when source text cannot be read into an expression"""


class UnexpectedEndOfInput(LispSyntaxError):
    """ Raised when the reader runs out of tokens in the middle of a form"""


class UnexpectedCloseParen(LispSyntaxError):
    """ Raised when a ')' appears where an expression should start"""


class UndefinedSymbol(LispError):
    """ Raised when a symbol is not bound in any enclosing environment"""


class LispTypeError(LispError):
    """ Raised when an operation is applied to a value of the wrong kind"""

    @property
    def kind(self) -> str:
        return "TypeMismatch"


class ArityMismatch(LispError):
    """ Raised when a procedure or special form gets the wrong number of arguments"""


class EmptyListAccess(LispError):
    """ Raised when car/cdr is applied to an empty sequence"""
