class LittleLispError(Exception):
    """ Base class for all LittleLisp errors"""
    pass

class LispSyntaxError(LittleLispError):
    """ Raised by the reader when the source text is malformed"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position

class LispSemanticError(LittleLispError):
    """ Raised when evaluation of a well-formed expression fails"""
    pass

class LispUnboundSymbol(LispSemanticError):
    """ Raised when a symbol is used before it is bound"""

class LispArityError(LispSemanticError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class LispTypeError(LispSemanticError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class LispRecursionError(LispSemanticError):
    """ Raised when evaluation nests deeper than the host stack allows"""
