

class EggError(Exception):
    """ Base class for all Egg errors"""
    pass

class EggSyntaxError(EggError):
    """ Raised when program text cannot be parsed"""

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        # remaining source at the point of failure, if known
        self.text = text

class EggUnboundSymbol(EggError):
    """ Raised when a name is read or set but bound nowhere in the scope chain"""

class EggTypeError(EggError):
    """ Raised when a non-function is applied or a primitive gets operands of the wrong type"""

class EggArityError(EggError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

class EggSpecialFormError(EggError):
    """ Raised when a special form is structurally malformed"""

class EggIndexError(EggError):
    """ Raised when element() is given an index outside the array"""

class EggArithmeticError(EggError):
    """ Raised on division by zero"""

class EggRecursionError(EggError):
    """ Raised when evaluation nests deeper than the host stack allows"""

class EggReadOnlyError(EggError):
    """ Raised when a binding in a frozen scope is defined or set"""
