class EggError(Exception):
    """ Base class for all egglisp errors"""
    pass

class EggSyntaxError(EggError):
    """ Raised when the source text is malformed; carries the 1-based line/column"""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        if line:
            message = f"{message} at {line}:{column}"
        super().__init__(message)
        self.line = line
        self.column = column

class EggNameError(EggError):
    """ Raised when a symbol is looked up or assigned but is not bound"""

class EggDuplicateDefinitionError(EggError):
    """ Raised when a name is defined twice in the same scope"""

class EggArityError(EggError):
    """ Raised when the number of arguments passed to a callable is incorrect"""

    def __init__(self, message: str, too_few: bool = False):
        super().__init__(message)
        self.too_few = too_few

class EggTypeError(EggError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""

class EggArgumentError(EggError):
    """ Raised when a well-typed argument has an invalid value"""

class EggNotCallableError(EggError):
    """ Raised when the head of a call form is not callable"""

class EggRecursionError(EggError):
    """ Raised when evaluation exhausts the host call stack"""
