

class MiniLispError(Exception):
    """ Base class for all minilisp errors"""
    pass

class MiniLispLexError(MiniLispError):
    """ Raised by the lexer in strict mode when a character matches no token"""

class MiniLispParseError(MiniLispError):
    """ Raised when the token stream is not a well-formed list"""

class MiniLispUnboundName(MiniLispError):
    """ Raised when a name is not bound in any enclosing environment"""

class MiniLispUnboundSymbol(MiniLispUnboundName):
    """ Raised when the head of a call is not bound"""

class MiniLispArityError(MiniLispError):
    """ Raised when a form or call has the wrong number of elements"""

class MiniLispTypeError(MiniLispError):
    """ Raised when an expression has the wrong node type for its position"""

class MiniLispTypeMismatch(MiniLispTypeError):
    """ Raised when the operands of a primitive operator have different types"""
