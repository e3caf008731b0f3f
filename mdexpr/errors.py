
class MdexprError(Exception):
    """ Base class for all mdexpr errors"""
    pass

class MdexprInvalidSymbol(MdexprError):
    """ Raised when something other than a Symbol is used as a binding key"""
    pass

class MdexprUnboundFunction(MdexprError):
    """ Raised when a function symbol is looked up before it is bound"""
    pass

class MdexprSyntaxError(MdexprError):
    """ Raised when a special form is malformed"""

class MdexprArityError(MdexprError):
    """ Raised when a special form receives the wrong number of items"""

class MdexprTypeError(MdexprError):
    """ Raised when a node of the wrong kind reaches the evaluator"""

class MdexprRecursionError(MdexprError):
    """ Raised when evaluation nests deeper than the allowed depth"""
