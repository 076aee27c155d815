
class JackError(Exception):
    """ Base class for all Jack errors"""
    pass

class JackSyntaxError(JackError):
    """ Raised when the reader cannot turn source text into code trees"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position

class JackArityError(JackError):
    """ Raised when an operation node has the wrong number of arguments"""

class JackFatalError(JackError):
    """ Base class for errors that terminate the whole evaluation"""
    kind = "fatal"

class JackUnboundName(JackFatalError):
    """ Raised when a name is read or assigned but no frame owns it"""
    kind = "unbound-name"

class JackNotCallable(JackFatalError):
    """ Raised when `call` is given a target that is not a function value"""
    kind = "not-callable"

class JackUnknownPredicate(JackFatalError):
    """ Raised when `is` is given an unregistered predicate name"""
    kind = "unknown-predicate"

class JackUnknownForm(JackFatalError):
    """ Raised when a tagged node names a Form with no registered operation"""
    kind = "unknown-form"

class JackAbort(JackFatalError):
    """ Raised by the explicit `abort` operation"""
    kind = "abort"
