"""Error handling for the cat language. Only GenericExceptions should be encountered during running: if another type
of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Errors come in two stages:
- ParseError: raised by catlang.interpreter.parse when a statement is not valid grammar. Inside the grammar rules,
  parse errors are never raised, only carried by Failure values (see pure/lexical.py).
- EvalError: raised while evaluating a parsed statement against an environment.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a catlang error. The values filled into the template
    are kept apart from it, so that they can be bolded when the error is displayed.
    """
    stage = None

    def __init__(self, template, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ()
        if isinstance(exprs, str):
            exprs = (exprs,)

        self.template = template
        self.exprs = tuple(str(expr) for expr in exprs)
        self.msg = template.format(*self.exprs) if self.exprs else template

        self.expr = self.exprs[0] if self.exprs else ""  # exprs[0] should be the offending expr that caused the error
        self.start = start
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)

    def colored_msg(self):
        """Error message with the templated values bolded."""
        if not self.exprs:
            return self.template
        return self.template.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))

    def __str__(self):
        return self.msg

    def __eq__(self, other):
        return type(self) is type(other) and self.msg == other.msg

    def __hash__(self):
        return hash((type(self), self.msg))


class ParseError(GenericException):
    """Superclass of all errors produced while parsing. rest is the unconsumed input at the point of failure."""
    stage = "Parse"

    def __init__(self, template, exprs=None, rest="", **kwargs):
        super().__init__(template, exprs, **kwargs)
        self.rest = rest

    def locate(self, source):
        """Points this error at the place in source where parsing failed. Returns self."""
        self.expr = source
        self.start = max(len(source) - len(self.rest), 0)
        self.end = len(source)
        return self


class ExpectedDigits(ParseError):

    def __init__(self, rest):
        super().__init__("Expected digits: `{}`", rest, rest=rest)


class ExpectedSpace(ParseError):

    def __init__(self, rest):
        super().__init__("Expected space", rest=rest)


class IdentifierExpected(ParseError):

    def __init__(self, rest):
        super().__init__("Identifier expected: `{}`", rest, rest=rest)


class ExpectedLiteral(ParseError):

    def __init__(self, literal, rest):
        super().__init__("Expected `{}` not found in `{}`", (literal, rest), rest=rest)
        self.literal = literal


class InputNotFullyConsumed(ParseError):

    def __init__(self, rest):
        super().__init__("Input was not fully consumed", rest=rest)


class NestingTooDeep(ParseError):

    def __init__(self):
        super().__init__("Maximum nesting depth exceeded", diagnosis=False)


class EvalError(GenericException):
    """Superclass of all errors produced while evaluating. Evaluation errors have nothing to point at in the input."""
    stage = "Evaluation"

    def __init__(self, template, exprs=None):
        super().__init__(template, exprs, diagnosis=False)


class TypeMismatch(EvalError):

    def __init__(self):
        super().__init__("Both lhs and rhs need to be numbers")


class BindingNotFound(EvalError):

    def __init__(self, name):
        super().__init__("Binding with name `{}` not found", name)
        self.name = name


class FunctionNotFound(EvalError):

    def __init__(self, name):
        super().__init__("Function with name `{}` not found", name)
        self.name = name


class ArityMismatch(EvalError):

    def __init__(self, name, expected, received):
        super().__init__("Function `{}` expected {} args but received {}", (name, expected, received))
        self.name = name
        self.expected = expected
        self.received = received


class DivisionByZero(EvalError):

    def __init__(self):
        super().__init__("Division by zero")


class ErrorHandler:
    """Context manager that will silently suppress Python errors and print catlang errors instead."""
    ERROR = "red"

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(error):
        """Returns offending part of error.expr highlighted and a caret line underneath it."""
        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, error.start + 1)
        diagnosis += colored(error.expr[error.start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Prints error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of file: (line, line_num) representing origination of error.
        """
        stream = self.stream if self.stream is not None else sys.stderr

        error_msg = ""
        for file, (line, line_num) in self.traceback.items():
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        label = f"{error.stage} error: " if error.stage else "error: "
        error_msg += colored(label, ErrorHandler.ERROR, attrs=["bold"]) + error.colored_msg()
        print(error_msg, file=stream)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error), file=stream)

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt", diagnosis=False))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(EvalError("maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
