import io
import unittest

from catlang.lang.error import (ArityMismatch, BindingNotFound, DivisionByZero, ErrorHandler, ExpectedLiteral,
                                GenericException, IdentifierExpected, NestingTooDeep, ParseError)


class GenericExceptionTestCase(unittest.TestCase):

    def test_messages(self):
        cases = {
            ExpectedLiteral("}", ""): "Expected `}` not found in ``",
            IdentifierExpected("= 1"): "Identifier expected: `= 1`",
            BindingNotFound("a"): "Binding with name `a` not found",
            ArityMismatch("f", 1, 0): "Function `f` expected 1 args but received 0",
            DivisionByZero(): "Division by zero",
            NestingTooDeep(): "Maximum nesting depth exceeded",
            GenericException("'{}' could not be opened", "a.cat"): "'a.cat' could not be opened",
        }
        for case, msg in cases.items():
            self.assertEqual(msg, str(case), msg)

    def test_equality(self):
        self.assertEqual(ExpectedLiteral("}", ""), ExpectedLiteral("}", ""))
        self.assertNotEqual(ExpectedLiteral("}", ""), ExpectedLiteral("{", ""))
        self.assertNotEqual(BindingNotFound("a"), GenericException("Binding with name `{}` not found", "a"))

    def test_stages(self):
        self.assertEqual("Parse", IdentifierExpected("").stage)
        self.assertEqual("Parse", NestingTooDeep().stage)
        self.assertEqual("Evaluation", DivisionByZero().stage)
        self.assertIsNone(GenericException("").stage)

    def test_locate(self):
        error = IdentifierExpected("= 1").locate("let = 1")
        self.assertIsInstance(error, ParseError)
        self.assertEqual(("let = 1", 4, 7), (error.expr, error.start, error.end))


class ErrorHandlerTestCase(unittest.TestCase):

    def setUp(self):
        self.stream = io.StringIO()

    def test_fatal_errors_exit(self):
        with self.assertRaises(SystemExit) as context:
            with ErrorHandler(stream=self.stream):
                raise DivisionByZero()
        self.assertEqual(1, context.exception.code)
        self.assertIn("Division by zero", self.stream.getvalue())

    def test_non_fatal_errors_are_suppressed(self):
        with ErrorHandler(fatal=False, stream=self.stream):
            raise BindingNotFound("a")
        self.assertIn("Evaluation error", self.stream.getvalue())

    def test_traceback(self):
        error_handler = ErrorHandler(fatal=False, stream=self.stream)
        error_handler.register_file("a.cat")
        error_handler.register_line("a.cat", "1 / 0", 4)

        with error_handler:
            raise DivisionByZero()

        self.assertIn("File 'a.cat', line 4:", self.stream.getvalue())
        self.assertIn("1 / 0", self.stream.getvalue())
        self.assertEqual({"a.cat": (None, None)}, error_handler.traceback)

    def test_diagnosis(self):
        diagnosis = ErrorHandler.diagnose(IdentifierExpected("= 1").locate("let = 1"))
        first, second = diagnosis.split("\n")
        self.assertTrue(first.startswith("  let "), first)
        self.assertTrue(second.startswith("      "), second)
        self.assertIn("^~~", second)

    def test_parse_errors_are_diagnosed(self):
        with ErrorHandler(fatal=False, stream=self.stream):
            raise ExpectedLiteral("}", "").locate("{ 1")
        self.assertIn("Parse error", self.stream.getvalue())
        self.assertIn("^", self.stream.getvalue())

    def test_recursion_error(self):
        with ErrorHandler(fatal=False, stream=self.stream):
            raise RecursionError()
        self.assertIn("maximum recursion depth exceeded", self.stream.getvalue())

    def test_keyboard_interrupt(self):
        with ErrorHandler(fatal=False, stream=self.stream):
            raise KeyboardInterrupt()
        self.assertIn("keyboard interrupt", self.stream.getvalue())

    def test_system_exit_passes_through(self):
        with self.assertRaises(SystemExit):
            with ErrorHandler(fatal=False, stream=self.stream):
                raise SystemExit(3)
        self.assertEqual("", self.stream.getvalue())

    def test_unknown_errors_are_internal(self):
        with self.assertRaises(ValueError):
            with ErrorHandler(fatal=False, stream=self.stream):
                raise ValueError("boom")
        self.assertIn("[internal]", self.stream.getvalue())
        self.assertIn("unknown error: 'ValueError: boom'", self.stream.getvalue())


if __name__ == '__main__':
    unittest.main()
