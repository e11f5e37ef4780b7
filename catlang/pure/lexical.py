"""Lexical primitives of the cat language: low-level string-scanning routines that every grammar rule is built from.

There is no tokenizer. Every routine takes the remaining (unconsumed) input and returns either

- Success(rest, value): rest is the input left after the match, value is what was matched, or
- Failure(error): error is the ParseError describing what was expected.

Failures are returned, not raised, so that grammar rules can try one alternative after another (ordered choice). A
rule that has matched enough of its input to be sure of what it is looking at (e.g. `let` followed by whitespace) marks
its later failures as committed: alt, sequence and sequence_1 pass committed failures straight through instead of
trying something else.

```
result = extract_id("foo + 1")
if result:
    rest, name = result  # rest == " + 1", name == "foo"
```
"""

from typing import Any, NamedTuple

from catlang.lang.error import ExpectedDigits, ExpectedLiteral, ExpectedSpace, IdentifierExpected


class Success(NamedTuple):
    rest: str
    value: Any

    def map(self, func):
        """Returns a Success with func applied to value."""
        return Success(self.rest, func(self.value))

    def commit(self):
        return self


class Failure:
    """Failed parse. Always falsy."""

    def __init__(self, error, committed=False):
        self.error = error
        self.committed = committed

    def map(self, func):
        return self

    def commit(self):
        """Returns a committed copy of this failure."""
        return Failure(self.error, committed=True)

    def __bool__(self):
        return False

    def __repr__(self):
        return f"Failure({self.error.msg!r}, committed={self.committed})"

    def __eq__(self, other):
        return isinstance(other, Failure) and self.error == other.error and self.committed == other.committed


def take_while(predicate, s):
    """Consumes the longest prefix of s whose characters all satisfy predicate. Never fails."""
    end = len(s)
    for idx, char in enumerate(s):
        if not predicate(char):
            end = idx
            break
    return Success(s[end:], s[:end])


def take_while_1(predicate, s, error):
    """Like take_while, but fails with error if nothing was consumed."""
    rest, extracted = take_while(predicate, s)
    if not extracted:
        return Failure(error)
    return Success(rest, extracted)


def is_ascii_digit(char):
    return "0" <= char <= "9"


def extract_digits(s):
    return take_while_1(is_ascii_digit, s, ExpectedDigits(s))


def extract_whitespace(s):
    return take_while(str.isspace, s)


def extract_whitespace_1(s):
    return take_while_1(str.isspace, s, ExpectedSpace(s))


def extract_spaces_1(s):
    """Consumes plain spaces only. Newlines are not included."""
    return take_while_1(lambda char: char == " ", s, ExpectedSpace(s))


def extract_id(s):
    """Identifiers start with an ASCII letter and continue with any alphanumeric character (Unicode letters and digits
    included) or underscore.
    """
    if not s or not (s[0].isascii() and s[0].isalpha()):
        return Failure(IdentifierExpected(s))
    return take_while(lambda char: char.isalnum() or char == "_", s)


def tag(literal, s):
    """Matches literal at the beginning of s."""
    if s.startswith(literal):
        return Success(s[len(literal):], literal)
    return Failure(ExpectedLiteral(literal, s))


def sequence(parser, s):
    """Applies parser as many times as possible, skipping whitespace after every match. Succeeds with a (possibly
    empty) list of matches, unless parser fails after committing.
    """
    items = []
    while True:
        result = parser(s)
        if not result:
            if result.committed:
                return result
            break

        s, item = result
        items.append(item)
        s, __ = extract_whitespace(s)

    return Success(s, items)


def sequence_1(parser, separator, s):
    """Applies parser at least once, with separator between matches. Fails if the first match fails."""
    result = parser(s)
    if not result:
        return result

    s, item = result
    items = [item]

    while True:
        sep = separator(s)
        if not sep:
            break

        result = parser(sep.rest)
        if not result:
            if result.committed:
                return result
            break

        s, item = result
        items.append(item)

    return Success(s, items)


def alt(*parsers):
    """Ordered choice: returns a parser that tries each of parsers in order and returns the first success. If all of
    them fail, the last failure is returned. A committed failure is returned as soon as it is encountered.
    """

    def _alt(s):
        result = Failure(ExpectedLiteral("", s))
        for parser in parsers:
            result = parser(s)
            if result or result.committed:
                return result
        return result

    return _alt
