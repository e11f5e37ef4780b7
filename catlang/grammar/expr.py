"""Expression grammar of the cat language.

```
<expr>          ::= <operation> | <nonop>
<operation>     ::= <nonop> WS? <op> WS? <nonop>   ; one flat operation: "1 + 2 + 3" is not an expression
<nonop>         ::= <number> | <func_call> | <binding_usage> | <block>
<func_call>     ::= <id> (" "+ <expr>)+            ; arguments are separated by spaces, not newlines
<binding_usage> ::= <id>
<block>         ::= "{" WS? (<stmt> WS?)* "}"
<op>            ::= "+" | "-" | "*" | "/" | "|"    ; "|" is "divisible by"
```

Alternatives are tried in the order written above, and the first one that matches wins. A bare identifier followed by
spaces and another expression is therefore a function call, not a binding usage.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from catlang.pure import lexical
from catlang.pure.lexical import Success, alt


class Op(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    DIVISIBLE_BY = "|"

    @classmethod
    def new(cls, s):
        """Operators are tried in declaration order."""
        for op in cls:
            result = lexical.tag(op.value, s)
            if result:
                return Success(result.rest, op)
        return result


class Expr:
    """Superclass of every expression node. An expression can also stand on its own as a statement."""

    @staticmethod
    def new(s):
        """Parses the first operand once, then makes an operation of it only if an operator and a second operand
        follow.
        """
        result = Expr.new_non_operation(s)
        if not result:
            return result
        lhs_result = result
        s, lhs = result
        s, __ = lexical.extract_whitespace(s)

        result = Op.new(s)
        if not result:
            return lhs_result
        s, op = result
        s, __ = lexical.extract_whitespace(s)

        result = Expr.new_non_operation(s)
        if not result:
            return result if result.committed else lhs_result
        s, rhs = result

        return Success(s, Operation(lhs, rhs, op))

    @staticmethod
    def new_non_operation(s):
        return alt(NumberLiteral.new, FuncCall.new, BindingUsage.new, Block.new)(s)


@dataclass(frozen=True)
class NumberLiteral(Expr):
    value: int

    @classmethod
    def new(cls, s):
        return lexical.extract_digits(s).map(lambda digits: cls(int(digits)))


@dataclass(frozen=True)
class Operation(Expr):
    lhs: Expr
    rhs: Expr
    op: Op


@dataclass(frozen=True)
class BindingUsage(Expr):
    name: str

    @classmethod
    def new(cls, s):
        return lexical.extract_id(s).map(cls)


@dataclass(frozen=True)
class FuncCall(Expr):
    callee: str
    params: Tuple[Expr, ...]

    @classmethod
    def new(cls, s):
        result = lexical.extract_id(s)
        if not result:
            return result
        s, callee = result

        result = lexical.extract_spaces_1(s)
        if not result:
            return result

        result = lexical.sequence_1(Expr.new, lexical.extract_spaces_1, result.rest)
        if not result:
            return result
        s, params = result

        return Success(s, cls(callee, tuple(params)))


@dataclass(frozen=True)
class Block(Expr):
    statements: tuple

    @classmethod
    def new(cls, s):
        from catlang.grammar.statement import new_statement

        result = lexical.tag("{", s)
        if not result:
            return result
        s, __ = lexical.extract_whitespace(result.rest)

        # past the opening brace, this can only be a block
        result = lexical.sequence(new_statement, s)
        if not result:
            return result.commit()
        s, statements = result
        s, __ = lexical.extract_whitespace(s)

        result = lexical.tag("}", s)
        if not result:
            return result.commit()

        return Success(result.rest, cls(tuple(statements)))
