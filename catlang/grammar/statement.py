"""Statement grammar of the cat language, built on top of the expression grammar.

```
<stmt>        ::= <func_def> | <binding_def> | <expr>
<func_def>    ::= "fn" WS <id> WS? (<id> WS?)* "=>" WS? <stmt>
<binding_def> ::= "let" WS <id> WS? "=" WS? <expr>
```

The whitespace after `fn` and `let` is mandatory, so that `letter` and `fnord` stay plain identifiers. Once a keyword
and its whitespace have been matched, the statement is committed: a later failure is reported as is, instead of
falling back to parsing the line as an expression.
"""

from dataclasses import dataclass
from typing import Tuple

from catlang.grammar.expr import Expr
from catlang.pure import lexical
from catlang.pure.lexical import Success, alt


def new_keyword(keyword, s):
    """Matches keyword followed by mandatory whitespace."""
    result = lexical.tag(keyword, s)
    if not result:
        return result
    return lexical.extract_whitespace_1(result.rest)


@dataclass(frozen=True)
class BindingDef:
    name: str
    value: Expr

    @classmethod
    def new(cls, s):
        result = new_keyword("let", s)
        if not result:
            return result
        s = result.rest

        result = lexical.extract_id(s)
        if not result:
            return result.commit()
        s, name = result
        s, __ = lexical.extract_whitespace(s)

        result = lexical.tag("=", s)
        if not result:
            return result.commit()
        s, __ = lexical.extract_whitespace(result.rest)

        result = Expr.new(s)
        if not result:
            return result.commit()
        s, value = result

        return Success(s, cls(name, value))


@dataclass(frozen=True)
class FuncDef:
    name: str
    params: Tuple[str, ...]
    body: object  # any statement

    @classmethod
    def new(cls, s):
        result = new_keyword("fn", s)
        if not result:
            return result
        s = result.rest

        result = lexical.extract_id(s)
        if not result:
            return result.commit()
        s, name = result
        s, __ = lexical.extract_whitespace(s)

        s, params = lexical.sequence(lexical.extract_id, s)

        result = lexical.tag("=>", s)
        if not result:
            return result.commit()
        s, __ = lexical.extract_whitespace(result.rest)

        result = new_statement(s)
        if not result:
            return result.commit()
        s, body = result

        return Success(s, cls(name, tuple(params), body))


def new_statement(s):
    """Parses a single statement: a function definition, a binding definition, or an expression (in that order)."""
    return alt(FuncDef.new, BindingDef.new, Expr.new)(s)
