"""Cat language interpreter.

Basic program flow:
    1. Parser: a recursive-descent parser reads a statement directly from its source text (there is no separate
       tokenizer) and produces a syntax tree.
        - For the scanning routines every grammar rule is built from, see catlang/pure/lexical.py
        - For the grammar rules, see catlang/grammar/expr.py and catlang/grammar/statement.py
    2. Evaluation: the tree is walked against a chain of environments (catlang/env.py, catlang/lang/evaluator.py)
    3. Session/shell: catlang/lang/session.py and catlang/lang/shell.py feed source lines through 1 and 2

```
env = Env()
parse("let x = 2").eval(env)   # Unit()
parse("x * 21").eval(env)      # Number(42)
```
"""

from dataclasses import dataclass

from catlang.grammar.statement import new_statement
from catlang.lang.error import InputNotFullyConsumed, NestingTooDeep
from catlang.lang.evaluator import eval_statement


@dataclass(frozen=True)
class Parse:
    """A parsed statement, ready to be evaluated."""
    statement: object

    def eval(self, env):
        """Evaluates the statement in env (typically a session's top-level Env). Raises EvalError on failure."""
        return eval_statement(self.statement, env)


def parse(source):
    """Parses source as a single statement. The whole of source must be consumed, otherwise InputNotFullyConsumed is
    raised. Any other ParseError is the one reported by the grammar rule that failed, or NestingTooDeep if
    source nests deeper than the parser can recurse.
    """
    try:
        result = new_statement(source)
    except RecursionError:
        raise NestingTooDeep() from None

    if not result:
        raise result.error.locate(source)

    rest, statement = result
    if rest:
        raise InputNotFullyConsumed(rest).locate(source)

    return Parse(statement)
