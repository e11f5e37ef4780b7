"""Tree-walking evaluator for the cat language. Statements and expressions are evaluated against an Env and produce a
Val. Any EvalError aborts the statement, block or call being evaluated: no partial results are kept.
"""

from catlang.grammar.expr import Block, BindingUsage, Expr, FuncCall, NumberLiteral, Op, Operation
from catlang.grammar.statement import BindingDef, FuncDef
from catlang.lang.error import BindingNotFound, ArityMismatch, DivisionByZero, TypeMismatch
from catlang.val import Bool, Number, Unit


def eval_statement(stmt, env):
    """Evaluates stmt in env. Definitions are added to env itself, not to a child of it."""
    if isinstance(stmt, BindingDef):
        env.add_binding(stmt.name, eval_expr(stmt.value, env))
        return Unit()

    elif isinstance(stmt, FuncDef):
        env.add_func(stmt.name, stmt.params, stmt.body)
        return Unit()

    elif isinstance(stmt, Expr):
        return eval_expr(stmt, env)

    raise TypeError(f"{stmt!r} is not a statement")


def eval_expr(expr, env):
    if isinstance(expr, NumberLiteral):
        return Number(expr.value)

    elif isinstance(expr, Operation):
        return eval_operation(expr, env)

    elif isinstance(expr, BindingUsage):
        return eval_binding_usage(expr, env)

    elif isinstance(expr, FuncCall):
        return eval_func_call(expr, env)

    elif isinstance(expr, Block):
        return eval_block(expr, env)

    raise TypeError(f"{expr!r} is not an expression")


def eval_operation(operation, env):
    lhs = eval_expr(operation.lhs, env)
    rhs = eval_expr(operation.rhs, env)

    if not (isinstance(lhs, Number) and isinstance(rhs, Number)):
        raise TypeMismatch()
    lhs, rhs = lhs.value, rhs.value

    if operation.op is Op.ADD:
        return Number(lhs + rhs)
    elif operation.op is Op.SUB:
        return Number(lhs - rhs)
    elif operation.op is Op.MUL:
        return Number(lhs * rhs)

    if rhs == 0:
        raise DivisionByZero()

    if operation.op is Op.DIV:
        return Number(truncating_div(lhs, rhs))
    return Bool(lhs % rhs == 0)


def truncating_div(lhs, rhs):
    """Integer division rounding toward zero (-7 / 2 == -3), unlike Python's floor division."""
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def eval_binding_usage(binding_usage, env):
    """A name that isn't bound to a value may still name a function taking no arguments."""
    try:
        return env.get_binding(binding_usage.name)
    except BindingNotFound:
        if not env.has_func(binding_usage.name):
            raise
    return eval_func_call(FuncCall(binding_usage.name, ()), env)


def eval_func_call(func_call, env):
    """Arguments are evaluated in the call's child env, so there is no closure over where the function was defined."""
    params, body = env.get_func(func_call.callee)

    if len(params) != len(func_call.params):
        raise ArityMismatch(func_call.callee, len(params), len(func_call.params))

    child_env = env.create_child()
    for param, arg in zip(params, func_call.params):
        child_env.add_binding(param, eval_expr(arg, child_env))

    return eval_statement(body, child_env)


def eval_block(block, env):
    if not block.statements:
        return Unit()

    child_env = env.create_child()

    *statements, last = block.statements
    for stmt in statements:
        eval_statement(stmt, child_env)

    return eval_statement(last, child_env)
