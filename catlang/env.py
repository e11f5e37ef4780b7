"""Chained lexical environments.

An Env maps names to bindings (values) or functions (parameter names plus body statement), and optionally points to a
parent Env. Lookups walk from the innermost scope outwards and stop at the first entry of the kind being looked for:
a binding named `f` in a child scope hides a binding `f` in its parent, but not a function `f`.
"""

from dataclasses import dataclass
from typing import Tuple

from catlang.lang.error import BindingNotFound, FunctionNotFound


@dataclass(frozen=True)
class Binding:
    val: object


@dataclass(frozen=True)
class Func:
    params: Tuple[str, ...]
    body: object


class Env:
    """A single scope. The top-level Env of a session has no parent; every block and function call evaluates in a
    child of the Env it was entered from, which is thrown away afterwards. Children never modify their parents.
    """

    def __init__(self, parent=None):
        self.named_elements = {}  # name: Binding or Func, one entry per name
        self.parent = parent

    def create_child(self):
        return Env(parent=self)

    def add_binding(self, name, val):
        self.named_elements[name] = Binding(val)

    def add_func(self, name, params, body):
        self.named_elements[name] = Func(tuple(params), body)

    def get_binding(self, name):
        """Returns the value bound to name, raises BindingNotFound if there is none in the whole chain."""
        binding = self._get_named_info(name, Binding)
        if binding is None:
            raise BindingNotFound(name)
        return binding.val

    def get_func(self, name):
        """Returns (params, body) of function name, raises FunctionNotFound if there is none in the whole chain."""
        func = self._get_named_info(name, Func)
        if func is None:
            raise FunctionNotFound(name)
        return func.params, func.body

    def has_binding(self, name):
        return self._get_named_info(name, Binding) is not None

    def has_func(self, name):
        return self._get_named_info(name, Func) is not None

    def _get_named_info(self, name, kind):
        env = self
        while env is not None:
            named_info = env.named_elements.get(name)
            if isinstance(named_info, kind):
                return named_info
            env = env.parent
        return None

    def __repr__(self):
        return f"Env({self.named_elements!r}, parent={self.parent!r})"
