"""The cat language: integer and boolean expressions, let bindings, blocks and single-statement functions."""

from catlang.env import Env
from catlang.interpreter import Parse, parse
from catlang.val import Bool, Number, Unit, Val
