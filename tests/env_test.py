import unittest

from catlang.env import Env
from catlang.grammar.expr import NumberLiteral
from catlang.lang.error import BindingNotFound, FunctionNotFound
from catlang.val import Bool, Number


class EnvTestCase(unittest.TestCase):

    def test_bindings(self):
        env = Env()
        env.add_binding("foo", Number(10))
        self.assertEqual(Number(10), env.get_binding("foo"))
        self.assertTrue(env.has_binding("foo"))
        self.assertFalse(env.has_binding("bar"))

        env.add_binding("foo", Bool(True))
        self.assertEqual(Bool(True), env.get_binding("foo"))

    def test_funcs(self):
        env = Env()
        env.add_func("one", [], NumberLiteral(1))
        self.assertEqual(((), NumberLiteral(1)), env.get_func("one"))
        self.assertTrue(env.has_func("one"))
        self.assertFalse(env.has_func("two"))
        self.assertFalse(env.has_binding("one"))

    def test_not_found(self):
        env = Env()
        with self.assertRaises(BindingNotFound) as context:
            env.get_binding("unknown")
        self.assertEqual("Binding with name `unknown` not found", str(context.exception))

        with self.assertRaises(FunctionNotFound) as context:
            env.get_func("i_dont_exist")
        self.assertEqual("Function with name `i_dont_exist` not found", str(context.exception))

    def test_child_sees_parent(self):
        parent = Env()
        parent.add_binding("foo", Number(5))
        parent.add_func("one", (), NumberLiteral(1))

        child = parent.create_child().create_child()
        self.assertEqual(Number(5), child.get_binding("foo"))
        self.assertEqual(((), NumberLiteral(1)), child.get_func("one"))

    def test_child_does_not_touch_parent(self):
        parent = Env()
        parent.add_binding("foo", Number(5))

        child = parent.create_child()
        child.add_binding("foo", Number(6))
        child.add_binding("bar", Number(7))

        self.assertEqual(Number(6), child.get_binding("foo"))
        self.assertEqual(Number(5), parent.get_binding("foo"))
        self.assertRaises(BindingNotFound, parent.get_binding, "bar")

    def test_kinds_are_looked_up_independently(self):
        parent = Env()
        parent.add_func("f", ("x",), NumberLiteral(1))
        parent.add_binding("g", Number(2))

        child = parent.create_child()
        child.add_binding("f", Number(3))
        child.add_func("g", (), NumberLiteral(4))

        self.assertEqual(Number(3), child.get_binding("f"))
        self.assertEqual((("x",), NumberLiteral(1)), child.get_func("f"))
        self.assertEqual(Number(2), child.get_binding("g"))
        self.assertEqual(((), NumberLiteral(4)), child.get_func("g"))

    def test_same_scope_redefinition_replaces(self):
        env = Env()
        env.add_binding("f", Number(1))
        env.add_func("f", (), NumberLiteral(1))

        self.assertRaises(BindingNotFound, env.get_binding, "f")
        self.assertTrue(env.has_func("f"))


if __name__ == '__main__':
    unittest.main()
