import unittest

from catlang.val import Bool, Number, Unit


class ValTestCase(unittest.TestCase):

    def test_str(self):
        cases = {
            Number(42): "42",
            Number(-7): "-7",
            Bool(True): "true",
            Bool(False): "false",
            Unit(): "Unit",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(case), case)

    def test_equality(self):
        self.assertEqual(Unit(), Unit())
        self.assertEqual(Number(1), Number(1))
        self.assertNotEqual(Number(1), Bool(True))
        self.assertNotEqual(Number(0), Unit())


if __name__ == '__main__':
    unittest.main()
