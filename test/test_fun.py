import unittest
from collections import namedtuple

from arrowfn.fun import Arrow, Fun, arrow, fun, spread, wrap


def double(x):
    return x * 2


def add_one(x):
    return x + 1


def square(x):
    return x * x


def split(x):
    return x, x * 2


def add_both(x, y):
    return x + y


class TestFun(unittest.TestCase):
    def test_compose_right_to_left(self):
        composed = fun(double) * fun(add_one)
        self.assertEqual(composed % 5, 12)

    def test_method_style(self):
        self.assertEqual(fun(double).compose(fun(add_one)).apply(5), 12)
        self.assertEqual(fun(double)(5), 10)

    def test_associativity(self):
        f, g, h = fun(double), fun(add_one), fun(square)
        expected = double(add_one(square(3)))
        self.assertEqual(((f * g) * h) % 3, expected)
        self.assertEqual((f * (g * h)) % 3, expected)
        self.assertEqual(f.compose(g).compose(h).apply(3), expected)

    def test_compose_plain_callable(self):
        self.assertEqual((fun(double) * add_one) % 5, 12)

    def test_compose_returns_new_wrapper(self):
        f = fun(double)
        composed = f * fun(add_one)
        self.assertIsInstance(composed, Fun)
        self.assertIsNot(composed, f)
        self.assertIs(f.raw, double)

    def test_compose_is_lazy(self):
        calls = []

        def track(x):
            calls.append(x)
            return x

        composed = fun(track) * fun(track)
        self.assertEqual(calls, [])
        composed % 1
        composed % 2
        self.assertEqual(calls, [1, 1, 2, 2])

    def test_errors_propagate(self):
        composed = fun(lambda x: 1 / x) * fun(add_one)
        with self.assertRaises(ZeroDivisionError):
            composed % -1

    def test_compose_with_non_function(self):
        with self.assertRaises(TypeError):
            fun(double) * 3
        with self.assertRaises(TypeError):
            fun(double).compose(3)


class TestFunMultiValue(unittest.TestCase):
    def test_intermediate_returns_multiple_values(self):
        self.assertEqual((fun(add_both) * fun(split)).apply(5), 15)
        self.assertEqual(fun(add_both) * fun(split) % 5, 15)

    def test_multiple_values_are_returned(self):
        def triple(x, y):
            return x, y, x * y

        self.assertEqual((fun(triple) * fun(split)).apply(5), (5, 10, 50))

    def test_apply_multiple_arguments(self):
        self.assertEqual(fun(lambda a, b, c: a + b + c).apply(1, 2, 3), 6)

    def test_composed_apply_multiple_arguments(self):
        def double_each(x, y):
            return x * 2, y * 2

        self.assertEqual((fun(add_both) * fun(double_each)).apply(5, 10), 30)

    def test_varargs(self):
        count = fun(lambda *args: len(args))
        self.assertEqual((fun(double) * count).apply(1, 2, 3, 4, 5), 10)

    def test_different_numbers_of_values(self):
        def one_to_two(x):
            return x, x + 1

        def two_to_one(x, y):
            return x * y

        def one_to_three(x):
            return x, x * 2, x * 3

        composed = fun(one_to_three) * fun(two_to_one) * fun(one_to_two)
        self.assertEqual(composed.apply(3), (12, 24, 36))

    def test_namedtuple_is_a_single_value(self):
        Point = namedtuple('Point', 'x y')
        composed = fun(lambda p: p.x) * fun(lambda v: Point(v, 0))
        self.assertEqual(composed % 7, 7)

    def test_spread(self):
        self.assertEqual(spread((1, 2)), (1, 2))
        self.assertEqual(spread([1, 2]), ([1, 2],))
        self.assertEqual(spread(None), (None,))


class TestArrow(unittest.TestCase):
    def test_compose_left_to_right(self):
        self.assertEqual(5 | arrow(add_one) >> arrow(double), 12)

    def test_method_style(self):
        self.assertEqual(arrow(add_one).compose_to(arrow(double)).apply(5), 12)
        self.assertEqual(arrow(add_one).to(arrow(double)).apply(5), 12)
        self.assertEqual(arrow(add_one)(5), 6)

    def test_associativity(self):
        f, g, h = arrow(double), arrow(add_one), arrow(square)
        expected = square(add_one(double(3)))
        self.assertEqual(((f >> g) >> h).apply(3), expected)
        self.assertEqual((f >> (g >> h)).apply(3), expected)

    def test_chained_application(self):
        self.assertEqual(5 | arrow(add_one) | arrow(double), 12)

    def test_application_on_builtin_values(self):
        self.assertEqual('abc' | arrow(str.upper), 'ABC')
        self.assertEqual([1, 2, 3] | arrow(len), 3)
        self.assertEqual((1, 2) | arrow(len), 2)

    def test_operands_without_or_for_arrows(self):
        self.assertEqual({1, 2} | arrow(len), 2)
        self.assertIsNone(Arrow.__array_ufunc__)

    def test_multiple_values(self):
        self.assertEqual(5 | arrow(split) >> arrow(add_both), 15)
        self.assertEqual((arrow(split) >> arrow(add_both)).apply(5), 15)

    def test_compose_plain_callable(self):
        composed = arrow(add_one) >> double
        self.assertIsInstance(composed, Arrow)
        self.assertEqual(composed.apply(5), 12)

    def test_compose_with_non_function(self):
        with self.assertRaises(TypeError):
            arrow(double) >> 3


class TestWrap(unittest.TestCase):
    def test_apply_final(self):
        self.assertEqual(wrap(5) % (fun(double) * fun(add_one)), 12)
        self.assertEqual(wrap(5) % (arrow(double) >> arrow(add_one)), 11)
        self.assertEqual(wrap(5) % double, 10)
        self.assertEqual(wrap(5).apply_final(fun(add_one)), 6)


if __name__ == '__main__':
    unittest.main()
