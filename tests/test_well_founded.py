"""
Tests for well-founded relations and their convenience combinators.
"""

import math
import pytest

from wellfounded.core.accessibility import Acc, DescentError
from wellfounded.core.engine import Recursor
from wellfounded.core.well_founded import (
    WellFounded,
    wf_rec,
    wf_ind,
    inv_image,
    wf_recursive,
)
from wellfounded.sized.nat_accessible import NAT_LT, nat_lt


def factorial(n, recurse):
    return 1 if n == 0 else n * recurse(n - 1)


def proper_divisor(y, x):
    """``y`` strictly divides ``x`` (positive integers only)."""
    return 0 < y < x and x % y == 0


def divisor_acc(x):
    return Acc(x, proper_divisor, divisor_acc)


DIVIDES = WellFounded(proper_divisor, divisor_acc, name='divides')


class TestNatLt:

    def test_relation(self):
        assert nat_lt(2, 3)
        assert not nat_lt(3, 3)
        assert not nat_lt(-1, 0)
        assert not nat_lt(True, 2)
        assert not nat_lt(1.0, 2)

    @pytest.mark.parametrize("n", range(11))
    def test_factorial(self, n):
        assert wf_rec(NAT_LT, factorial, n) == math.factorial(n)

    def test_accessible(self):
        assert NAT_LT.accessible(4).value == 4

    def test_repr(self):
        assert repr(NAT_LT) == "WellFounded(nat_lt)"


class TestCustomRelation:

    def test_divisor_chain_length(self):
        """Longest chain of proper divisors: the number of prime factors."""
        def longest(x, recurse):
            below = [d for d in range(1, x) if x % d == 0]
            return max((1 + recurse(d) for d in below), default=0)

        assert wf_rec(DIVIDES, longest, 1) == 0
        assert wf_rec(DIVIDES, longest, 12) == 3   # 12 > 6 > 3 > 1
        assert wf_rec(DIVIDES, longest, 32) == 5

    def test_non_divisor_rejected(self):
        def step(x, recurse):
            return recurse(x - 1) if x > 1 else 0

        with pytest.raises(DescentError):
            wf_rec(DIVIDES, step, 9)

    def test_wf_ind_motive(self):
        def count(x, recurse):
            return sum(1 + recurse(d) for d in range(1, x) if x % d == 0)

        assert wf_ind(DIVIDES, count, 8, motive=lambda x, r: r >= 0) > 0

    def test_custom_recursor(self):
        def deep(x, recurse):
            return 0 if x == 1 else 1 + recurse(x // 2)

        with pytest.raises(RecursionError):
            wf_rec(DIVIDES, deep, 64, recursor=Recursor(max_depth=2))


class TestInvImage:

    def test_length_transport(self):
        by_length = inv_image(NAT_LT, len, name='by_length')

        def squares(xs, recurse):
            return [] if not xs else [xs[0] ** 2] + recurse(xs[1:])

        assert wf_rec(by_length, squares, [2, 3, 4]) == [4, 9, 16]

    def test_relation(self):
        by_abs = inv_image(NAT_LT, abs)
        assert by_abs.relation(-1, 3)
        assert not by_abs.relation(-3, 3)
        assert by_abs.name == "inv_image(nat_lt)"

    def test_rejects_equal_image(self):
        by_length = inv_image(NAT_LT, len)
        with pytest.raises(DescentError):
            by_length.accessible("ab").descend("cd")

    def test_non_injective(self):
        by_length = inv_image(NAT_LT, len)

        def collatz_like(s, recurse):
            return 0 if not s else 1 + recurse(s[:-1].upper())

        assert wf_rec(by_length, collatz_like, "abcd") == 4


class TestWfRecursive:

    def test_decorator(self):
        @wf_recursive(NAT_LT)
        def fact(n, recurse):
            return 1 if n == 0 else n * recurse(n - 1)

        assert fact(5) == 120
        assert fact.__name__ == 'fact'

    def test_generator_step(self):
        @wf_recursive(NAT_LT)
        def count(n):
            if n == 0:
                return 0
            return 1 + (yield n - 1)

        assert count(5000) == 5000
