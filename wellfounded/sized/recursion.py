"""
Size-Based Recursion
====================

Well-founded recursion where the witness is synthesized from a measure,
so the caller supplies only a step function::

    def squares(xs, recurse):
        if not xs:
            return []
        return [xs[0] ** 2] + recurse(xs[1:])

    size_rec(squares, [2, 3, 4])   # [4, 9, 16]

``recurse`` accepts any value of strictly smaller measure, not just the
structural tail, which is what makes this useful for Euclid-style steps
and shrinking worklists.
"""

import functools
from typing import Any, Optional

from wellfounded.core.engine import Motive, Recursor, Step
from wellfounded.sized.measure import Sized, instance_for
from wellfounded.sized.nat_accessible import sized_well_founded


def size_rec(step: Step, x: Any, sized: Optional[Sized] = None,
             recursor: Optional[Recursor] = None) -> Any:
    """Recursion on ``sized.smaller``; ``sized`` defaults to ``instance_for(x)``."""
    if sized is None:
        sized = instance_for(x)
    return sized_well_founded(sized).rec(step, x, recursor)


def size_ind(step: Step, x: Any, sized: Optional[Sized] = None,
             motive: Optional[Motive] = None, recursor: Optional[Recursor] = None) -> Any:
    """Induction on ``sized.smaller``, checking ``motive`` on every result."""
    if sized is None:
        sized = instance_for(x)
    return sized_well_founded(sized).ind(step, x, motive, recursor)


def size_recursive(func=None, *, sized: Optional[Sized] = None,
                   recursor: Optional[Recursor] = None):
    """
    Decorator form of :func:`size_rec`.

    Usage:
        @size_recursive
        def total(xs, recurse):
            return 0 if not xs else xs[0] + recurse(xs[1:])

        @size_recursive(sized=Sized(lambda p: p[1], name='second'))
        def gcd(pair, recurse):
            a, b = pair
            return a if b == 0 else recurse((b, a % b))
    """
    if func is None:
        return lambda f: size_recursive(f, sized=sized, recursor=recursor)

    @functools.wraps(func)
    def wrapper(x):
        return size_rec(func, x, sized, recursor)

    return wrapper
