"""
Size Measures
=============

A :class:`Sized` instance assigns a natural number to every value of a
domain. It induces the derived relation

    smaller(x, y)  ⇔  measure(x) < measure(y)

which is a strict order (irreflexive, transitive) because ``<`` on the
naturals is. The measure need not be injective.

Built-in instances:
    - ``NAT``:      non-negative integers measure themselves
    - ``SEQUENCE``: anything with a ``len()`` measures by its length

``instance_for(x)`` picks the instance from the value's type, the way a
type class is resolved, and ``register_sized`` extends it.
"""

import functools
from collections.abc import Sized as _HasLen
from typing import Any, Callable, Generic, Optional, TypeVar

A = TypeVar('A')


def is_nat(n: Any) -> bool:
    """True for non-negative ``int`` values (``bool`` excluded)."""
    return isinstance(n, int) and not isinstance(n, bool) and n >= 0


class Sized(Generic[A]):
    """
    A natural-number measure on values of type ``A``.

    Every measured value is validated: a non-integer raises ``TypeError``,
    a negative integer raises ``ValueError``.
    """

    def __init__(self, measure: Callable[[A], int], name: Optional[str] = None):
        self._measure = measure
        self.name = name or getattr(measure, '__name__', 'measure')

    def measure(self, x: A) -> int:
        n = self._measure(x)
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(
                f"measure {self.name} returned {type(n).__name__} for {x!r}, expected int"
            )
        if n < 0:
            raise ValueError(f"measure {self.name} returned negative size {n} for {x!r}")
        return n

    @property
    def smaller(self) -> 'Smaller[A]':
        return Smaller(self)

    def __repr__(self):
        return f"Sized({self.name})"


class Smaller(Generic[A]):
    """The relation ``smaller(y, x) = measure(y) < measure(x)``."""

    def __init__(self, sized: Sized[A]):
        self.sized = sized
        self.__name__ = f"smaller[{sized.name}]"

    def __call__(self, y: A, x: A) -> bool:
        return self.sized.measure(y) < self.sized.measure(x)

    def __eq__(self, other):
        return isinstance(other, Smaller) and other.sized is self.sized

    def __hash__(self):
        return hash((Smaller, id(self.sized)))

    def __repr__(self):
        return self.__name__


def _nat_size(n: int) -> int:
    if not is_nat(n):
        raise ValueError(f"{n!r} is not a natural number")
    return n


NAT: Sized[int] = Sized(_nat_size, name='nat')
SEQUENCE: Sized[Any] = Sized(len, name='sequence')


@functools.singledispatch
def _instance(x) -> Sized:
    raise TypeError(f"no Sized instance registered for {type(x).__name__}")


@_instance.register(int)
def _(x):
    if isinstance(x, bool):
        raise TypeError("no Sized instance registered for bool")
    return NAT


@_instance.register(_HasLen)
def _(x):
    return SEQUENCE


def instance_for(x: Any) -> Sized:
    """The registered :class:`Sized` instance for ``x``'s type."""
    return _instance(x)


def register_sized(cls: type, sized: Sized) -> None:
    """Make ``instance_for`` return ``sized`` for values of ``cls``."""
    _instance.register(cls, lambda x: sized)
