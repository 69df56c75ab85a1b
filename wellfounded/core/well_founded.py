"""
Well-Founded Relations
======================

A relation is well-founded when every value is accessible under it, i.e.
there is no infinite strictly-descending chain. :class:`WellFounded`
packages a relation together with a *witness*: a total function producing
the accessibility certificate of any value.

With a witness in hand the caller never builds certificates::

    wf_rec(NAT_LT, step, 10)      # NAT_LT from wellfounded.sized.nat_accessible

The combinators trust the witness. A witness that fabricates certificates
for a relation that is not actually well-founded makes the fold run until
the relatedness check or the interpreter gives up; it is not detected here.
"""

import functools
from typing import Any, Callable, Generic, Optional, TypeVar

from wellfounded.core.accessibility import Acc, Relation
from wellfounded.core.engine import Motive, Recursor, Step, default_recursor

A = TypeVar('A')
B = TypeVar('B')


class WellFounded(Generic[A]):
    """
    A relation and the witness that it is well-founded.

    Args:
        relation: ``relation(y, x)`` is True when ``y`` is smaller than ``x``.
        witness: Total function ``x -> Acc`` for ``relation``.
        name: Label used in reprs and log messages.
    """

    def __init__(self, relation: Relation, witness: Callable[[A], Acc[A]], name: Optional[str] = None):
        self.relation = relation
        self.witness = witness
        self.name = name or getattr(relation, '__name__', 'relation')

    def accessible(self, x: A) -> Acc[A]:
        """Certificate for ``x``."""
        return self.witness(x)

    def rec(self, step: Step, x: A, recursor: Optional[Recursor] = None) -> Any:
        return (recursor or default_recursor()).rec(step, x, self.witness(x))

    def ind(self, step: Step, x: A, motive: Optional[Motive] = None,
            recursor: Optional[Recursor] = None) -> Any:
        return (recursor or default_recursor()).ind(step, x, self.witness(x), motive)

    def __repr__(self):
        return f"WellFounded({self.name})"


def wf_rec(wf: WellFounded, step: Step, x: Any, recursor: Optional[Recursor] = None) -> Any:
    """Well-founded recursion: fold ``step`` from ``x`` using ``wf``'s witness."""
    return wf.rec(step, x, recursor)


def wf_ind(wf: WellFounded, step: Step, x: Any, motive: Optional[Motive] = None,
           recursor: Optional[Recursor] = None) -> Any:
    """Well-founded induction: like :func:`wf_rec` with a per-value motive."""
    return wf.ind(step, x, motive, recursor)


def inv_image(wf: WellFounded[A], f: Callable[[B], A], name: Optional[str] = None) -> WellFounded[B]:
    """
    Pull a well-founded relation back along ``f``.

    The result relates ``y`` to ``x`` iff ``wf.relation(f(y), f(x))``.
    Each certificate for ``x`` follows the certificate for ``f(x)``, so it
    is exactly as deep as the one it was transported from.
    """
    base = wf.relation

    def relation(y, x):
        return base(f(y), f(x))

    relation.__name__ = name or f"inv_image({wf.name})"

    def transport(x, acc):
        def branch(y):
            # related(y, x) means base(f(y), f(x))
            return transport(y, acc.descend(f(y), check=False))
        return Acc(x, relation, branch)

    def witness(x):
        return transport(x, wf.accessible(f(x)))

    return WellFounded(relation, witness, name=relation.__name__)


def wf_recursive(wf: WellFounded, recursor: Optional[Recursor] = None):
    """
    Decorator turning a step function into a plain one-argument function.

    Usage:
        @wf_recursive(NAT_LT)
        def fact(n, recurse):
            return 1 if n == 0 else n * recurse(n - 1)

        fact(5)  # 120
    """
    def decorate(step):
        @functools.wraps(step)
        def wrapper(x):
            return wf.rec(step, x, recursor)
        return wrapper
    return decorate
