"""
Accessibility from Size
=======================

Manufactures certificates from nothing but a measure.

Step 1: ``<`` on the naturals is well-founded.
    ``nat_accessible(n)`` is built by induction on the bound ``n``:

    - ``0``: nothing is below zero, so the branch function is never
      legitimately reached. Reaching it anyway is the absurd case and
      raises :class:`DescentError`.
    - ``k + 1``: for ``m < k + 1`` (so ``m ≤ k``) the certificate of ``m``
      sends every ``z < m`` to the branch of ``nat_accessible(k)``, which is
      sound because ``z < m ≤ k`` gives ``z < k``.

    The outer induction walks the bound down by one per descent; the inner
    construction reuses the certificate for the predecessor bound. Every
    chain of descents is therefore at most ``n`` long, whatever values the
    step function asks for.

Step 2: transport to a measured domain.
    The certificate for ``x`` under ``smaller`` rides on
    ``nat_accessible(measure(x))``: descending to ``y`` descends the
    natural-number certificate to ``measure(y)`` and transports again.
    Termination is inherited from step 1.
"""

from typing import Any

from wellfounded.core.accessibility import Acc, DescentError
from wellfounded.core.well_founded import WellFounded
from wellfounded.sized.measure import Sized, is_nat


def nat_lt(y: Any, x: Any) -> bool:
    """Strict order on the naturals."""
    return is_nat(y) and is_nat(x) and y < x


def _below_zero(z):
    raise DescentError(f"no natural number is below 0 (asked for {z!r})")


def nat_accessible(n: int) -> Acc[int]:
    """Certificate that ``n`` is accessible under :func:`nat_lt`."""
    if not is_nat(n):
        raise ValueError(f"{n!r} is not a natural number")
    if n == 0:
        return Acc(0, nat_lt, _below_zero)

    k = n - 1

    def branch(m):
        # m < k + 1, so m <= k
        return _accessible_within(m, k)

    return Acc(n, nat_lt, branch)


def _accessible_within(m: int, k: int) -> Acc[int]:
    """Certificate for ``m`` given ``m <= k``."""
    acc_k = nat_accessible(k)

    def branch(z):
        # z < m <= k
        return acc_k.descend(z, check=False)

    return Acc(m, nat_lt, branch)


NAT_LT: WellFounded[int] = WellFounded(nat_lt, nat_accessible, name='nat_lt')


def accessible_by_size(sized: Sized, x: Any) -> Acc:
    """Certificate for ``x`` under ``sized.smaller``."""
    return _transport(sized, sized.smaller, x, nat_accessible(sized.measure(x)))


def _transport(sized, relation, x, acc_n):
    def branch(y):
        # smaller(y, x) means measure(y) < measure(x) = acc_n.value
        return _transport(sized, relation, y, acc_n.descend(sized.measure(y), check=False))

    return Acc(x, relation, branch)


def sized_well_founded(sized: Sized) -> WellFounded:
    """The well-foundedness of ``sized.smaller``."""
    relation = sized.smaller
    return WellFounded(
        relation,
        lambda x: accessible_by_size(sized, x),
        name=relation.__name__,
    )
