"""
wellfounded: Well-Founded Recursion for Python
==============================================

Recursion whose termination follows from a decreasing measure rather than
from the shape of the input.

Core Components:
    - core: accessibility certificates, the fold/induction engine and
      well-founded relations
    - sized: natural-number measures, the certificate construction that
      turns a measure into well-foundedness, and size-based recursion

Usage:
    >>> import wellfounded
    >>> @wellfounded.size_recursive
    ... def squares(xs, recurse):
    ...     return [] if not xs else [xs[0] ** 2] + recurse(xs[1:])
    >>> squares([2, 3, 4])
    [4, 9, 16]

    >>> def gcd(pair, recurse):
    ...     a, b = pair
    ...     return a if b == 0 else recurse((b, a % b))
    >>> wellfounded.size_rec(gcd, (12, 18), wellfounded.Sized(lambda p: p[1]))
    6
"""

__version__ = "1.0.0"

from wellfounded.core import (
    Acc,
    DescentError,
    Relation,
    Recursor,
    DescentTrace,
    acc_rec,
    acc_ind,
    default_recursor,
    WellFounded,
    wf_rec,
    wf_ind,
    inv_image,
    wf_recursive,
)
from wellfounded.sized import (
    Sized,
    Smaller,
    NAT,
    SEQUENCE,
    is_nat,
    instance_for,
    register_sized,
    nat_lt,
    nat_accessible,
    NAT_LT,
    accessible_by_size,
    sized_well_founded,
    size_rec,
    size_ind,
    size_recursive,
)
