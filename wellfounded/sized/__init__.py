"""Measure-based well-foundedness: ``Sized`` instances and the recursion built on them."""

from wellfounded.sized.measure import (
    Sized,
    Smaller,
    NAT,
    SEQUENCE,
    is_nat,
    instance_for,
    register_sized,
)
from wellfounded.sized.nat_accessible import (
    nat_lt,
    nat_accessible,
    NAT_LT,
    accessible_by_size,
    sized_well_founded,
)
from wellfounded.sized.recursion import (
    size_rec,
    size_ind,
    size_recursive,
)

__all__ = [
    'Sized',
    'Smaller',
    'NAT',
    'SEQUENCE',
    'is_nat',
    'instance_for',
    'register_sized',
    'nat_lt',
    'nat_accessible',
    'NAT_LT',
    'accessible_by_size',
    'sized_well_founded',
    'size_rec',
    'size_ind',
    'size_recursive',
]
