"""Accessibility certificates and the generic fold/induction engine."""

from wellfounded.core.accessibility import (
    Acc,
    DescentError,
    Relation,
)
from wellfounded.core.engine import (
    Recursor,
    DescentTrace,
    acc_rec,
    acc_ind,
    default_recursor,
)
from wellfounded.core.well_founded import (
    WellFounded,
    wf_rec,
    wf_ind,
    inv_image,
    wf_recursive,
)

__all__ = [
    'Acc',
    'DescentError',
    'Relation',
    'Recursor',
    'DescentTrace',
    'acc_rec',
    'acc_ind',
    'default_recursor',
    'WellFounded',
    'wf_rec',
    'wf_ind',
    'inv_image',
    'wf_recursive',
]
