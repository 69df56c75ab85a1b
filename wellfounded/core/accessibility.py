"""
Accessibility Certificates
==========================

A value ``x`` is *accessible* under a relation ``R`` when every ``y`` with
``R(y, x)`` is itself accessible. An :class:`Acc` is the witness of that
fact: it pairs the value with a function producing the certificate of any
smaller value.

Theoretical Foundation:
    Acc is the least predicate closed under

        (∀ y. R(y, x) → Acc(y))  ⟹  Acc(x)

    so a certificate is a (possibly infinitely branching) tree whose every
    branch is finite. Folding over it is therefore guaranteed to stop,
    however the step function chooses which smaller values to visit.

    In a proof assistant the branch function also receives a proof of
    ``R(y, x)``. Python relations are decidable predicates, so the proof is
    replaced by a membership test performed in :meth:`Acc.descend`.

Certificates are built lazily: nothing below the root exists until a
descent asks for it, and sub-certificates are never cached.
"""

from typing import Any, Callable, Generic, Optional, TypeVar

A = TypeVar('A')

# relation(y, x) is True when y is smaller than x
Relation = Callable[[Any, Any], bool]


class DescentError(ValueError):
    """Raised when a descent is requested for a value that is not smaller."""


class Acc(Generic[A]):
    """
    Accessibility certificate for ``value`` under ``relation``.

    ``branch(y)`` returns the certificate for a smaller ``y``. It is only
    ever called after relatedness is established, either by the check in
    :meth:`descend` or by the caller's own reasoning (``check=False``).
    """

    __slots__ = ('value', 'relation', '_branch')

    def __init__(self, value: A, relation: Relation, branch: Callable[[A], 'Acc[A]']):
        self.value = value
        self.relation = relation
        self._branch = branch

    def descend(self, smaller: A, check: bool = True) -> 'Acc[A]':
        """Certificate for ``smaller``, which must be related to ``self.value``."""
        if check and not self.relation(smaller, self.value):
            raise DescentError(
                f"{smaller!r} is not smaller than {self.value!r} "
                f"under {_relation_name(self.relation)}"
            )
        return self._branch(smaller)

    def __repr__(self):
        return f"Acc({self.value!r}, {_relation_name(self.relation)})"


def _relation_name(relation: Optional[Relation]) -> str:
    return getattr(relation, '__name__', None) or repr(relation)
