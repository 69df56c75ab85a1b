"""
Recursion Engine
================

Folds a step function over an accessibility certificate.

Given ``step(x, recurse)`` and a certificate for ``x``, the engine calls
``step`` with a ``recurse`` continuation that, for any smaller ``y``, pulls
the sub-certificate for ``y`` out of ``x``'s certificate and folds again.
Each recursive call consumes a strictly smaller sub-certificate, so the
fold terminates whenever the certificate was honestly built.

Two execution strategies share the same semantics:

    Direct (plain step functions)::

        def step(n, recurse):
            return 1 if n == 0 else n * recurse(n - 1)

    Trampolined (generator step functions)::

        def step(n):
            if n == 0:
                return 1
            return n * (yield n - 1)

    A generator step yields the smaller value it wants folded and receives
    the result back from the ``yield``. The engine keeps the pending steps
    on an explicit stack, so descent depth is bounded by memory rather than
    by the interpreter's recursion limit. A failure below a pending step
    (a rejected descent, a rejected motive, an exception from a deeper
    step) is raised inside that step at its ``yield``, just as it would be
    raised from ``recurse`` in the direct strategy.

Induction is the same fold with an optional motive ``motive(x, result)``
checked on every per-value result.
"""

import inspect
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from wellfounded.core.accessibility import Acc

logger = logging.getLogger(__name__)

Step = Callable[..., Any]
Motive = Callable[[Any, Any], bool]


@dataclass
class DescentTrace:
    """Result of a traced fold."""
    result: Any
    calls: int            # Number of step invocations
    max_depth: int        # Deepest descent reached (root = 0)
    wall_time_seconds: float

    @property
    def steps_per_second(self) -> float:
        if self.wall_time_seconds <= 0:
            return float('inf')
        return self.calls / self.wall_time_seconds

    def __str__(self):
        return (
            f"DescentTrace(calls={self.calls}, max_depth={self.max_depth}, "
            f"time={self.wall_time_seconds * 1000:.3f} ms)"
        )


class _Counters:
    __slots__ = ('calls', 'max_depth')

    def __init__(self):
        self.calls = 0
        self.max_depth = 0


class Recursor:
    """
    Configurable fold/induction engine over accessibility certificates.

    Args:
        check_descent: Test relatedness before every descent. Disabling it
            trusts the step function to recurse only on smaller values.
        max_depth: Optional limit on descent depth; exceeding it raises
            ``RecursionError``.
        enable_logging: Turn on DEBUG logging for the whole process.

    Usage:
        recursor = Recursor(max_depth=1000)
        result = recursor.rec(step, 10, nat_accessible(10))
    """

    def __init__(
        self,
        check_descent: bool = True,
        max_depth: Optional[int] = None,
        enable_logging: bool = False,
    ):
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.check_descent = check_descent
        self.max_depth = max_depth

        if enable_logging:
            logging.basicConfig(level=logging.DEBUG)

    def rec(self, step: Step, x: Any, acc: Acc) -> Any:
        """Fold ``step`` over the certificate ``acc`` for ``x``."""
        return self._run(step, x, acc, None, _Counters())

    def ind(self, step: Step, x: Any, acc: Acc, motive: Optional[Motive] = None) -> Any:
        """
        Induction over ``acc``: like :meth:`rec`, but every per-value
        result must satisfy ``motive(value, result)``.
        """
        return self._run(step, x, acc, motive, _Counters())

    def trace(self, step: Step, x: Any, acc: Acc, motive: Optional[Motive] = None) -> DescentTrace:
        """Fold and report how many steps ran and how deep the descent went."""
        counters = _Counters()
        start_time = time.perf_counter()
        result = self._run(step, x, acc, motive, counters)
        return DescentTrace(
            result=result,
            calls=counters.calls,
            max_depth=counters.max_depth,
            wall_time_seconds=time.perf_counter() - start_time,
        )

    # ---- Internals ----

    def _run(self, step, x, acc, motive, counters):
        if acc.value is not x and acc.value != x:
            raise ValueError(f"certificate is for {acc.value!r}, not {x!r}")

        if inspect.isgeneratorfunction(step):
            result = self._run_trampolined(step, x, acc, motive, counters)
        else:
            result = self._run_direct(step, x, acc, motive, counters)

        logger.debug(
            f"Folded {getattr(step, '__name__', step)!s} from {x!r}: "
            f"{counters.calls} steps, depth {counters.max_depth}"
        )
        return result

    def _run_direct(self, step, x, acc, motive, counters):
        check = self.check_descent

        def visit(value, cert, depth):
            self._enter(value, depth, counters)

            def recurse(smaller):
                return visit(smaller, cert.descend(smaller, check=check), depth + 1)

            return self._accept(value, step(value, recurse), motive)

        return visit(x, acc, 0)

    def _run_trampolined(self, step, x, acc, motive, counters):
        check = self.check_descent
        self._enter(x, 0, counters)
        stack: List[Tuple[Any, Acc, Any]] = [(x, acc, step(x))]
        sent, failure = None, None

        while True:
            value, cert, frame = stack[-1]
            try:
                if failure is None:
                    smaller = frame.send(sent)
                else:
                    smaller = frame.throw(failure)
            except StopIteration as done:
                stack.pop()
                try:
                    sent, failure = self._accept(value, done.value, motive), None
                except Exception as exc:
                    sent, failure = None, exc
            except Exception as exc:
                stack.pop()
                sent, failure = None, exc
            else:
                # the waiting frame receives any descent failure at its yield
                sent, failure = None, None
                try:
                    sub = cert.descend(smaller, check=check)
                    self._enter(smaller, len(stack), counters)
                    stack.append((smaller, sub, step(smaller)))
                except Exception as exc:
                    failure = exc
                continue

            if not stack:
                if failure is not None:
                    raise failure
                return sent

    def _enter(self, value, depth, counters):
        counters.calls += 1
        if depth > counters.max_depth:
            counters.max_depth = depth
        if self.max_depth is not None and depth > self.max_depth:
            raise RecursionError(
                f"descent depth {depth} exceeds max_depth={self.max_depth} at {value!r}"
            )

    @staticmethod
    def _accept(value, result, motive):
        if motive is not None and not motive(value, result):
            raise ValueError(f"motive rejected result {result!r} for {value!r}")
        return result


_default = Recursor()


def default_recursor() -> Recursor:
    """The shared engine used by the module-level combinators."""
    return _default


def acc_rec(step: Step, x: Any, acc: Acc) -> Any:
    """Fold ``step`` over ``acc`` (the certificate for ``x``)."""
    return _default.rec(step, x, acc)


def acc_ind(step: Step, x: Any, acc: Acc, motive: Optional[Motive] = None) -> Any:
    """Induction over ``acc``; see :meth:`Recursor.ind`."""
    return _default.ind(step, x, acc, motive)
