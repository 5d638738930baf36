"""Try an ordered list of options until one works.

Shared by the model fallback and the search fallback: each option is a
(name, callable) pair, tried in list order. The first callable that
returns is the winner; a failing option is logged and the next one is
tried. When everything fails the collected messages are raised together.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from article_optimizer.errors import AllAttemptsFailed

T = TypeVar("T")


def first_success(
    attempts: Sequence[tuple[str, Callable[[], T]]],
    label: str = "option",
    recoverable: tuple[type[BaseException], ...] = (Exception,),
    error_cls: type[AllAttemptsFailed] = AllAttemptsFailed,
) -> tuple[str, T]:
    """Return (name, result) for the first attempt that does not raise.

    Only exceptions in `recoverable` advance to the next attempt; anything
    else propagates immediately. Raises `error_cls` carrying one
    "<name>: <message>" entry per failed attempt once the list is exhausted.
    """
    errors: list[str] = []
    for i, (name, attempt) in enumerate(attempts, 1):
        try:
            return name, attempt()
        except recoverable as e:
            errors.append(f"{name}: {e}")
            print(f"  .. {label} {name} failed ({type(e).__name__}: {e}) [{i}/{len(attempts)}]")

    raise error_cls(f"Every {label} failed", errors)
