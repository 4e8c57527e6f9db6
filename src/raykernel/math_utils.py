from __future__ import annotations

from typing import Any

from raykernel.numeric import sqrt


def solve_quadratic(a: Any, b: Any, c: Any) -> tuple[Any, ...]:
    """Real roots of ``a*t^2 + b*t + c = 0`` in ascending order.

    Returns zero, one or two roots. ``a == 0`` degrades to the linear root
    ``-c/b`` (no roots when ``b`` is also zero). A discriminant of exactly zero
    gives the single tangent root.
    """
    if a == 0:
        if b == 0:
            return ()
        return (-c / b,)

    disc = b * b - 4 * a * c
    if disc < 0:
        return ()
    if disc == 0:
        return (-b / (2 * a),)

    # q shares the sign of -b so that neither root loses precision to cancellation
    s = sqrt(disc)
    q = -(b + s) / 2 if b >= 0 else -(b - s) / 2
    r0 = q / a
    r1 = c / q
    return (r0, r1) if r0 <= r1 else (r1, r0)
