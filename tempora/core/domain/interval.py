"""
IntervalBoundary — какие концы периода включены в нарезку

Границы определяются относительно start/end самого периода (а не
календарных границ). Управляют тем, может ли первый/последний
sub-period совпасть со start/end родительского периода.
"""

from enum import Enum


class IntervalBoundary(str, Enum):
    """
    Политика концов интервала.

    - CLOSED: оба конца включены
    - OPEN: оба конца исключены
    - LEFT_OPEN: start исключён, end включён
    - RIGHT_OPEN: start включён, end исключён
    """

    CLOSED = "closed"
    OPEN = "open"
    LEFT_OPEN = "left_open"
    RIGHT_OPEN = "right_open"

    def includes_start(self) -> bool:
        return self in (IntervalBoundary.CLOSED, IntervalBoundary.RIGHT_OPEN)

    def includes_end(self) -> bool:
        return self in (IntervalBoundary.CLOSED, IntervalBoundary.LEFT_OPEN)
