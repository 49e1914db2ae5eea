"""
Base offset definitions and the negation wrapper.

Defines the abstract Offset interface shared by every offset kind and the
operator protocol that lets offsets be added to and subtracted from dates.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
import logging

from dateoffsets.core.datetime_ops import DateLike

logger = logging.getLogger(__name__)


class Offset(ABC):
    """
    Abstract base class for all date offsets.

    An offset is immutable and can be applied to any number of points
    in time::

        datetime(2012, 5, 5) + offset   # forward
        datetime(2012, 5, 5) - offset   # backward
    """

    @abstractmethod
    def forward(self, point: DateLike) -> datetime:
        """Apply the offset forward to a point in time."""
        pass

    @abstractmethod
    def backward(self, point: DateLike) -> datetime:
        """Apply the offset backward to a point in time."""
        pass

    @property
    @abstractmethod
    def freq_string(self) -> str:
        """Short frequency code, e.g. "5S", "MB" or "3W-MON"."""
        pass

    def on_offset(self, point: DateLike) -> bool:
        """Check if a point already lies on the offset's grid."""
        return True

    def __add__(self, other):
        if isinstance(other, date):
            return self.forward(other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, date):
            return self.forward(other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, date):
            return self.backward(other)
        return NotImplemented

    def __neg__(self) -> "Offset":
        return NegatedOffset(self)


class RepeatingOffset(Offset):
    """
    Offset applied ``n`` times.

    Subclasses set ``FREQ`` to their frequency code.
    """

    FREQ: str = ""

    def __init__(self, n: int = 1) -> None:
        """
        Initialize offset.

        Args:
            n: Number of times the offset is applied
        """
        self._n = n

    @property
    def n(self) -> int:
        return self._n

    @property
    def freq_string(self) -> str:
        return ("" if self._n == 1 else str(self._n)) + self.FREQ

    def __eq__(self, other):
        if not isinstance(other, RepeatingOffset):
            return NotImplemented
        return type(self) is type(other) and self._n == other._n

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._n))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self._n})"


class AnchoredOffset(RepeatingOffset):
    """
    Offset that snaps to calendar landmarks rather than a fixed duration.

    Anchored offsets resolve each step by rebuilding date fields or
    stepping whole months, never through day-fraction arithmetic.
    """

    def __init__(self, n: int = 1) -> None:
        super().__init__(n)
        if n < 1:
            logger.warning(
                f"{type(self).__name__} built with n={n}; "
                "non-positive counts do not step past the anchor"
            )

    @abstractmethod
    def on_offset(self, point: DateLike) -> bool:
        """Check if a point sits exactly on the anchor."""
        pass


class NegatedOffset(Offset):
    """
    Arithmetic inverse of another offset.

    Forward application runs the wrapped offset backward and vice versa.
    Negating a NegatedOffset returns the wrapped offset itself.
    """

    def __init__(self, offset: Offset) -> None:
        self._offset = offset

    @property
    def offset(self) -> Offset:
        return self._offset

    def forward(self, point: DateLike) -> datetime:
        return self._offset.backward(point)

    def backward(self, point: DateLike) -> datetime:
        return self._offset.forward(point)

    def on_offset(self, point: DateLike) -> bool:
        return self._offset.on_offset(point)

    @property
    def freq_string(self) -> str:
        return "-" + self._offset.freq_string

    def __neg__(self) -> Offset:
        return self._offset

    def __eq__(self, other):
        if not isinstance(other, NegatedOffset):
            return NotImplemented
        return self._offset == other._offset

    def __hash__(self) -> int:
        return hash(("NegatedOffset", self._offset))

    def __repr__(self) -> str:
        return f"-{self._offset!r}"
