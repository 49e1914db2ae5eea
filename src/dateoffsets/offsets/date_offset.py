"""
DateOffset: builds one concrete offset from an option map.

Example:
    >>> offset = DateOffset(weeks=3)
    >>> offset + datetime(2012, 5, 3)
    datetime.datetime(2012, 5, 24, 0, 0)

    >>> DateOffset(mins=2, n=5) + datetime(2011, 5, 3, 3, 5)
    datetime.datetime(2011, 5, 3, 3, 15)
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type, Union
import logging

from dateoffsets.core.datetime_ops import DateLike
from dateoffsets.exceptions import UnconfiguredOffsetError
from dateoffsets.offsets.base import Offset, RepeatingOffset
from dateoffsets.offsets.calendar_step import Month, Year
from dateoffsets.offsets.schema import OffsetConfig, load_offset_config
from dateoffsets.offsets.tick import Day, Hour, Minute, Second

logger = logging.getLogger(__name__)


OFFSET_TYPES: Dict[str, Type[RepeatingOffset]] = {
    "secs": Second,
    "mins": Minute,
    "hours": Hour,
    "days": Day,
    "months": Month,
    "years": Year,
}


def build_offset(config: OffsetConfig) -> Optional[RepeatingOffset]:
    """
    Build the concrete offset selected by a configuration.

    Args:
        config: Validated offset configuration

    Returns:
        The offset, or None if no duration key was given
    """
    key = config.active_key
    if key is None:
        return None

    if config.ignored_keys:
        logger.debug(f"DateOffset uses {key!r}, ignoring {config.ignored_keys}")

    if key == "weeks":
        return Day(7 * config.n * config.weeks)
    return OFFSET_TYPES[key](config.n * getattr(config, key))


class DateOffset(Offset):
    """
    Generic date offset configured by keyword options.

    Pass one of ``secs``, ``mins``, ``hours``, ``days``, ``weeks``,
    ``months`` or ``years`` with its count; ``n`` multiplies it. Weeks
    are 7-day ticks, not weekday-anchored offsets (see Week for those).
    """

    def __init__(self, **opts: Any) -> None:
        """
        Initialize offset.

        Raises:
            ValidationError: If an option is unknown or not an integer
        """
        self._offset = build_offset(OffsetConfig(**opts))

    @classmethod
    def from_config(cls, config: Union[OffsetConfig, Mapping[str, Any]]) -> "DateOffset":
        """Build a DateOffset from an OffsetConfig or a plain mapping."""
        if isinstance(config, OffsetConfig):
            return cls(**config.model_dump(exclude_none=True))
        return cls(**dict(config))

    @property
    def offset(self) -> Optional[RepeatingOffset]:
        """The concrete offset, or None if unconfigured."""
        return self._offset

    def _require_offset(self) -> RepeatingOffset:
        if self._offset is None:
            raise UnconfiguredOffsetError(
                "DateOffset has no duration; pass one of "
                "secs, mins, hours, days, weeks, months or years"
            )
        return self._offset

    def forward(self, point: DateLike) -> datetime:
        return self._require_offset().forward(point)

    def backward(self, point: DateLike) -> datetime:
        return self._require_offset().backward(point)

    def on_offset(self, point: DateLike) -> bool:
        return self._require_offset().on_offset(point)

    @property
    def freq_string(self) -> str:
        return self._require_offset().freq_string

    def __eq__(self, other):
        if isinstance(other, DateOffset):
            return self._offset == other._offset
        if isinstance(other, Offset):
            return self._offset == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._offset)

    def __repr__(self) -> str:
        return f"DateOffset({self._offset!r})"


def load_date_offset(path: Union[str, Path]) -> DateOffset:
    """
    Load a DateOffset from a JSON option file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If JSON doesn't match schema
    """
    return DateOffset.from_config(load_offset_config(path))
