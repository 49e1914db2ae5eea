"""
Pydantic schema for DateOffset configuration.

Validates the option map a DateOffset is built from and resolves which
duration key is in effect.
"""

from pathlib import Path
from typing import List, Optional, Union
import json

from pydantic import BaseModel, ConfigDict, Field


# Duration keys in the order they are checked; the first one present wins.
# ``weeks`` is resolved separately and overrides all of them.
DURATION_PRIORITY = ("secs", "mins", "hours", "days", "months", "years")


class OffsetConfig(BaseModel):
    """
    Option map for a DateOffset.

    At most one duration key is expected. When several are given the
    first in DURATION_PRIORITY is used (``weeks`` beats all of them) and
    the rest are ignored.
    """

    model_config = ConfigDict(extra="forbid")

    secs: Optional[int] = Field(default=None, description="Seconds per step")
    mins: Optional[int] = Field(default=None, description="Minutes per step")
    hours: Optional[int] = Field(default=None, description="Hours per step")
    days: Optional[int] = Field(default=None, description="Days per step")
    weeks: Optional[int] = Field(default=None, description="Weeks per step (7-day ticks)")
    months: Optional[int] = Field(default=None, description="Calendar months per step")
    years: Optional[int] = Field(default=None, description="Calendar years per step")
    n: int = Field(default=1, description="Number of times the step is applied")

    @property
    def present_keys(self) -> List[str]:
        """Duration keys that were supplied, weeks first."""
        keys = ["weeks"] if self.weeks is not None else []
        keys.extend(key for key in DURATION_PRIORITY if getattr(self, key) is not None)
        return keys

    @property
    def active_key(self) -> Optional[str]:
        """Duration key the offset is built from, or None if there is none."""
        keys = self.present_keys
        return keys[0] if keys else None

    @property
    def ignored_keys(self) -> List[str]:
        """Duration keys that were supplied but lost to the priority order."""
        return self.present_keys[1:]


def load_offset_config(path: Union[str, Path]) -> OffsetConfig:
    """
    Load and validate an offset configuration from a JSON file.

    Args:
        path: Path to JSON file

    Returns:
        Validated OffsetConfig object

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If JSON doesn't match schema
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Offset config not found: {path}")

    with open(filepath, "r") as f:
        data = json.load(f)

    return OffsetConfig(**data)


def validate_offset_config(data: dict) -> OffsetConfig:
    """Validate an offset configuration dictionary."""
    return OffsetConfig(**data)
