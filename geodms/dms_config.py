"""
Formatting configuration for DMS output.

A ``DmsFormat`` bundles the two knobs every formatter accepts: the output
style (degrees, degrees/minutes, or degrees/minutes/seconds) and the number
of decimal places on the last component. It can be built directly, from a
dict, or from a YAML file with a top-level ``dms`` section.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class DmsStyle(Enum):
    """Output style for formatted angles."""

    D = "d"
    DM = "dm"
    DMS = "dms"

    @classmethod
    def parse(cls, value: DmsStyle | str | None) -> DmsStyle:
        """Resolve a style name, falling back to DMS for anything unknown.

        Args:
            value: A DmsStyle, one of "d", "dm", "dms", or None.

        Returns:
            Matching DmsStyle; DMS when value is None or unrecognised.
        """
        if isinstance(value, DmsStyle):
            return value
        if value is None:
            return cls.DMS
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"Unknown DMS style {value!r}, using 'dms'")
            return cls.DMS


# Decimal places used for the last component when none are requested
DEFAULT_DECIMAL_PLACES = {
    DmsStyle.D: 4,
    DmsStyle.DM: 2,
    DmsStyle.DMS: 0,
}


@dataclass(frozen=True)
class DmsFormat:
    """Immutable formatting configuration.

    Attributes:
        style: Output style. Default is DMS.
        decimal_places: Decimal places for the last component (degrees for
            D, minutes for DM, seconds for DMS). None selects the style
            default: 4 for D, 2 for DM, 0 for DMS.
    """

    style: DmsStyle = DmsStyle.DMS
    decimal_places: int | None = None

    def __post_init__(self) -> None:
        """Validate decimal places."""
        if self.decimal_places is None:
            return
        if isinstance(self.decimal_places, bool) or not isinstance(self.decimal_places, int):
            raise ValueError(
                f"decimal_places must be an integer, got {self.decimal_places!r}"
            )
        if self.decimal_places < 0:
            raise ValueError(
                f"decimal_places must be non-negative, got {self.decimal_places}"
            )

    @property
    def places(self) -> int:
        """Decimal places actually used, with the style default applied."""
        if self.decimal_places is None:
            return DEFAULT_DECIMAL_PLACES[self.style]
        return self.decimal_places

    @classmethod
    def create(
        cls,
        style: DmsStyle | str | None = DmsStyle.DMS,
        decimal_places: int | None = None,
    ) -> DmsFormat:
        """Create a format from a style name or enum.

        Args:
            style: DmsStyle or style string; unknown strings mean DMS.
            decimal_places: Decimal places, or None for the style default.

        Returns:
            New DmsFormat instance.

        Raises:
            ValueError: If decimal_places is negative or not an integer.
        """
        return cls(style=DmsStyle.parse(style), decimal_places=decimal_places)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DmsFormat:
        """Create a format from a dictionary.

        Both keys are optional:
            style: "d", "dm" or "dms"
            decimal_places: non-negative integer

        Raises:
            ValueError: If data is not a mapping or decimal_places is invalid.
        """
        if not isinstance(data, dict):
            raise ValueError(f"DMS configuration must be a mapping, got {type(data).__name__}")

        unknown = set(data) - {"style", "decimal_places"}
        for key in sorted(unknown):
            logger.warning(f"Ignoring unknown DMS configuration key: {key}")

        return cls.create(data.get("style"), data.get("decimal_places"))

    @classmethod
    def from_yaml(cls, path: str | Path) -> DmsFormat:
        """Load a format from a YAML file.

        Expected structure:
            dms:
              style: dm
              decimal_places: 3

        Args:
            path: Path to YAML configuration file

        Returns:
            DmsFormat loaded from the 'dms' section

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is malformed, empty, or has no 'dms' section
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not data:
            raise ValueError(f"Configuration file is empty: {path}")

        if not isinstance(data, dict) or 'dms' not in data:
            raise ValueError(
                f"Configuration file missing 'dms' section: {path}\n"
                f"Expected structure: dms:\n  style: ...\n  decimal_places: ..."
            )

        fmt = cls.from_dict(data['dms'] or {})
        logger.info(f"Loaded DMS format from {config_path}: style={fmt.style.value}, places={fmt.places}")
        return fmt

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary accepted by from_dict()."""
        return {
            "style": self.style.value,
            "decimal_places": self.decimal_places,
        }


DEFAULT_FORMAT = DmsFormat()
