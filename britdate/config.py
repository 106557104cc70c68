"""Configuration management for britdate."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any

from .date_range import RangeStyle
from .region import Region

RANGE_FLAGS = ["show_start_time", "show_end_time", "use_short_form"]


@dataclass
class BritDateConfig:
    """Main configuration for britdate."""

    region_section: Dict[str, Any]
    range_section: Dict[str, Any]

    @property
    def region(self) -> Region:
        """Get the configured region."""
        return Region(
            locale=self.region_section["locale"],
            timezone=self.region_section["timezone"],
        )

    @property
    def range_style(self) -> RangeStyle:
        """Get the default style for date ranges."""
        return RangeStyle(**{flag: self.range_section[flag] for flag in RANGE_FLAGS})


def load_config(config_path: Path) -> BritDateConfig:
    """Load and validate configuration from JSON file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r") as f:
        data = json.load(f)

    return validate_config(data)


def validate_config(data: Dict[str, Any]) -> BritDateConfig:
    """Validate configuration data and return BritDateConfig instance."""
    if "region" not in data:
        raise ValueError("Missing required configuration section: region")

    data.setdefault("range", {})

    _validate_region_section(data["region"])
    _validate_range_section(data["range"])

    return BritDateConfig(region_section=data["region"], range_section=data["range"])


def _validate_region_section(region: Dict[str, Any]) -> None:
    """Validate region configuration section and set defaults."""
    if "timezone" not in region:
        raise ValueError("Missing required region field: timezone")
    if "locale" not in region:
        region["locale"] = "en-GB"

    Region(locale=region["locale"], timezone=region["timezone"])


def _validate_range_section(range_config: Dict[str, Any]) -> None:
    """Validate range configuration section and set defaults."""
    defaults = RangeStyle()
    for flag in RANGE_FLAGS:
        if flag not in range_config:
            range_config[flag] = getattr(defaults, flag)
        elif not isinstance(range_config[flag], bool):
            raise ValueError(f"range.{flag} must be true or false")


def create_default_config() -> Dict[str, Any]:
    """Create a default configuration template."""
    return {
        "region": {"locale": "en-GB", "timezone": "Europe/London"},
        "range": {
            "show_start_time": True,
            "show_end_time": True,
            "use_short_form": False,
        },
    }
