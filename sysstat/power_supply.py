"""Power supply device information from /sys/class/power_supply."""

from __future__ import annotations

import glob
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from sysstat.lib import PathLike, scan_file

POWER_SUPPLY_PATH = "/sys/class/power_supply"


class MissingUeventKeyError(LookupError):
    """Raised when requested uevent keys are absent."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            f"{', '.join(self.missing)}: missing PowerSupplyInfo uevent key(s)"
        )


@dataclass(frozen=True)
class PowerSupplyInfo:
    """Key/value pairs read from a power supply's uevent file."""

    info: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "info", MappingProxyType(dict(self.info)))

    def key(self, key: str) -> str | None:
        """Return the value of uevent ``key``, or None if it is absent."""
        return self.info.get(key)

    def populate(self, keys: Iterable[str]) -> dict[str, str]:
        """Return a mapping of each requested key to its value.

        Raises MissingUeventKeyError naming every key that is absent.
        """
        keys = list(keys)
        missing = [k for k in keys if k not in self.info]
        if missing:
            raise MissingUeventKeyError(missing)
        return {k: self.info[k] for k in keys}

    def manufacturer(self) -> str | None:
        """Name of the device manufacturer."""
        return self.key("POWER_SUPPLY_MANUFACTURER")

    def model_name(self) -> str | None:
        """Name of the device model."""
        return self.key("POWER_SUPPLY_MODEL_NAME")

    def serial_number(self) -> str | None:
        """Serial number of the device."""
        return self.key("POWER_SUPPLY_SERIAL_NUMBER")

    def type(self) -> str | None:
        """Main type of the supply: Battery, UPS, Mains, USB or Wireless."""
        return self.key("POWER_SUPPLY_TYPE")

    def name(self) -> str | None:
        """Name of the device."""
        return self.key("POWER_SUPPLY_NAME")


def _read_uevent(path: PathLike) -> dict[str, str]:
    values: dict[str, str] = {}

    def parse(line: str) -> bool:
        fields = line.split("=")
        if len(fields) != 2:
            raise ValueError("invalid uevent format")
        values[fields[0]] = fields[1]
        return True

    scan_file(path, parse)
    return values


def _glob_names(root: PathLike, pattern: str) -> list[str]:
    return [
        os.path.basename(path)
        for path in sorted(glob.glob(os.path.join(os.fspath(root), pattern)))
    ]


def power_supply(basepath: str, root: PathLike = POWER_SUPPLY_PATH) -> PowerSupplyInfo:
    """Read the uevent information of the device at ``root``/``basepath``."""
    return PowerSupplyInfo(_read_uevent(os.path.join(os.fspath(root), basepath, "uevent")))


def power_supplies(
    pattern: str = "*", root: PathLike = POWER_SUPPLY_PATH
) -> list[PowerSupplyInfo]:
    """Read every device under ``root`` whose name matches ``pattern``."""
    return [power_supply(name, root) for name in _glob_names(root, pattern)]