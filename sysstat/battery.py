"""Battery information from /sys/class/power_supply."""

from __future__ import annotations

from sysstat.lib import PathLike
from sysstat.power_supply import (
    POWER_SUPPLY_PATH,
    PowerSupplyInfo,
    power_supplies,
    power_supply,
)


class BatteryInfo(PowerSupplyInfo):
    """Power supply information with battery-specific accessors."""

    def status(self) -> str | None:
        """Charging status: Unknown, Charging, Discharging, Not charging or Full."""
        return self.key("POWER_SUPPLY_STATUS")

    def present(self) -> str | None:
        """"0" if the battery is absent, "1" if present."""
        return self.key("POWER_SUPPLY_PRESENT")

    def technology(self) -> str | None:
        """Battery technology, such as Li-ion or NiMH."""
        return self.key("POWER_SUPPLY_TECHNOLOGY")

    def cycle_count(self) -> str | None:
        """Number of full charge and discharge cycles."""
        return self.key("POWER_SUPPLY_CYCLE_COUNT")

    def voltage_min_design(self) -> str | None:
        """Minimum design voltage."""
        return self.key("POWER_SUPPLY_VOLTAGE_MIN_DESIGN")

    def voltage_now(self) -> str | None:
        """Instant voltage reading in microvolts."""
        return self.key("POWER_SUPPLY_VOLTAGE_NOW")

    def power_now(self) -> str | None:
        """Current power draw."""
        return self.key("POWER_SUPPLY_POWER_NOW")

    def energy_full_design(self) -> str | None:
        """Design energy when full."""
        return self.key("POWER_SUPPLY_ENERGY_FULL_DESIGN")

    def energy_full(self) -> str | None:
        """Energy when full."""
        return self.key("POWER_SUPPLY_ENERGY_FULL")

    def energy_now(self) -> str | None:
        """Current energy."""
        return self.key("POWER_SUPPLY_ENERGY_NOW")

    def capacity(self) -> str | None:
        """Capacity in percent, 0 to 100."""
        return self.key("POWER_SUPPLY_CAPACITY")

    def capacity_level(self) -> str | None:
        """Coarse capacity: Unknown, Critical, Low, Normal, High or Full."""
        return self.key("POWER_SUPPLY_CAPACITY_LEVEL")


def battery(basepath: str, root: PathLike = POWER_SUPPLY_PATH) -> BatteryInfo:
    """Read the battery at ``root``/``basepath``."""
    return BatteryInfo(power_supply(basepath, root).info)


def batteries(root: PathLike = POWER_SUPPLY_PATH) -> list[BatteryInfo]:
    """Read every battery (devices named BAT*) under ``root``."""
    return [BatteryInfo(info.info) for info in power_supplies("BAT*", root)]