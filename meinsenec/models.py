"""Data models for mein-senec.de library."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .const import DEVICE_MAP, METRIC_MAP


@dataclass(frozen=True)
class Session:
    """Authorization state produced by a login sequence."""

    token: str = ""
    device_id: str = ""

    @property
    def enabled(self) -> bool:
        """Return True when both token and device id are known."""
        return bool(self.token and self.device_id)


@dataclass(frozen=True)
class Device:
    """One installation registered under the account."""

    id: str | None = None
    control_unit_number: str | None = None
    housing_number: str | None = None
    street: str | None = None
    house_number: str | None = None
    postal_code: str | None = None
    city: str | None = None
    timezone: str | None = None
    system_type: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Device:
        """Build a device from an element of the device list."""
        return cls(**{attr: data.get(key) for key, attr in DEVICE_MAP.items()})

    def describe(self) -> str:
        """Return a one-line description for operator diagnostics."""
        return (
            f"Id: {self.id}, control device id: {self.control_unit_number}, "
            f"housing id: {self.housing_number} address: {self.street} {self.house_number}, "
            f"{self.postal_code} {self.city}, timezone: {self.timezone}, "
            f"system type: {self.system_type}"
        )


@dataclass(frozen=True)
class Measurement:
    """A single metric value with its unit."""

    value: float = 0.0
    unit: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Measurement:
        value = data.get("wert")
        unit = data.get("einheit")
        return cls(
            value=float(value) if value is not None else 0.0,
            unit=str(unit) if unit is not None else "",
        )


@dataclass(frozen=True)
class MetricGroup:
    """Named metrics of one dashboard section (current or today)."""

    generation: Measurement | None = None
    consumption: Measurement | None = None
    grid_feed_in: Measurement | None = None
    grid_draw: Measurement | None = None
    battery_charge: Measurement | None = None
    battery_discharge: Measurement | None = None
    battery_level: Measurement | None = None
    self_sufficiency: Measurement | None = None
    wallbox: Measurement | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> MetricGroup:
        if not data:
            return cls()
        return cls(
            **{
                attr: Measurement.from_dict(data[key])
                for key, attr in METRIC_MAP.items()
                if data.get(key) is not None
            }
        )


@dataclass(frozen=True)
class Dashboard:
    """Point-in-time snapshot of the installation dashboard."""

    current: MetricGroup = field(default_factory=MetricGroup)
    today: MetricGroup = field(default_factory=MetricGroup)
    timestamp: str = ""
    electric_vehicle_connected: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Dashboard:
        """Build a snapshot from the dashboard payload."""
        timestamp = data.get("zeitstempel")
        ev_connected = data.get("electricVehicleConnected")
        return cls(
            current=MetricGroup.from_dict(data.get("aktuell")),
            today=MetricGroup.from_dict(data.get("heute")),
            timestamp=str(timestamp) if timestamp is not None else "",
            electric_vehicle_connected=ev_connected if isinstance(ev_connected, bool) else False,
        )
