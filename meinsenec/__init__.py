"""Python library for the mein-senec.de cloud API."""

from .exceptions import (
    MeinSenecAuthenticationError,
    MeinSenecConnectionError,
    MeinSenecDataError,
    MeinSenecError,
)
from .meinsenec import MeinSenec
from .models import Dashboard, Device, Measurement, MetricGroup, Session

__all__ = [
    "Dashboard",
    "Device",
    "Measurement",
    "MeinSenec",
    "MeinSenecAuthenticationError",
    "MeinSenecConnectionError",
    "MeinSenecDataError",
    "MeinSenecError",
    "MetricGroup",
    "Session",
]
