# iosdevices/device.py
from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple

from .target import Target


@total_ordering
@dataclass(frozen=True)
class Device:
    """A connected device that maps onto a supported target."""
    identifier: str
    name: str
    model_name: str
    target: Target

    @property
    def sort_key(self) -> Tuple[str, str, str, str]:
        return (self.identifier, self.name, self.model_name, self.target.triple)

    def __lt__(self, other: 'Device') -> bool:
        if not isinstance(other, Device):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"{self.name} ({self.model_name}, {self.target.name}) [{self.identifier}]"
