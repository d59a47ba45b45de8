# iosdevices/interfaces.py
from typing import Protocol, Dict, List

from .device import Device


class ExplicitEnv(Protocol):
    """Interface for anything that can produce the environment for a child process."""
    def explicit_env(self) -> Dict[str, str]:
        ...


class Discoverer(Protocol):
    """Interface for any class that discovers connected devices."""
    def discover(self, env: ExplicitEnv) -> List[Device]:
        ...
