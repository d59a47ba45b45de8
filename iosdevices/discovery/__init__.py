# iosdevices/discovery/__init__.py
from typing import List

from ..device import Device
from ..interfaces import Discoverer, ExplicitEnv
from .ios_deploy import IosDeployDiscoverer


def list_devices(env: ExplicitEnv) -> List[Device]:
    """
    Returns the connected iOS devices, sorted and without duplicates.

    Raises `DetectionFailed`, `InvalidUtf8` or `ArchInvalid`; nothing is
    retried and no partial list is ever returned.
    """
    discoverer: Discoverer = IosDeployDiscoverer()
    return discoverer.discover(env)
