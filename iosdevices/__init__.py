# iosdevices/__init__.py

# Expose the main entry point for easy importing
from .discovery import list_devices

# Expose key data classes and errors as well.
from .config import EnvConfig
from .device import Device
from .env import Env
from .target import Target
from .errors import (
    IosDevicesError, EnvError, CommandError,
    DeviceListError, DetectionFailed, InvalidUtf8, ArchInvalid,
)
