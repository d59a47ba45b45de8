# iosdevices/discovery/ios_deploy.py
import logging
from typing import List, Set

from .base import BaseDiscoverer
from ..config import IOS_DEPLOY_DETECT_COMMAND
from ..device import Device
from ..errors import ArchInvalid, CommandError, DetectionFailed, InvalidUtf8
from ..events import Event
from ..interfaces import ExplicitEnv
from ..process import Output
from ..target import Target


def parse_device_list(output: Output) -> List[Device]:
    """
    Maps the `DeviceDetected` events in `output` to a sorted, duplicate-free
    list of devices. Any unknown architecture fails the whole list.
    """
    try:
        text = output.stdout_str()
    except UnicodeDecodeError as e:
        raise InvalidUtf8(e) from e

    devices: Set[Device] = set()
    for event in Event.parse_list(text):
        info = event.device_info()
        if info is None:
            continue
        target = Target.for_arch(info.model_arch)
        if target is None:
            raise ArchInvalid(info.model_arch)
        devices.add(Device(
            identifier=info.device_identifier,
            name=info.device_name,
            model_name=info.model_name,
            target=target,
        ))
    return sorted(devices)


class IosDeployDiscoverer(BaseDiscoverer):
    """Detects USB-connected iOS devices via `ios-deploy`."""
    command = IOS_DEPLOY_DETECT_COMMAND

    def discover(self, env: ExplicitEnv) -> List[Device]:
        try:
            output = self.run_command(self.command, env)
        except CommandError as err:
            if err.output is None:
                raise RuntimeError("developer error: `ios-deploy --detect` output wasn't collected") from err
            if not err.output.stdout and not err.output.stderr:
                logging.info(
                    "device detection returned a non-zero exit code, but stdout and stderr are both empty; "
                    "interpreting as a successful run with no devices connected"
                )
                return []
            raise DetectionFailed(err) from err

        devices = parse_device_list(output)
        logging.info(f"Discovered {len(devices)} connected iOS device(s).")
        return devices
