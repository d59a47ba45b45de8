#!filepath: ios_devices.py
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from iosdevices import Device, Env, EnvError, DeviceListError, list_devices
from iosdevices.reporting import Report


def render_devices(devices: List[Device], as_json: bool) -> str:
    if as_json:
        return json.dumps([
            {
                'identifier': device.identifier,
                'name': device.name,
                'model_name': device.model_name,
                'target': device.target.name,
                'arch': device.target.arch,
            }
            for device in devices
        ], indent=2)
    if not devices:
        return "No connected iOS devices found."
    return '\n'.join(str(device) for device in devices)


# --- Main Application Controller ---
def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point. Lists the iOS devices connected over USB and prints
    them, or reports why they couldn't be listed.
    """
    parser = argparse.ArgumentParser(
        description="List iOS devices connected over USB (requires ios-deploy).",
    )
    parser.add_argument("--json", action="store_true", help="Print the device list as JSON.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    level = 'DEBUG' if args.verbose else os.environ.get("LOGLEVEL", "WARNING")
    logging.basicConfig(level=level, format='%(asctime)s - [%(levelname)s] - %(message)s', datefmt='%H:%M:%S')

    try:
        env = Env.new()
    except EnvError as e:
        logging.critical(f"FATAL ERROR: {e}")
        return 1

    try:
        devices = list_devices(env)
    except DeviceListError as e:
        print(e.report().format(), file=sys.stderr)
        return 1
    except OSError as e:
        logging.critical(f"FATAL ERROR: {e}")
        if isinstance(e, FileNotFoundError):
            details = "`ios-deploy` wasn't found. Install it with `brew install ios-deploy` and ensure it's in your PATH."
        else:
            details = f"Failed to run `ios-deploy`: {e}"
        print(Report.error(DeviceListError.msg, details).format(), file=sys.stderr)
        return 1

    print(render_devices(devices, args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
