"""Pytest configuration and shared fixtures."""

import json
import subprocess
from typing import Any, Dict, List

import pytest

from iosdevices import Env

# ---------------------------------------------------------------------------
# Sample ios-deploy output
# ---------------------------------------------------------------------------


def device_event(identifier: str, arch: str = "arm64", name: str = "iPhone", model: str = "iPhone 12") -> Dict[str, Any]:
    return {
        "Event": "DeviceDetected",
        "Interface": "USB",
        "Device": {
            "DeviceIdentifier": identifier,
            "DeviceName": name,
            "modelArch": arch,
            "modelName": model,
        },
    }


def status_event(status: str = "Waiting for device") -> Dict[str, Any]:
    return {"Event": "Status", "Status": status}


def ios_deploy_output(*events: Dict[str, Any]) -> bytes:
    """Formats events the way `ios-deploy --json` does: concatenated, indented objects."""
    return "\n".join(json.dumps(event, indent=2) for event in events).encode("utf-8")


# ---------------------------------------------------------------------------
# Process fakes
# ---------------------------------------------------------------------------


class FakeRun:
    """Stands in for `subprocess.run` and records every call."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.returncode = 0
        self.stdout = b""
        self.stderr = b""

    def __call__(self, command, **kwargs):
        self.calls.append({"command": command, **kwargs})
        return subprocess.CompletedProcess(command, self.returncode, stdout=self.stdout, stderr=self.stderr)


@pytest.fixture
def fake_run(monkeypatch) -> FakeRun:
    fake = FakeRun()
    monkeypatch.setattr("iosdevices.process.subprocess.run", fake)
    return fake


@pytest.fixture
def env() -> Env:
    return Env({"PATH": "/usr/bin:/bin", "HOME": "/Users/dev"})
