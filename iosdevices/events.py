# iosdevices/events.py
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEVICE_DETECTED = 'DeviceDetected'


@dataclass(frozen=True)
class DeviceInfo:
    """The `Device` object of a `DeviceDetected` event."""
    device_identifier: str
    device_name: str
    model_arch: str
    model_name: str

    @classmethod
    def from_json(cls, obj: Dict[str, Any]) -> Optional['DeviceInfo']:
        """Returns `None` (and logs) unless all four fields are present as strings."""
        fields: Dict[str, str] = {}
        for attr, key in _DEVICE_INFO_KEYS:
            value = obj.get(key)
            if not isinstance(value, str):
                if key in obj:
                    logging.error(f"Device info field '{key}' isn't a string: {obj}")
                else:
                    logging.error(f"Device info is missing the '{key}' field: {obj}")
                return None
            fields[attr] = value
        return cls(**fields)


_DEVICE_INFO_KEYS = (
    ('device_identifier', 'DeviceIdentifier'),
    ('device_name', 'DeviceName'),
    ('model_arch', 'modelArch'),
    ('model_name', 'modelName'),
)


@dataclass(frozen=True)
class Event:
    """
    One JSON object from `ios-deploy --json` output.

    Only `DeviceDetected` events are understood; every other kind is kept
    as-is with its raw payload.
    """
    kind: str
    payload: Dict[str, Any] = field(default_factory=dict, compare=False)

    def device_info(self) -> Optional[DeviceInfo]:
        if self.kind != DEVICE_DETECTED:
            return None
        device = self.payload.get('Device')
        if not isinstance(device, dict):
            return None
        return DeviceInfo.from_json(device)

    @classmethod
    def parse_list(cls, text: str) -> List['Event']:
        """
        Splits concatenated JSON objects into events.

        `ios-deploy` writes one object after another rather than a JSON array.
        Chunks that don't decode are logged and skipped, and decoding resumes
        at the start of the next top-level object, never at an object nested
        inside the broken chunk.
        """
        decoder = json.JSONDecoder()
        events: List[Event] = []
        pos, end = 0, len(text)
        while True:
            pos = _skip_whitespace(text, pos)
            if pos >= end:
                break
            try:
                obj, next_pos = decoder.raw_decode(text, pos)
            except json.JSONDecodeError as e:
                logging.error(f"Failed to parse `ios-deploy` event: {e}")
                next_start = _next_object_start(text, pos)
                if next_start == -1:
                    break
                pos = next_start
                continue
            pos = next_pos
            if isinstance(obj, dict) and isinstance(obj.get('Event'), str):
                events.append(cls(kind=obj['Event'], payload=obj))
            else:
                logging.error(f"Ignoring `ios-deploy` output that isn't an event: {obj!r}")
        return events


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _next_object_start(text: str, pos: int) -> int:
    """
    Finds the `{` after `pos` that opens the next top-level object.

    Braces inside strings are ignored. A `{` at the start of a line always
    counts, since `ios-deploy` starts every object on a new line; this recovers
    from chunks whose braces never balance.
    """
    depth = 0
    in_string = escaped = False
    for i in range(pos, len(text)):
        ch = text[i]
        if ch == '\n':
            # JSON strings can't span lines
            in_string = escaped = False
            continue
        if in_string:
            if escaped:
                escaped = False
            elif ch == '\\':
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == '{':
            if i > pos and (depth == 0 or text[i - 1] == '\n'):
                return i
            depth += 1
        elif ch == '}':
            depth = max(depth - 1, 0)
    return -1
