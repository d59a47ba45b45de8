# iosdevices/reporting.py
from dataclasses import dataclass
from enum import Enum


class Label(Enum):
    ERROR = "error"


@dataclass(frozen=True)
class Report:
    """A user-facing summary of a failure: a headline and its details."""
    label: Label
    msg: str
    details: str

    @classmethod
    def error(cls, msg: str, details: str) -> 'Report':
        return cls(Label.ERROR, msg, details)

    def format(self) -> str:
        return f"{self.label.value}: {self.msg}\n    {self.details}"
