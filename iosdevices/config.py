# iosdevices/config.py
from dataclasses import dataclass, field
from typing import Tuple

# `--timeout 1` bounds the scan inside ios-deploy itself.
IOS_DEPLOY_DETECT_COMMAND: Tuple[str, ...] = (
    'ios-deploy', '--detect', '--timeout', '1', '--json', '--no-wifi'
)


@dataclass
class EnvConfig:
    """Names of the environment variables forwarded to child processes."""
    required_vars: Tuple[str, ...] = ('PATH', 'HOME')
    optional_vars: Tuple[str, ...] = field(
        default_factory=lambda: ('TERM', 'SSH_AUTH_SOCK', 'DEVELOPER_DIR')
    )

    def __post_init__(self):
        """Validate configuration parameters after initialization."""
        if 'PATH' not in self.required_vars:
            raise ValueError("required_vars must include PATH.")
        overlap = set(self.required_vars) & set(self.optional_vars)
        if overlap:
            raise ValueError(f"variables can't be both required and optional: {sorted(overlap)}")
