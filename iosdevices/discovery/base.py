# iosdevices/discovery/base.py
from typing import Sequence

from ..interfaces import ExplicitEnv
from ..process import Output, run_and_wait_for_output


class BaseDiscoverer:
    """Base class providing common utilities for discoverers."""
    def run_command(self, command: Sequence[str], env: ExplicitEnv) -> Output:
        """Runs `command` with the explicit environment only; raises `CommandError` on failure."""
        return run_and_wait_for_output(command, env.explicit_env())
