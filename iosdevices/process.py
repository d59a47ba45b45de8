# iosdevices/process.py
import logging
import subprocess
from dataclasses import dataclass
from typing import Dict, Sequence

from .errors import CommandError


@dataclass(frozen=True)
class Output:
    """Captured result of a finished command."""
    returncode: int
    stdout: bytes
    stderr: bytes

    def stdout_str(self) -> str:
        """Decodes stdout as UTF-8, raising `UnicodeDecodeError` on bad bytes."""
        return self.stdout.decode('utf-8')


def run_and_wait_for_output(command: Sequence[str], env: Dict[str, str]) -> Output:
    """
    Runs `command` to completion with exactly `env` as its environment,
    capturing stdout and stderr.

    Raises `CommandError` carrying the captured output on a non-zero exit.
    `OSError` from spawning (e.g. a missing executable) is not caught here.
    """
    command = list(command)
    logging.debug(f"Running command: {' '.join(command)}")
    kwargs = {'stdout': subprocess.PIPE, 'stderr': subprocess.PIPE, 'env': env}
    result = subprocess.run(command, **kwargs)
    output = Output(
        returncode=result.returncode,
        stdout=result.stdout or b'',
        stderr=result.stderr or b'',
    )
    if result.returncode != 0:
        logging.debug(f"Command '{command[0]}' exited with status {result.returncode}.")
        raise CommandError(command, result.returncode, output)
    return output
