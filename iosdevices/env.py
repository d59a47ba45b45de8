# iosdevices/env.py
import logging
import os
from typing import Dict, Mapping, Optional

from .config import EnvConfig
from .errors import EnvError


class Env:
    """
    A snapshot of the allow-listed environment variables.

    Child processes receive only these variables, never the full environment
    of the calling process.
    """
    def __init__(self, variables: Dict[str, str]):
        self._vars = dict(variables)

    @classmethod
    def new(cls, config: Optional[EnvConfig] = None, environ: Optional[Mapping[str, str]] = None) -> 'Env':
        config = config or EnvConfig()
        environ = os.environ if environ is None else environ
        variables: Dict[str, str] = {}
        for name in config.required_vars:
            value = environ.get(name)
            if value is None:
                raise EnvError(name)
            variables[name] = value
        for name in config.optional_vars:
            value = environ.get(name)
            if value is not None:
                variables[name] = value
            else:
                logging.debug(f"Optional environment variable '{name}' is not set; not forwarding it.")
        return cls(variables)

    def explicit_env(self) -> Dict[str, str]:
        return dict(self._vars)

    def __repr__(self) -> str:
        return f"Env({sorted(self._vars)})"
