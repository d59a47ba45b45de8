# iosdevices/target.py
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True, order=True)
class Target:
    """A supported Apple platform, identified by its Rust-style target triple."""
    triple: str
    name: str
    arch: str

    @staticmethod
    def for_arch(arch: str) -> Optional['Target']:
        """Looks up the target for an architecture as reported by `ios-deploy`."""
        arch = _ARCH_ALIASES.get(arch, arch)
        for target in _TARGETS.values():
            if target.arch == arch:
                return target
        return None


_TARGETS: Dict[str, Target] = {
    'aarch64': Target(triple='aarch64-apple-ios', name='aarch64', arch='arm64'),
    'x86_64': Target(triple='x86_64-apple-ios', name='x86_64', arch='x86_64'),
}

# A12 and later report the pointer-authentication variant of arm64.
_ARCH_ALIASES: Dict[str, str] = {'arm64e': 'arm64'}
