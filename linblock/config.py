"""Central configuration defaults for linblock."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CodeConfig:
    n: int = 7
    k: int = 4
    seed: int = 0
    max_dimension: int = 20  # translation table holds 2**k entries


DEFAULTS = CodeConfig()


def get_config() -> CodeConfig:
    """Return a copy of the default configuration."""

    return CodeConfig(**DEFAULTS.__dict__)
