"""Environment configuration for gray-code.

Variables (OS environment only, read at call time):
  GRAY_CODE_PARITY   parity backend name: fold, bit_count or numpy
                     (default: bit_count)

Values are returned as found; gray_code.registry validates the backend name
against what it actually discovered.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

PARITY_ENV_VAR = 'GRAY_CODE_PARITY'
DEFAULT_PARITY = 'bit_count'


@dataclass(frozen=True)
class Config:
    parity: str = DEFAULT_PARITY


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Build a Config from the environment. Blank values count as unset."""
    env = os.environ if environ is None else environ
    parity = env.get(PARITY_ENV_VAR, '').strip().lower()
    return Config(parity=parity or DEFAULT_PARITY)
