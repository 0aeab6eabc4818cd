"""Parity backend discovery and selection.

Scans gray_code.core.bits for functions named parity_<name> and collects
them into a dict keyed by <name>. The active backend comes from
GRAY_CODE_PARITY (see gray_code.core.config) the first time it is needed,
and can be switched at runtime with use().
"""

import logging
from collections.abc import Callable

from gray_code.core import bits
from gray_code.core.config import DEFAULT_PARITY, load_config
from gray_code.core.types import Width

logger = logging.getLogger(__name__)

ParityFn = Callable[[int, Width], bool]

_PREFIX = 'parity_'

_registry: dict[str, ParityFn] = {}
_active: ParityFn | None = None


def discover() -> dict[str, ParityFn]:
    """Collect the parity backends and return the registry."""
    if _registry:
        return _registry

    for attr in dir(bits):
        if not attr.startswith(_PREFIX):
            continue
        fn = getattr(bits, attr)
        if callable(fn):
            _registry[attr[len(_PREFIX) :]] = fn

    return _registry


def get(name: str) -> ParityFn:
    """Get a parity backend by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown parity backend: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_backends() -> dict[str, ParityFn]:
    """Return all registered parity backends."""
    return discover()


def use(name: str) -> None:
    """Make `name` the backend behind is_odd/is_even and increment/decrement."""
    global _active
    _active = get(name)
    logger.debug('parity backend set to %s', name)


def reset() -> None:
    """Forget the selected backend; the next active() call re-reads the environment."""
    global _active
    _active = None


def active() -> ParityFn:
    """Return the selected backend, loading it from the environment on first use."""
    global _active
    if _active is None:
        name = load_config().parity
        if name not in discover():
            logger.warning(
                'GRAY_CODE_PARITY=%r is not a parity backend (available: %s), using %s',
                name,
                ', '.join(sorted(discover())),
                DEFAULT_PARITY,
            )
            name = DEFAULT_PARITY
        _active = get(name)
        logger.debug('parity backend %s loaded from environment', name)
    return _active
