"""Backend stand-ins and the process-wide backend registry"""

from typing import Optional

from opensds_fake.backend.base import Backend
from opensds_fake.backend.static import StaticBackend

# Used by request records that were not given a backend explicitly
_global_backend = None


def get_backend() -> Backend:
    """
    Get the process-wide backend, creating a StaticBackend on first use.

    Returns:
        Backend: The registered backend
    """
    global _global_backend
    if _global_backend is None:
        _global_backend = StaticBackend()
    return _global_backend


def set_backend(backend: Optional[Backend]):
    """Register the process-wide backend. None resets to the default."""
    global _global_backend
    _global_backend = backend


__all__ = ['Backend', 'StaticBackend', 'get_backend', 'set_backend']
