"""Engine configuration.

Defaults come from environment variables so a host can tune batch execution
without code changes:

- ``TABFUZZ_WORKERS``: worker pool size (default 1, evaluate in-process)
- ``TABFUZZ_CHUNK_SIZE``: rows per work unit (default: split rows evenly
  across the workers)
- ``TABFUZZ_BACKEND``: ``"process"`` (default) or ``"thread"``
- ``TABFUZZ_DISABLE_PRUNING``: ``1``/``true``/``yes`` turns off length-bound
  pruning in best-match search

Arguments passed to the batch functions always win over the configuration.
"""

import os
from dataclasses import dataclass, replace
from typing import Literal, Optional

from tabfuzz.errors import ValidationError

Backend = Literal["process", "thread"]

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class EngineConfig:
    """Batch execution settings.

    Attributes:
        workers: Number of pool workers; 1 disables the pool.
        chunk_size: Rows per work unit, or None to split evenly across workers.
        backend: ``"process"`` for CPU parallelism, ``"thread"`` for a
            lightweight pool (useful when the caller already holds processes).
        prune: Enable length-bound pruning in best-match search.
    """

    workers: int = 1
    chunk_size: Optional[int] = None
    backend: Backend = "process"
    prune: bool = True

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValidationError(f"workers must be >= 1, got {self.workers}")
        if self.chunk_size is not None and self.chunk_size < 1:
            raise ValidationError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if self.backend not in ("process", "thread"):
            raise ValidationError(
                f"backend must be 'process' or 'thread', got {self.backend!r}"
            )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a configuration from ``TABFUZZ_*`` environment variables."""
        chunk = os.environ.get("TABFUZZ_CHUNK_SIZE", "").strip()
        return cls(
            workers=_int_env("TABFUZZ_WORKERS", 1),
            chunk_size=int(chunk) if chunk else None,
            backend=os.environ.get("TABFUZZ_BACKEND", "process").strip().lower(),
            prune=os.environ.get("TABFUZZ_DISABLE_PRUNING", "").lower() not in _TRUTHY,
        )

    def override(
        self,
        workers: Optional[int] = None,
        chunk_size: Optional[int] = None,
        backend: Optional[Backend] = None,
        prune: Optional[bool] = None,
    ) -> "EngineConfig":
        """Return a copy with the given (non-None) fields replaced."""
        changes = {
            name: value
            for name, value in (
                ("workers", workers),
                ("chunk_size", chunk_size),
                ("backend", backend),
                ("prune", prune),
            )
            if value is not None
        }
        return replace(self, **changes) if changes else self


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer, got {raw!r}") from None


class _ConfigState:
    """Encapsulates the active configuration to avoid global variables."""

    value: Optional[EngineConfig] = None


_state = _ConfigState()


def get_config() -> EngineConfig:
    """Return the active configuration, reading the environment on first use."""
    if _state.value is None:
        _state.value = EngineConfig.from_env()
    return _state.value


def set_config(config: Optional[EngineConfig] = None) -> None:
    """Replace the active configuration.

    Passing None drops the cached value so the environment is read again on
    the next call to :func:`get_config`.
    """
    _state.value = config


__all__ = ["Backend", "EngineConfig", "get_config", "set_config"]
