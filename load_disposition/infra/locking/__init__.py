"""잠금 인프라 (LockProvider 구현)."""

from load_disposition.infra.locking.keyed_lock_provider import (
    KeyedLockProvider,
)

__all__ = ["KeyedLockProvider"]
