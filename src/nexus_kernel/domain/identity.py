"""
Identity Generation
Supplier of globally unique identifiers for entities and domain events
"""
from __future__ import annotations

import itertools
import threading
import uuid
from typing import Callable, Protocol, runtime_checkable
from uuid import UUID


@runtime_checkable
class IdentityGenerator(Protocol):
    """Anything that can hand out fresh, never-repeating identifiers."""

    def generate(self) -> UUID:
        ...


class UUIDIdentityGenerator:
    """
    Random (version 4) UUID generator.

    When the OS entropy source is unavailable, falls back to time-based
    (version 1) UUIDs. The fallback draws its clock sequence from a
    process-local counter so two fallback ids minted in the same clock tick
    still differ.
    """

    def __init__(self) -> None:
        self._fallback_seq = itertools.count()
        self._fallback_lock = threading.Lock()

    def generate(self) -> UUID:
        try:
            return uuid.uuid4()
        except NotImplementedError:
            return self._fallback()

    def _fallback(self) -> UUID:
        with self._fallback_lock:
            seq = next(self._fallback_seq) & 0x3FFF
        return uuid.uuid1(clock_seq=seq)


class IdentityService:
    """
    Lazily builds a single generator and delegates to it.

    The generator is created at most once, under a lock; every caller,
    concurrent or not, observes the same instance afterwards.

    Args:
        factory: Builds the underlying generator on first use
    """

    def __init__(self, factory: Callable[[], IdentityGenerator] = UUIDIdentityGenerator) -> None:
        self._factory = factory
        self._generator: IdentityGenerator | None = None
        self._lock = threading.Lock()

    @property
    def generator(self) -> IdentityGenerator:
        generator = self._generator
        if generator is None:
            with self._lock:
                if self._generator is None:
                    self._generator = self._factory()
                generator = self._generator
        return generator

    def generate(self) -> UUID:
        return self.generator.generate()


_default_service: IdentityService | None = None
_default_lock = threading.Lock()


def get_identity_service() -> IdentityService:
    """Return the process-wide default identity service, creating it once."""
    global _default_service
    if _default_service is None:
        with _default_lock:
            if _default_service is None:
                _default_service = IdentityService()
    return _default_service
