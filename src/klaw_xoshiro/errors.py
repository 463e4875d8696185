"""Engine error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'DomainError',
    'FormatError',
    'MalformedState',
    'ShortSeedSequence',
]


# --- Serialization Errors ---


class MalformedState(msgspec.Struct, frozen=True, gc=False):
    """State text is not 4 in-range decimal words - struct variant for Result[T, MalformedState]."""

    reason: str
    bits: int
    token: str | None = None

    def to_exception(self) -> FormatError:
        """Convert to exception for raise-based code."""
        return FormatError(self.reason, self.bits, self.token)


class FormatError(ValueError):
    """State text is not 4 in-range decimal words - exception variant."""

    def __init__(self, reason: str, bits: int, token: str | None = None) -> None:
        self.reason = reason
        self.bits = bits
        self.token = token
        msg = f'Malformed {bits}-bit engine state: {reason}'
        if token is not None:
            msg = f'{msg} ({token!r})'
        super().__init__(msg)

    def to_struct(self) -> MalformedState:
        """Convert to struct for Result-based code."""
        return MalformedState(self.reason, self.bits, self.token)


# --- Seeding Errors ---


class ShortSeedSequence(msgspec.Struct, frozen=True, gc=False):
    """Seed sequence could not fill the state - struct variant."""

    requested: int
    received: int
    reason: str | None = None

    def to_exception(self) -> DomainError:
        """Convert to exception for raise-based code."""
        return DomainError(self.requested, self.received, self.reason)


class DomainError(ValueError):
    """Seed sequence could not fill the state - exception variant."""

    def __init__(self, requested: int, received: int, reason: str | None = None) -> None:
        self.requested = requested
        self.received = received
        self.reason = reason
        msg = f'Seed sequence supplied {received} of {requested} words'
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)

    def to_struct(self) -> ShortSeedSequence:
        """Convert to struct for Result-based code."""
        return ShortSeedSequence(self.requested, self.received, self.reason)
