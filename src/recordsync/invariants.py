"""Invariant markers for recordsync."""

from __future__ import annotations

from typing import NoReturn, TypeVar

from recordsync.exceptions import ContractViolation, HostContractError

T = TypeVar("T")


def never(reason: str = "", **env: object) -> NoReturn:
    """Mark a code path as intentionally unreachable."""
    raise ContractViolation(reason or "never() marker reached", **env)


def require_not_none(value: T | None, *, reason: str = "", **env: object) -> T:
    """Return ``value`` or fail the host contract when it is missing."""
    if value is None:
        raise HostContractError(reason or "required value is None", **env)
    return value
