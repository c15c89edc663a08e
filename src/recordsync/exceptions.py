"""Exception types raised by recordsync."""

from __future__ import annotations

from recordsync.json_types import JSONObject


class ContractViolation(RuntimeError):
    """Raised when a code path that should be unreachable is reached.

    The optional ``env`` payload records the values that led there. It is
    metadata only and never evaluated.
    """

    def __init__(self, message: str, **env: object):
        super().__init__(message)
        self.reason = message
        self.env = dict(env)

    @property
    def payload(self) -> JSONObject:
        return {
            "reason": self.reason,
            "env": {key: str(value) for key, value in sorted(self.env.items())},
        }


class HostContractError(ContractViolation):
    """The host handed the engine an invocation it cannot honor.

    Raised for a missing document root, a finding with no enclosing type
    declaration, or a malformed tree payload. These are not recoverable
    inside the engine.
    """
