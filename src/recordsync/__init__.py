"""recordsync package root."""

from recordsync.exceptions import ContractViolation, HostContractError
from recordsync.invariants import never

__all__ = ["__version__", "ContractViolation", "HostContractError", "never"]

__version__ = "0.1.0"
