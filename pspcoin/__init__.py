"""In-memory PSP-22 style fungible token ledger and its errors."""

__version__ = "0.1.0"
__all__ = ["errors", "token"]