"""Interfaces of the core.

Contracts (Protocol) that concrete adapters implement, so the operation
functions depend on an abstraction rather than on httpx.
"""

from porkers.core.interfaces.transport import RegistrarTransport

__all__ = ["RegistrarTransport"]
