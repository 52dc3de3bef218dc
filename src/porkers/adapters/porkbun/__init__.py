"""Porkbun API operations.

One module per API area; every operation is a coroutine doing exactly one
request through a `RegistrarTransport`.
"""

from porkers.adapters.porkbun import general, glue, ssl

__all__ = ["general", "glue", "ssl"]
