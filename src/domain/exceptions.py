"""
Domain exceptions - Error types raised across the account core.

Expected business outcomes are reported through Result envelopes, not
exceptions. Only infrastructure failures travel as exceptions, and the
account service catches them at its boundary.
"""


class AccountError(Exception):
    """Base class for account domain errors."""

    pass


class StorageError(AccountError):
    """Persistence collaborator failed (connectivity, constraint, timeout)."""

    pass
