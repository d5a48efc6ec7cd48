"""
Service-level exceptions.

Validation failures are plain ValueError, the same as everywhere
else in the services. NotFoundError is a ValueError too, so callers
that only care about "the operation was rejected" can keep catching
ValueError, while the API layer can tell a missing record (404)
apart from bad input (400).
"""


class NotFoundError(ValueError):
    """A ledger, voucher or product id does not exist for this owner."""
