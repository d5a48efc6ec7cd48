"""
Shared request dependencies.
"""

from fastapi import Header

from erp_accounting.config import get_settings


def get_owner_id(x_owner_id: str | None = Header(default=None)) -> str:
    """
    Owner whose books the request works on.

    Taken from the X-Owner-Id header; requests without one use
    DEFAULT_OWNER_ID.
    """
    return x_owner_id or get_settings().DEFAULT_OWNER_ID
