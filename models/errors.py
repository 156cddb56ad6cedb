"""
Error taxonomy shared by the service and API layers.

Not-found point lookups and failed logins are ordinary outcomes and are
returned as None; everything below is raised.
"""


class CookbookError(Exception):
    """Base class for all Chefs Table errors."""


class InvalidArgumentError(CookbookError):
    """Paging or sorting input that cannot be used to build a query."""


class ConflictError(CookbookError):
    """A unique value (such as a chef username) is already taken."""


class UnauthenticatedError(CookbookError):
    """A session token is missing, unknown, or has been logged out."""


class StorageError(CookbookError):
    """The row store is unreachable or rejected a statement."""
