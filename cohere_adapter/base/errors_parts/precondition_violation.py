"""
Fatal precondition failure raised for programmer/configuration errors.

Deliberately not a :class:`ProviderError`: a handler written for vendor or
transport failures must not swallow a malformed tool schema or an
unencodable credential. These abort the current operation and should be fixed
at the call site.
"""
from __future__ import annotations


class PreconditionViolation(Exception):
    """A caller-supplied value violates a structural precondition.

    Attributes:
        message: Description of the violated precondition.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


__all__ = ["PreconditionViolation"]
