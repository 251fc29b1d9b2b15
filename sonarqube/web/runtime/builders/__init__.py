"""Request builders and pagination."""

from .base import RequestBuilder
from .paginated import PageIterator, PaginatedBuilder
from .rules import AtLeastOne, InRange, Length, MutuallyExclusive, OneOf, Required, Rule, validate

__all__ = [
    "RequestBuilder",
    "PaginatedBuilder",
    "PageIterator",
    "Rule",
    "Required",
    "AtLeastOne",
    "MutuallyExclusive",
    "InRange",
    "OneOf",
    "Length",
    "validate",
]
