"""Exceptions raised by the hypermedia engine.

Every error here is a local validation failure: bad input data or a
configuration gap. None of them is transient, so callers should map them to a
response rather than retry.
"""


class HypermediaError(Exception):
    """Base exception for all hypermedia engine errors."""

    def __init__(self, message: str, details: dict | None = None):
        """Initialize exception with message and optional details.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DuplicateRelationshipError(HypermediaError):
    """Raised when a resource already has a relationship with the given name."""

    pass


class UnknownRelationshipError(HypermediaError):
    """Raised when a relationship name does not exist on the resource."""

    pass


class MissingSelfLinkError(HypermediaError):
    """Raised when the self URL of a resource cannot be produced.

    Happens when the resource has no id, or when no path pattern is configured
    for its type.
    """

    pass


class MissingRelatedLinkError(HypermediaError):
    """Raised when no related pattern (and no fallback) covers a relationship."""

    pass


class MissingCollectionLinkError(HypermediaError):
    """Raised when no collection pattern is configured for a resource type."""

    pass


class IncludeNotResolvedError(HypermediaError):
    """Raised when an include names a relationship whose targets were not loaded.

    The renderers never fetch data, so anything to be included must already
    be present as resolved targets.
    """

    pass


class UnsupportedFormatError(HypermediaError):
    """Raised when no renderer is registered under the requested format name."""

    pass


class CardinalityError(HypermediaError):
    """Raised when a to-one relationship is given more than one target id."""

    pass


class ReservedAttributeError(HypermediaError):
    """Raised when an attribute name collides with a key the format reserves.

    HAL keeps `_links` and `_embedded` for itself at the top level of a
    document.
    """

    pass
