from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class InputParseError(DomainError):
    """A prompted value could not be parsed as its expected type."""


class PriceFeedError(DomainError):
    """USD prices could not be obtained for the requested assets."""


class InvalidSelectionError(DomainError):
    """Chain selection outside the supported set."""
