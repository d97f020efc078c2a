"""Custom exceptions for the Linear client."""


class LinearError(Exception):
    """Base exception for Linear API errors."""


class LinearRequestError(LinearError):
    """Request could not be completed (network failure, timeout, bad status)."""


class LinearAuthError(LinearRequestError):
    """API key was rejected by Linear."""


class LinearResponseError(LinearError):
    """Linear returned GraphQL errors or a payload we cannot read."""
