"""Custom exceptions for the Top Issues reporter."""


class TopIssuesError(Exception):
    """Base class for every error raised by the reporter."""


class ConfigurationError(TopIssuesError):
    """Raised when a required input is missing or malformed."""


class TransportError(TopIssuesError):
    """Raised when listing issues from the GitHub API fails."""


class GitHubRateLimitExceeded(TransportError):
    """Raised when the GitHub API rate limit has been exceeded."""


class PublishError(TopIssuesError):
    """Raised when the tracking issue body cannot be updated."""
