from typing import Optional


class DashboardException(Exception):
    """Base exception for all dashboard backend errors."""
    pass

class NotFoundException(DashboardException):
    """Raised when GitHub has no record for the requested natural key."""
    def __init__(self, resource: str, message: str = "Resource not found on GitHub."):
        self.resource = resource
        super().__init__(f"{message} ({resource})")

class UnconfiguredException(DashboardException):
    """Raised when an authenticated GitHub call is attempted without an access token."""
    def __init__(self, message: str = "GitHub token not configured."):
        super().__init__(message)

class UpstreamException(DashboardException):
    """Raised for non-2xx, non-404 GitHub responses and for network-level failures."""
    def __init__(self, status: Optional[int], message: str):
        self.status = status
        self.message = message
        super().__init__(f"GitHub API error ({status if status is not None else 'network'}): {message}")

class RateLimitExceededException(UpstreamException):
    """Raised when the GitHub REST rate limit is exhausted."""
    def __init__(self, reset_at: Optional[str], message: str = "GitHub API rate limit exceeded."):
        self.reset_at = reset_at
        super().__init__(403, f"{message} Resets at: {reset_at}")

class MalformedPayloadException(DashboardException):
    """Raised when a GitHub response body does not match the expected shape."""
    pass
