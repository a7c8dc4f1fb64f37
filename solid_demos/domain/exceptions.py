"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class APIError(DomainException):
    """User service call failed. Closed set: one subclass per failure kind."""

    kind = "apiError"

    def __str__(self) -> str:
        return self.kind


class InvalidURLError(APIError):
    """Service URL could not be used to build a request"""

    kind = "invalidURL"


class InvalidResponseError(APIError):
    """Response was missing, undecodable, or did not match the expected payload"""

    kind = "invalidResponse"


class InvalidStatusCodeError(APIError):
    """Service answered with an error status code"""

    kind = "invalidStatusCode"
