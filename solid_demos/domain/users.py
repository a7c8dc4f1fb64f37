"""User-fetching services and the failure contract every implementation honours"""

import asyncio
import logging
from typing import Protocol, runtime_checkable

from solid_demos.domain.exceptions import APIError, InvalidResponseError
from solid_demos.infrastructure.observability.metrics import record_api_error


@runtime_checkable
class UserService(Protocol):
    """Fetches the current user.

    Implementations suspend at least once, may only fail with an APIError
    kind, and must report that error themselves instead of raising it.
    Callers can therefore swap a mock for a network-backed service freely.
    """

    async def fetch_user(self) -> None:
        ...


def report_api_error(error: APIError) -> None:
    """Print and log a caught user service error"""
    print(f"Error: {error}")
    record_api_error(error.kind)
    logging.error(f"User service error: {error}", extra={"error_kind": error.kind})


class MockUserService:
    """Stand-in service that always fails with invalidResponse"""

    async def fetch_user(self) -> None:
        await asyncio.sleep(0)
        try:
            raise InvalidResponseError()
        except APIError as e:
            report_api_error(e)
