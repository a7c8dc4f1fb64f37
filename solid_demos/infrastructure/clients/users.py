"""Network-backed user service, substitutable for MockUserService"""

import asyncio
import logging
import httpx
from pydantic import ValidationError

from solid_demos.config import settings
from solid_demos.domain.exceptions import (
    APIError,
    InvalidResponseError,
    InvalidStatusCodeError,
    InvalidURLError,
)
from solid_demos.domain.users import report_api_error
from solid_demos.infrastructure.clients.schemas import UserPayload


class HttpUserService:
    """Client for an external user API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url if base_url is not None else settings.user_service_base_url
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.transport = transport

    async def fetch_user(self) -> None:
        # Suspend before any failure path, like every other UserService
        await asyncio.sleep(0)
        try:
            user = await self.get_user()
        except APIError as e:
            report_api_error(e)
            return
        logging.info("Fetched user", extra={"user_id": user.id})

    async def get_user(self) -> UserPayload:
        """
        Fetch the current user.

        Raises:
            InvalidURLError: base_url does not form an absolute http(s) URL
            InvalidStatusCodeError: API answered with a 4xx/5xx status
            InvalidResponseError: No usable response or a malformed body
        """
        try:
            url = httpx.URL(f"{self.base_url.rstrip('/')}/user")
        except httpx.InvalidURL as e:
            raise InvalidURLError() from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError()

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
                return UserPayload.model_validate(response.json())

            except httpx.HTTPStatusError as e:
                raise InvalidStatusCodeError() from e
            except httpx.RequestError as e:
                raise InvalidResponseError() from e
            except (ValueError, ValidationError) as e:
                raise InvalidResponseError() from e
