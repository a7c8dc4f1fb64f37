"""Pydantic schemas for user service payloads"""

from pydantic import BaseModel


class UserPayload(BaseModel):
    """Body of GET /user"""

    id: str
    name: str
