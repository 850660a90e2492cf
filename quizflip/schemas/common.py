"""Shared schema pieces."""
from typing import Literal

from pydantic import BaseModel

Difficulty = Literal["easy", "medium", "hard"]


class MessageSchema(BaseModel):
    success: bool = True
    message: str
