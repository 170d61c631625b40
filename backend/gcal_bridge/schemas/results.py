"""
Operation results - transports turn these into responses
"""
from typing import Any

from pydantic import BaseModel


class RedirectResult(BaseModel):
    url: str
    status_code: int = 302


class TextResult(BaseModel):
    text: str
    status_code: int = 200


class JsonResult(BaseModel):
    data: Any = None
    status_code: int = 200


OperationResult = RedirectResult | TextResult | JsonResult
