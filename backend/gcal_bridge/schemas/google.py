"""
Google-related schemas
"""
from typing import List, Optional

from pydantic import BaseModel


class GoogleAuthStatus(BaseModel):
    """Authentication status of the process-wide credential slot"""
    authenticated: bool
    expiry: Optional[str] = None
    has_refresh_token: bool = False
    scopes: List[str] = []
