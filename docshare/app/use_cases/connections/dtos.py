"""
Connection Use Case DTOs

Responses are serialized with camelCase keys.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from docshare.app.use_cases.dto_base import CamelModel
from docshare.domain.entities import ConnectionStatus


class MessageResponse(BaseModel):
    """Confirmation message for a state transition"""

    msg: str


class ConnectedInstituteInfo(CamelModel):
    """Institute as seen by a connected user"""

    id: str
    name: str
    admin_name: Optional[str] = None
    admin_email: str


class LinkedUserInfo(CamelModel):
    """User as seen by the institute it is linked to"""

    id: str
    name: str
    email: str


class ConnectionRequestInfo(CamelModel):
    """Connection record joined with the requesting user"""

    id: str
    user: LinkedUserInfo
    institute_id: str
    status: ConnectionStatus
    request_date: datetime
