from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel

from docshare.app.use_cases.dto_base import CamelModel


class CreateGroupCommand(BaseModel):
    name: str
    member_ids: List[UUID] = []


class GroupInfo(CamelModel):
    id: str
    name: str
    member_ids: List[str]
    created_at: datetime
