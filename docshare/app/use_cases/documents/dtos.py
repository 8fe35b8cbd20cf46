"""
Document Use Case DTOs

Upload input arrives as multipart form strings and is parsed inside the
use case, after the file has been stored, so that a rejected upload can
remove its file.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from docshare.app.use_cases.dto_base import CamelModel


class UploadDocumentCommand(BaseModel):
    original_file_name: Optional[str] = None
    content_type: Optional[str] = None
    content: bytes = b""
    recipients: Optional[str] = None  # JSON array of group ids
    expiry_days: Optional[str] = None
    view_once: Optional[str] = None
    watermark: Optional[str] = None


class RecipientLink(CamelModel):
    """A secure link minted for one recipient"""

    user_id: str
    email: str
    link: str


class UploadDocumentResponse(CamelModel):
    msg: str
    document_id: str
    recipients_count: int
    links: List[RecipientLink]


class SharedDocument(BaseModel):
    """A document reached through a valid secure link"""

    document_id: str
    user_id: str
    original_file_name: str
    file_path: str
    view_once: bool
    watermark: bool
    link_expires_at: datetime
