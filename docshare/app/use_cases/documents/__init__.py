"""
Document Use Cases

Upload with per-recipient secure links, and link resolution.
"""

from .upload_document_use_case import UploadDocumentUseCase
from .resolve_shared_link_use_case import ResolveSharedLinkUseCase
from .links import issue_links
from .dtos import (
    RecipientLink,
    SharedDocument,
    UploadDocumentCommand,
    UploadDocumentResponse,
)

__all__ = [
    "UploadDocumentUseCase",
    "ResolveSharedLinkUseCase",
    "issue_links",
    "RecipientLink",
    "SharedDocument",
    "UploadDocumentCommand",
    "UploadDocumentResponse",
]
