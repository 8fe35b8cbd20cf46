"""
Documents API Routes

- POST /documents/upload - multipart upload, issues one secure link per recipient
- GET /documents/shared/{token} - open a document through a secure link
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import FileResponse

from config import ApplicationConfig
from docshare.api.error import raise_for_error
from docshare.api.utils.role_auth import require_institute
from docshare.app.services.file_storage import IFileStorage
from docshare.app.services.token_service import ISecureLinkIssuer, SessionClaims
from docshare.app.services.unit_of_work import UnitOfWork
from docshare.app.use_cases.documents import (
    ResolveSharedLinkUseCase,
    UploadDocumentCommand,
    UploadDocumentResponse,
    UploadDocumentUseCase,
)
from docshare.depends import get_file_storage, get_link_issuer, get_unit_of_work

router = APIRouter(prefix="/documents", tags=["Documents"])

DOCUMENT_ERROR_STATUS = {
    "NO_FILE": status.HTTP_400_BAD_REQUEST,
    "UNSUPPORTED_FILE_TYPE": status.HTTP_400_BAD_REQUEST,
    "FILE_TOO_LARGE": status.HTTP_400_BAD_REQUEST,
    "INVALID_RECIPIENTS": status.HTTP_400_BAD_REQUEST,
    "INVALID_EXPIRY_DAYS": status.HTTP_400_BAD_REQUEST,
    "INSTITUTE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_LINK": status.HTTP_401_UNAUTHORIZED,
    "DOCUMENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


@router.post("/upload", response_model=UploadDocumentResponse)
async def upload_document(
    document: Optional[UploadFile] = File(None, description="PDF, DOC or DOCX (max 10MB)"),
    recipients: Optional[str] = Form(None, description="JSON array of group ids"),
    expiry_days: Optional[str] = Form(None, alias="expiryDays"),
    view_once: Optional[str] = Form(None, alias="viewOnce"),
    watermark: Optional[str] = Form(None),
    claims: SessionClaims = Depends(require_institute),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
    link_issuer: ISecureLinkIssuer = Depends(get_link_issuer),
):
    """
    Upload a document for one or more recipient groups

    The file is stored, then metadata is saved and a link is issued to
    every distinct member of the recipient groups. Any rejection after the
    file was stored removes it again.

    Raises:
        - 400 Bad Request: No file, unsupported type, too large,
          missing/empty recipients, bad expiryDays
    """
    command = UploadDocumentCommand(
        original_file_name=document.filename if document else None,
        content_type=document.content_type if document else None,
        content=await document.read() if document else b"",
        recipients=recipients,
        expiry_days=expiry_days,
        view_once=view_once,
        watermark=watermark,
    )

    use_case = UploadDocumentUseCase(
        uow,
        storage,
        link_issuer,
        max_upload_bytes=ApplicationConfig.MAX_UPLOAD_BYTES,
        default_expiry_days=ApplicationConfig.DEFAULT_EXPIRY_DAYS,
        max_expiry_days=ApplicationConfig.MAX_EXPIRY_DAYS,
    )
    result = await use_case.execute(claims.id, command)
    if result.is_err():
        raise_for_error(result.error, DOCUMENT_ERROR_STATUS)
    return result.value


@router.get("/shared/{token}", response_class=FileResponse)
async def open_shared_document(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
    link_issuer: ISecureLinkIssuer = Depends(get_link_issuer),
):
    """
    Download a document through a secure link

    The link token is the credential; no session header is needed.

    Raises:
        - 401 Unauthorized: Link invalid or expired
        - 404 Not Found: Document or its file no longer exists
    """
    result = await ResolveSharedLinkUseCase(uow, link_issuer, storage).execute(token)
    if result.is_err():
        raise_for_error(result.error, DOCUMENT_ERROR_STATUS)

    shared = result.value
    return FileResponse(
        shared.file_path,
        filename=shared.original_file_name,
        headers={
            "X-Document-Id": shared.document_id,
            "X-View-Once": str(shared.view_once).lower(),
            "X-Watermark": str(shared.watermark).lower(),
            "X-Link-Expires-At": shared.link_expires_at.isoformat(),
        },
    )
