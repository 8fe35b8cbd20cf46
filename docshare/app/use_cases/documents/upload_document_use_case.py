"""
Upload Document Use Case

Stores an institute's document and issues secure links to every member of
its recipient groups.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple
from uuid import UUID

from docshare.app.services.file_storage import IFileStorage
from docshare.app.services.token_service import ISecureLinkIssuer
from docshare.app.services.unit_of_work import UnitOfWork
from docshare.app.use_cases.groups.recipients import expand_recipients
from docshare.domain.entities import AuditEvent, Document
from docshare.libs.result import Error, Result, Return

from .dtos import UploadDocumentCommand, UploadDocumentResponse
from .links import issue_links

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".pdf", ".doc", ".docx"}
ALLOWED_MIME_TYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/octet-stream",
}


def _parse_flag(raw: Optional[str], default: bool) -> bool:
    if raw is None or raw == "":
        return default
    return raw.strip().lower() == "true"


def _parse_recipients(raw: Optional[str]) -> Optional[List[UUID]]:
    """Group ids from a JSON array string, None if absent/empty/invalid"""
    if not raw:
        return None
    try:
        values = json.loads(raw)
    except json.JSONDecodeError:
        return None
    if not isinstance(values, list) or not values:
        return None
    try:
        return [UUID(str(v)) for v in values]
    except ValueError:
        return None


class UploadDocumentUseCase:
    """
    Use case for document upload.

    Business Rules:
    - Only .pdf, .doc and .docx files up to max_upload_bytes
    - The file is stored before the form fields are checked; any failure
      after that point deletes the stored file
    - recipients must be a non-empty JSON array of group ids
    - expiryDays is an integer in 1..max_expiry_days (default 7)
    - Document, recipient groups, link issuance and the audit event share
      one transaction; the response lists one link per distinct recipient
    """

    def __init__(
        self,
        uow: UnitOfWork,
        storage: IFileStorage,
        link_issuer: ISecureLinkIssuer,
        max_upload_bytes: int = 10 * 1024 * 1024,
        default_expiry_days: int = 7,
        max_expiry_days: int = 3650,
    ):
        self.uow = uow
        self.storage = storage
        self.link_issuer = link_issuer
        self.max_upload_bytes = max_upload_bytes
        self.default_expiry_days = default_expiry_days
        self.max_expiry_days = max_expiry_days

    def _check_file(self, command: UploadDocumentCommand) -> Optional[Error]:
        if not command.original_file_name or not command.content:
            return Error("NO_FILE", "No file uploaded.")

        extension = Path(command.original_file_name).suffix.lower()
        mime_type = (command.content_type or "application/octet-stream").split(";")[0]
        if extension not in ALLOWED_EXTENSIONS or mime_type not in ALLOWED_MIME_TYPES:
            return Error(
                "UNSUPPORTED_FILE_TYPE",
                "File type not supported. Only PDF, DOC, and DOCX files are allowed.",
            )

        if len(command.content) > self.max_upload_bytes:
            return Error(
                "FILE_TOO_LARGE",
                f"File too large. Maximum size is {self.max_upload_bytes // (1024 * 1024)}MB.",
            )
        return None

    def _parse_options(
        self, command: UploadDocumentCommand
    ) -> Result[Tuple[List[UUID], int, bool, bool]]:
        group_ids = _parse_recipients(command.recipients)
        if group_ids is None:
            return Return.err(Error("INVALID_RECIPIENTS", "Recipient groups are required."))

        expiry_days = self.default_expiry_days
        if command.expiry_days not in (None, ""):
            try:
                expiry_days = int(command.expiry_days)
            except ValueError:
                expiry_days = 0
            if expiry_days <= 0:
                return Return.err(
                    Error("INVALID_EXPIRY_DAYS", "expiryDays must be a positive integer.")
                )
            if expiry_days > self.max_expiry_days:
                return Return.err(
                    Error(
                        "INVALID_EXPIRY_DAYS",
                        f"expiryDays must not exceed {self.max_expiry_days}.",
                    )
                )

        view_once = _parse_flag(command.view_once, default=False)
        watermark = _parse_flag(command.watermark, default=True)
        return Return.ok((group_ids, expiry_days, view_once, watermark))

    async def execute(
        self, institute_id: UUID, command: UploadDocumentCommand
    ) -> Result[UploadDocumentResponse]:
        file_error = self._check_file(command)
        if file_error is not None:
            return Return.err(file_error)

        file_path = await self.storage.save(command.content, command.original_file_name)
        try:
            result = await self._register(institute_id, file_path, command)
        except Exception:
            logger.exception(f"Upload failed after storing {file_path}, removing file")
            await self.storage.delete(file_path)
            raise

        if result.is_err():
            await self.storage.delete(file_path)
        return result

    async def _register(
        self, institute_id: UUID, file_path: str, command: UploadDocumentCommand
    ) -> Result[UploadDocumentResponse]:
        options = self._parse_options(command)
        if options.is_err():
            return Return.err(options.error)
        group_ids, expiry_days, view_once, watermark = options.value

        async with self.uow:
            institute = await self.uow.institutes.get_by_id(institute_id)
            if institute is None:
                return Return.err(Error("INSTITUTE_NOT_FOUND", "Institute not found"))

            document = await self.uow.documents.create(
                Document(
                    institute_id=institute_id,
                    original_file_name=command.original_file_name,
                    file_path=file_path,
                    expiry_days=expiry_days,
                    view_once=view_once,
                    watermark=watermark,
                ),
                recipient_group_ids=group_ids,
            )

            recipient_ids = await expand_recipients(self.uow, group_ids, institute_id)
            users_by_id = {u.id: u for u in await self.uow.users.get_by_ids(recipient_ids)}
            recipients = [users_by_id[uid] for uid in recipient_ids if uid in users_by_id]

            links = issue_links(self.link_issuer, document.id, recipients, expiry_days)

            await self.uow.audit_events.create(
                AuditEvent(
                    institute_id=institute_id,
                    action="document_uploaded",
                    event_metadata={
                        "document_id": str(document.id),
                        "file_name": command.original_file_name,
                        "groups": [str(g) for g in group_ids],
                        "recipients": len(links),
                    },
                )
            )
            await self.uow.commit()

            logger.info(
                f"Document {document.id} uploaded by institute {institute_id}, "
                f"{len(links)} links issued"
            )
            return Return.ok(
                UploadDocumentResponse(
                    msg="Document uploaded and metadata saved successfully.",
                    document_id=str(document.id),
                    recipients_count=len(links),
                    links=links,
                )
            )
