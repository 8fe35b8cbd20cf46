from docshare.app.services.file_storage import IFileStorage
from docshare.app.services.token_service import ISecureLinkIssuer
from docshare.app.services.unit_of_work import UnitOfWork
from docshare.libs.result import Error, Result, Return

from .dtos import SharedDocument


class ResolveSharedLinkUseCase:
    """
    Opens a document through a secure link.

    Business Rules:
    - The link token is the only credential; expired or tampered links
      fail with INVALID_LINK
    - A valid link keeps working until it expires, whatever happened to
      the recipient's connection since
    - view_once / watermark are returned as metadata, not enforced
    """

    def __init__(self, uow: UnitOfWork, link_issuer: ISecureLinkIssuer, storage: IFileStorage):
        self.uow = uow
        self.link_issuer = link_issuer
        self.storage = storage

    async def execute(self, token: str) -> Result[SharedDocument]:
        claims = self.link_issuer.verify(token)
        if claims is None:
            return Return.err(Error("INVALID_LINK", "Link is invalid or has expired"))

        async with self.uow:
            document = await self.uow.documents.get_by_id(claims.document_id)

        if document is None or not self.storage.exists(document.file_path):
            return Return.err(Error("DOCUMENT_NOT_FOUND", "Document not found"))

        return Return.ok(
            SharedDocument(
                document_id=str(document.id),
                user_id=str(claims.user_id),
                original_file_name=document.original_file_name,
                file_path=document.file_path,
                view_once=document.view_once,
                watermark=document.watermark,
                link_expires_at=claims.expires_at,
            )
        )
