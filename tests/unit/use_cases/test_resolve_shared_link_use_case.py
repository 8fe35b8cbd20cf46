from datetime import datetime, timedelta
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from docshare.app.services.token_service import LinkClaims
from docshare.app.use_cases.documents import ResolveSharedLinkUseCase
from docshare.domain.entities import Document


@pytest.fixture
def document():
    return Document(
        id=uuid4(),
        institute_id=uuid4(),
        original_file_name="notes.pdf",
        file_path="/uploads/document-1-2.pdf",
        view_once=True,
    )


@pytest.fixture
def link_issuer(document):
    issuer = MagicMock()
    issuer.verify = MagicMock(
        return_value=LinkClaims(
            document_id=document.id,
            user_id=uuid4(),
            expires_at=datetime(2030, 1, 1) + timedelta(days=7),
        )
    )
    return issuer


@pytest.fixture
def storage():
    storage = MagicMock()
    storage.exists = MagicMock(return_value=True)
    return storage


@pytest.mark.asyncio
async def test_resolve_valid_link(mock_uow, link_issuer, storage, document):
    mock_uow.documents.get_by_id.return_value = document

    result = await ResolveSharedLinkUseCase(mock_uow, link_issuer, storage).execute("tok")

    assert result.is_ok()
    shared = result.value
    assert shared.document_id == str(document.id)
    assert shared.file_path == document.file_path
    assert shared.view_once is True
    assert shared.watermark is True


@pytest.mark.asyncio
async def test_resolve_invalid_link(mock_uow, link_issuer, storage):
    link_issuer.verify.return_value = None

    result = await ResolveSharedLinkUseCase(mock_uow, link_issuer, storage).execute("tok")

    assert result.is_err()
    assert result.error.code == "INVALID_LINK"
    mock_uow.documents.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_resolve_link_to_missing_file(mock_uow, link_issuer, storage, document):
    mock_uow.documents.get_by_id.return_value = document
    storage.exists.return_value = False

    result = await ResolveSharedLinkUseCase(mock_uow, link_issuer, storage).execute("tok")

    assert result.is_err()
    assert result.error.code == "DOCUMENT_NOT_FOUND"
