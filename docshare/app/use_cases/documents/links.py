from typing import List, Sequence
from uuid import UUID

from docshare.app.services.token_service import ISecureLinkIssuer
from docshare.domain.entities import User

from .dtos import RecipientLink


def issue_links(
    link_issuer: ISecureLinkIssuer,
    document_id: UUID,
    recipients: Sequence[User],
    expiry_days: int,
) -> List[RecipientLink]:
    """
    Mint one link per recipient, in recipient order.

    Each link's clock starts now. Nothing is persisted.
    """
    links = []
    for user in recipients:
        token = link_issuer.issue(document_id, user.id, expiry_days)
        links.append(
            RecipientLink(
                user_id=str(user.id),
                email=user.email,
                link=link_issuer.build_url(token),
            )
        )
    return links
