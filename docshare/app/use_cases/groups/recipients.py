"""
Group recipient expansion

Turns a document's recipient groups into the individual users who get a
link.
"""

import logging
from typing import Iterable, List, Optional
from uuid import UUID

from docshare.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def expand_recipients(
    uow: UnitOfWork,
    group_ids: Iterable[UUID],
    institute_id: Optional[UUID] = None,
) -> List[UUID]:
    """
    Union of the members of the given groups, each user once.

    Users come back in traversal order (group order, then member order)
    so callers can issue links in a predictable sequence. Unknown group
    ids, and with institute_id set, groups of other institutes, add no
    one; they are logged, not reported as errors.

    Must be called inside an open unit of work.
    """
    group_ids = list(dict.fromkeys(group_ids))
    known = set(await uow.groups.get_existing_ids(group_ids, institute_id))

    unknown = [str(g) for g in group_ids if g not in known]
    if unknown:
        logger.warning(f"Ignoring unknown recipient groups: {unknown}")

    members = {}
    for group_id in group_ids:
        if group_id not in known:
            continue
        for user_id in await uow.groups.get_member_ids(group_id):
            members.setdefault(user_id, None)
    return list(members)
