"""Children of a parent user: create, list, read, update, delete."""

import logging
from datetime import date

from domain.model.child import CHILD_FIELDS, Child
from domain.model.errors import ChildNotFoundError
from port.child_repository import ChildRepository

logger = logging.getLogger(__name__)


def create_child(
    repo: ChildRepository,
    parent_id: str,
    name: str,
    birth_date: date | None = None,
    notes: str | None = None,
) -> Child:
    child = repo.create(parent_id=parent_id, name=name.strip(), birth_date=birth_date, notes=notes)
    logger.info("Child created", extra={"childId": child.id, "userId": parent_id})
    return child


def list_children(repo: ChildRepository, parent_id: str) -> list[Child]:
    return repo.list_by_parent(parent_id)


def get_child(repo: ChildRepository, parent_id: str, child_id: str) -> Child:
    """Load a child owned by parent_id.

    Raises:
        ChildNotFoundError: unknown id
        PermissionDeniedError: child belongs to another user
    """
    child = repo.get_by_id(child_id)
    if not child:
        raise ChildNotFoundError("Child not found")
    child.check_ownership(parent_id)
    return child


def update_child(repo: ChildRepository, parent_id: str, child_id: str, patch: dict) -> Child:
    get_child(repo, parent_id, child_id)

    fields = {k: v for k, v in patch.items() if k in CHILD_FIELDS}
    if isinstance(fields.get('name'), str):
        fields['name'] = fields['name'].strip()

    child = repo.update(child_id, fields)
    if not child:
        raise ChildNotFoundError("Child not found")

    logger.info("Child updated", extra={"childId": child_id, "userId": parent_id})
    return child


def delete_child(repo: ChildRepository, parent_id: str, child_id: str) -> None:
    get_child(repo, parent_id, child_id)
    if not repo.delete(child_id):
        raise ChildNotFoundError("Child not found")
    logger.info("Child deleted", extra={"childId": child_id, "userId": parent_id})
