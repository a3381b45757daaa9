"""Children of the authenticated user."""

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_child_repo
from api.models import ChildCreateRequest, ChildResponse, ChildUpdateRequest, UserProfile
from api.security import get_current_user_required
from domain.model.child import Child
from port.child_repository import ChildRepository
from services import child_service

router = APIRouter(prefix="/api/children", tags=["children"])


def _to_response(child: Child) -> ChildResponse:
    return ChildResponse(
        id=child.id,
        parent_id=child.parent_id,
        name=child.name,
        birth_date=child.birth_date,
        notes=child.notes,
        created_at=child.created_at,
        updated_at=child.updated_at,
    )


@router.get("", response_model=list[ChildResponse])
def list_children(
    current_user: UserProfile = Depends(get_current_user_required),
    repo: ChildRepository = Depends(get_child_repo),
):
    return [_to_response(c) for c in child_service.list_children(repo, current_user.id)]


@router.post("", response_model=ChildResponse, status_code=status.HTTP_201_CREATED)
def create_child(
    request: ChildCreateRequest,
    current_user: UserProfile = Depends(get_current_user_required),
    repo: ChildRepository = Depends(get_child_repo),
):
    child = child_service.create_child(
        repo, current_user.id,
        name=request.name,
        birth_date=request.birth_date,
        notes=request.notes,
    )
    return _to_response(child)


@router.get("/{child_id}", response_model=ChildResponse)
def get_child(
    child_id: str,
    current_user: UserProfile = Depends(get_current_user_required),
    repo: ChildRepository = Depends(get_child_repo),
):
    return _to_response(child_service.get_child(repo, current_user.id, child_id))


@router.patch("/{child_id}", response_model=ChildResponse)
def update_child(
    child_id: str,
    request: ChildUpdateRequest,
    current_user: UserProfile = Depends(get_current_user_required),
    repo: ChildRepository = Depends(get_child_repo),
):
    patch = request.model_dump(exclude_unset=True)
    return _to_response(child_service.update_child(repo, current_user.id, child_id, patch))


@router.delete("/{child_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_child(
    child_id: str,
    current_user: UserProfile = Depends(get_current_user_required),
    repo: ChildRepository = Depends(get_child_repo),
):
    child_service.delete_child(repo, current_user.id, child_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
