"""Test-support routes, only usable when IS_TEST is enabled."""
from fastapi import APIRouter, Depends
from sqlmodel import Session, SQLModel

from app.core.database import get_session
from app.services import identity

router = APIRouter(prefix="/testing", tags=["testing"])


class DeleteTestUser(SQLModel):
    name: str


@router.post("/delete-user")
async def delete_test_user(
    request: DeleteTestUser, session: Session = Depends(get_session)
):
    """
    Delete the first user with the given display name.

    Used by end-to-end suites to clean up after themselves. Returns 403
    outside of test mode.
    """
    deleted = identity.delete_test_user(session, request.name)
    return {"success": True, "deleted": deleted}
