"""Routes for signing up and inspecting members."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from board.application.use_cases.members import create_member as create_member_uc
from board.domain.entities import Member
from board.infrastructure.database import get_db
from board.interfaces.api.dependencies import get_current_active_member
from board.interfaces.api.schemas import MemberCreate, MemberRead

router = APIRouter(prefix="/members", tags=["members"])


@router.post("/", response_model=MemberRead, status_code=status.HTTP_201_CREATED)
def register_member(member_in: MemberCreate, db: Session = Depends(get_db)):
    """Create a new member account."""

    try:
        member = create_member_uc(
            db,
            member_id=member_in.member_id,
            member_name=member_in.member_name,
            password=member_in.password,
            email=member_in.email,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return MemberRead.model_validate(member)


@router.get("/me", response_model=MemberRead)
def read_current_member(current_member: Member = Depends(get_current_active_member)):
    """Return the authenticated member."""

    return MemberRead.model_validate(current_member)
