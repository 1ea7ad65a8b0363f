# app/routers/users.py
"""User accounts: sign-up is open, reads and profile edits are self-or-admin."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session as DBSession
from app.database import get_db
from app.dependencies import require_role
from app.models.enums import UserRole
from app.schemas.user import UserCreate, UserOut, UserUpdate
from app.services import user_service
from app.services.session_store import Session, check_ownership

router = APIRouter()


@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED,
             summary="Create a citizen account")
def create_user(body: UserCreate, db: DBSession = Depends(get_db)):
    return user_service.create_user(db, body.email, body.password, body.full_name, body.phone_number)


@router.get("/users", response_model=list[UserOut], summary="List all users")
def list_users(_admin: Session = Depends(require_role(UserRole.ADMIN)),
               db: DBSession = Depends(get_db)):
    return user_service.list_users(db)


@router.get("/users/{user_id}", response_model=UserOut, summary="Get one user")
def get_user(user_id: str, session: Session = Depends(require_role()),
             db: DBSession = Depends(get_db)):
    check_ownership(session, user_id).raise_if_denied()
    return user_service.get_user(db, user_id)


@router.patch("/users/{user_id}", response_model=UserOut, summary="Update profile")
def update_user(user_id: str, body: UserUpdate, session: Session = Depends(require_role()),
                db: DBSession = Depends(get_db)):
    check_ownership(session, user_id).raise_if_denied()
    return user_service.update_user(db, user_id, full_name=body.full_name,
                                    phone_number=body.phone_number, password=body.password)
