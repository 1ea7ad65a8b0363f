# app/routers/auth.py
"""Login / logout / current session. Registration here is an alias of POST /users."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session as DBSession
from app.database import get_db
from app.dependencies import get_session_store, require_role
from app.schemas.auth import LoginRequest, LoginResponse, SessionOut
from app.schemas.user import UserCreate, UserOut
from app.services import user_service
from app.services.session_store import Session, SessionStore

router = APIRouter(prefix="/auth")


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, db: DBSession = Depends(get_db)):
    return user_service.create_user(db, body.email, body.password, body.full_name, body.phone_number)


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, store: SessionStore = Depends(get_session_store),
          db: DBSession = Depends(get_db)):
    session = store.login(db, body.email, body.password)
    return LoginResponse(user=UserOut.model_validate(session.user), access_token=session.token)


@router.post("/logout")
def logout(session: Session = Depends(require_role()),
           store: SessionStore = Depends(get_session_store)):
    store.logout(session.token)
    return {"status": "logged_out"}


@router.get("/me", response_model=SessionOut)
def me(session: Session = Depends(require_role())):
    return SessionOut(user=UserOut.model_validate(session.user), state=session.state.value,
                      landing_page=session.landing_page)
