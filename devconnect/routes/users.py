# devconnect/routes/users.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from devconnect.database import get_db
from devconnect.middleware.auth_middleware import JwtStrategy, get_strategy, require_user
from devconnect.models import User
from devconnect.schemas.users import CurrentUserOut, LoginIn, RegisterIn, TokenOut, UserOut
from devconnect.services import users as users_service

# NOTE: main.py mounts this router with prefix="/api"
router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/test")
def users_test():
    return {"msg": "Users works"}


@router.post("/register", response_model=UserOut)
def register(body: RegisterIn, request: Request, db: Session = Depends(get_db)):
    """Create an account. The response never includes the password hash."""
    rounds = request.app.state.settings.bcrypt_rounds
    return users_service.register_user(db, body.model_dump(), rounds=rounds)


@router.post("/login", response_model=TokenOut)
def login(body: LoginIn, db: Session = Depends(get_db), strategy: JwtStrategy = Depends(get_strategy)):
    return users_service.login_user(db, strategy, body.model_dump())


@router.get("/current", response_model=CurrentUserOut)
def current(user: User = Depends(require_user)):
    return CurrentUserOut.model_validate(user)
