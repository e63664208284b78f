# backend/routes/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from models import users as models
from schemas import user as schemas

router = APIRouter(prefix="/api", tags=["Auth"])
logger = logging.getLogger(__name__)


# One-shot credential check, no token or session is issued
@router.post("/login", response_model=schemas.LoginResponse)
def login(payload: schemas.UserLogin, db: Session = Depends(get_db)):
    db_user = (
        db.query(models.User)
        .filter(models.User.username == payload.username, models.User.password == payload.password)
        .first()
    )

    if not db_user:
        logger.info("Login failed for %r", payload.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    logger.info("Login succeeded for %r", db_user.username)
    return {"success": True, "user": {"id": db_user.id, "username": db_user.username}}
