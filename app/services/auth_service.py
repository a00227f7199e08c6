# services/auth_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import begin_write
from app.core.exceptions import ValidationError
from app.core.security import get_password_hash, verify_password
from app.db.models import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower() if isinstance(email, str) else ""


class AuthService:
    """Service layer for registration and credential checks"""

    def __init__(self, db: Session):
        self.db = db

    def _credentials(self, email: str, password: str):
        email_norm = normalize_email(email)
        if not email_norm or not isinstance(password, str) or not password.strip():
            raise ValidationError("Email and password required")
        return email_norm, password

    def register(self, email: str, password: str) -> User:
        """Create a new user with a hashed password."""
        email_norm, password = self._credentials(email, password)
        password_hash = get_password_hash(password)
        begin_write(self.db)

        existing = self.db.query(User).filter(User.email == email_norm).first()
        if existing:
            raise ValidationError("Email already used", code="email_taken")

        user = User(email=email_norm, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # lost a race against a concurrent registration for the same email
            self.db.rollback()
            raise ValidationError("Email already used", code="email_taken")
        self.db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Return the user for valid credentials; never says which half was wrong."""
        email_norm, password = self._credentials(email, password)

        user = self.db.query(User).filter(User.email == email_norm).first()
        if not user or not verify_password(password, user.password_hash):
            raise ValidationError("Invalid credentials", code="invalid_credentials")
        return user
