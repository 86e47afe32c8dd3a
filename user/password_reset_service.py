import hashlib
import logging
import secrets
from datetime import datetime, timedelta
from urllib.parse import quote
from flask import current_app
from src.extensions import db
from user.user import User
from user.models import PasswordResetToken
from user.exceptions import InvalidTokenException, TokenExpiredException
from mail_invoice.email_service import EmailService
from settings.company_service import MIN_PASSWORD_LENGTH

logger = logging.getLogger(__name__)


def hash_reset_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class PasswordResetService:

    @staticmethod
    def initiate_password_reset(email: str):
        """
        Store a hashed reset token and mail the reset link.

        Returns the reset link, or None when no account exists for email (the
        caller answers identically in both cases).
        """
        if not isinstance(email, str):
            raise ValueError("Email must be a string")
        email = email.strip().lower()
        user = User.query.filter_by(email=email).first()
        if not user:
            logger.info("Password reset requested for unknown email %s", email)
            return None

        # Delete old tokens
        PasswordResetToken.query.filter_by(email=user.email).delete()

        token = secrets.token_hex(32)
        expiry_minutes = current_app.config["PASSWORD_RESET_EXPIRATION_MINUTES"]
        reset_token = PasswordResetToken(
            token_hash=hash_reset_token(token),
            email=user.email,
            expiry_date=datetime.utcnow() + timedelta(minutes=expiry_minutes)
        )
        db.session.add(reset_token)
        db.session.commit()

        base_url = current_app.config["BASE_URL"].rstrip("/")
        reset_link = f"{base_url}/reset-password?token={token}&email={quote(user.email)}"

        # Raises on SMTP failure; the route reports it
        EmailService.send_password_reset(user.email, reset_link, expiry_minutes)
        return reset_link

    @staticmethod
    def reset_password(email: str, token: str, new_password: str):
        if not all(isinstance(value, str) for value in (email, token, new_password)):
            raise ValueError("Email, token and password must be strings")
        if len(new_password or "") < MIN_PASSWORD_LENGTH:
            raise ValueError("Password must be at least 6 characters")

        email = (email or "").strip().lower()
        reset_token = PasswordResetToken.query.filter_by(
            token_hash=hash_reset_token(token or ""), email=email
        ).first()
        if not reset_token:
            raise InvalidTokenException("Invalid or expired reset link")

        if reset_token.expiry_date < datetime.utcnow():
            db.session.delete(reset_token)
            db.session.commit()
            raise TokenExpiredException("Reset link has expired")

        user = User.query.filter_by(email=email).first()
        if not user:
            raise InvalidTokenException("Invalid or expired reset link")

        user.set_password(new_password)
        db.session.delete(reset_token)
        # Existing sessions end with the old password
        for session in list(user.sessions):
            db.session.delete(session)
        db.session.commit()
        logger.info("Password reset for user %s", user.id)
