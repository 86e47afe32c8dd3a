import logging
from src.extensions import db
from user.user import User, UserSession
from user.jwt_utils import generate_session_token
from user.exceptions import DuplicateResourceException, InvalidCredentialsException
from settings.company_service import CompanyService, MIN_PASSWORD_LENGTH

logger = logging.getLogger(__name__)


class AuthService:
    @staticmethod
    def signup(data):
        """
        Create an account together with its company profile and bank accounts.
        Raises ValueError on incomplete input, DuplicateResourceException when
        the email is taken.
        """
        email = data.get("email")
        password = data.get("password")

        if email is None or password is None:
            raise ValueError("Email and password are required")
        if not isinstance(email, str) or not isinstance(password, str):
            raise ValueError("Email and password must be strings")
        email = email.strip().lower()
        if not email or not password:
            raise ValueError("Email and password are required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValueError("Password must be at least 6 characters")
        CompanyService.validate_company_payload(data)

        if User.query.filter_by(email=email).first():
            raise DuplicateResourceException("User already exists")

        user = User(email=email)
        user.set_password(password)
        db.session.add(user)
        CompanyService.create_company(user, data)
        db.session.commit()

        logger.info("Account created for %s", email)
        return user

    @staticmethod
    def login(email, password):
        """Verify credentials and open a session. Returns (user, token, expires_at)."""
        if not isinstance(email, str) or not isinstance(password, str):
            raise InvalidCredentialsException("Invalid email or password")
        email = email.strip().lower()
        user = User.query.filter_by(email=email).first()
        if not user or not user.check_password(password):
            logger.info("Failed login for %s", email)
            raise InvalidCredentialsException("Invalid email or password")

        token, token_id, expires_at = generate_session_token(user)
        db.session.add(UserSession(token_id=token_id, user_id=user.id, expires_at=expires_at))
        db.session.commit()
        return user, token, expires_at

    @staticmethod
    def logout(session):
        if session is None:
            return
        db.session.delete(session)
        db.session.commit()
