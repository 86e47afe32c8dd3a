from .user import User, UserSession
from .models import PasswordResetToken
from .exceptions import (
    ResourceNotFoundException, DuplicateResourceException, InvalidCredentialsException,
    InvalidTokenException, TokenExpiredException, GstLookupException,
)

__all__ = [
    'User', 'UserSession', 'PasswordResetToken',
    'ResourceNotFoundException', 'DuplicateResourceException', 'InvalidCredentialsException',
    'InvalidTokenException', 'TokenExpiredException', 'GstLookupException',
]
