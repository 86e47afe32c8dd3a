import jwt
from datetime import datetime, timedelta
from flask import current_app
import secrets


def generate_session_token(user):
    """Issue a signed session token for user.

    Returns (token, token_id, expires_at); the caller persists token_id so the
    session can be revoked on logout.
    """
    now = datetime.utcnow()
    expires_at = now + timedelta(days=current_app.config['SESSION_EXPIRATION_DAYS'])
    token_id = secrets.token_hex(16)
    payload = {
        'user_id': user.id,
        'email': user.email,
        'token_type': 'session',
        'exp': expires_at,
        'iat': now,
        'jti': token_id
    }
    token = jwt.encode(
        payload,
        current_app.config['JWT_SECRET_KEY'],
        algorithm=current_app.config['JWT_ALGORITHM']
    )
    return token, token_id, expires_at


def decode_session_token(token):
    """Decode and validate a session token, None when invalid or expired"""
    try:
        payload = jwt.decode(
            token,
            current_app.config['JWT_SECRET_KEY'],
            algorithms=[current_app.config['JWT_ALGORITHM']]
        )
        if payload.get('token_type') != 'session':
            return None
        return payload
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None


def get_token_from_request(request):
    """Session cookie first, then an Authorization: Bearer header"""
    token = request.cookies.get(current_app.config['AUTH_COOKIE_NAME'])
    if token:
        return token
    auth_header = request.headers.get('Authorization')
    if auth_header and auth_header.startswith('Bearer '):
        return auth_header.split(' ', 1)[1]
    return None
