from functools import wraps
from flask import request, jsonify, g
from user.jwt_utils import decode_session_token, get_token_from_request
from user.user import UserSession


def resolve_session(token):
    """Return the live UserSession behind token, or None.

    Signature and expiry of the token are checked first, then the session row
    must still exist (not logged out) and be unexpired.
    """
    if not token:
        return None
    payload = decode_session_token(token)
    if not payload:
        return None
    session = UserSession.query.filter_by(token_id=payload.get('jti')).first()
    if not session or session.user_id != payload.get('user_id'):
        return None
    if session.is_expired():
        return None
    return session


def login_required(f):
    """Session authentication decorator"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = get_token_from_request(request)
        if not token:
            return jsonify({
                'error': 'Unauthorized',
                'error_code': 'TOKEN_MISSING'
            }), 401

        session = resolve_session(token)
        if not session:
            return jsonify({
                'error': 'Unauthorized',
                'error_code': 'SESSION_INVALID'
            }), 401

        # Store user info in g for use in routes
        g.current_user = {
            'user_id': session.user_id,
            'email': session.user.email,
            'token_id': session.token_id
        }

        return f(*args, **kwargs)
    return decorated_function


def current_user_id():
    return g.current_user['user_id']
