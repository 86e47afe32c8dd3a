import logging
from flask import Blueprint, request, jsonify, current_app
from user.auth_service import AuthService
from user.jwt_utils import get_token_from_request
from user.jwt_middleware import resolve_session
from user.exceptions import DuplicateResourceException, InvalidCredentialsException

logger = logging.getLogger(__name__)

bp = Blueprint('auth', __name__)


def _set_session_cookie(response, token, max_age):
    response.set_cookie(
        current_app.config['AUTH_COOKIE_NAME'],
        token,
        max_age=max_age,
        httponly=True,
        secure=current_app.config['AUTH_COOKIE_SECURE'],
        samesite='Lax'
    )


@bp.route('/signup', methods=['POST'])
def signup():
    data = request.get_json() or {}
    try:
        user = AuthService.signup(data)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except DuplicateResourceException as e:
        return jsonify({'error': str(e)}), 400
    except Exception:
        logger.exception("Signup failed")
        return jsonify({'error': 'Something went wrong'}), 500

    return jsonify({
        'message': 'Account created successfully',
        'user': {
            'id': user.id,
            'email': user.email,
            'company_name': user.company.company_name,
            'phone1': user.company.phone1
        }
    }), 201


@bp.route('/login', methods=['POST'])
def login():
    data = request.get_json() or {}
    email = data.get('email')
    password = data.get('password')

    if not email or not password:
        return jsonify({'error': 'Email and password are required'}), 400

    try:
        user, token, expires_at = AuthService.login(email, password)
    except InvalidCredentialsException as e:
        return jsonify({'error': str(e)}), 401
    except Exception:
        logger.exception("Login failed")
        return jsonify({'error': 'Something went wrong'}), 500

    response = jsonify({
        'message': 'Login successful',
        'user': {'id': user.id, 'email': user.email},
        'expires_at': expires_at.isoformat()
    })
    _set_session_cookie(response, token, current_app.config['SESSION_EXPIRATION_DAYS'] * 24 * 60 * 60)
    return response, 200


@bp.route('/logout', methods=['POST'])
def logout():
    token = get_token_from_request(request)
    try:
        AuthService.logout(resolve_session(token))
    except Exception:
        logger.exception("Logout failed")
        return jsonify({'error': 'Logout failed'}), 500

    response = jsonify({'message': 'Logged out successfully'})
    _set_session_cookie(response, '', 0)
    return response, 200


@bp.route('/check', methods=['GET'])
def check():
    session = resolve_session(get_token_from_request(request))
    if session:
        return jsonify({'authenticated': True}), 200
    return jsonify({'authenticated': False}), 401
