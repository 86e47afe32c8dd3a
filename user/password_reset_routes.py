import logging
from flask import Blueprint, request, jsonify, current_app
from user.password_reset_service import PasswordResetService
from user.exceptions import InvalidTokenException, TokenExpiredException

logger = logging.getLogger(__name__)

bp = Blueprint('password_reset', __name__)

GENERIC_RESET_MESSAGE = 'If an account exists with this email, a reset link has been sent'

@bp.route('/forgot-password', methods=['POST'])
def forgot_password():
    data = request.get_json() or {}
    email = data.get('email')

    if not email:
        return jsonify({'error': 'Email is required'}), 400

    try:
        reset_link = PasswordResetService.initiate_password_reset(email)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception:
        logger.exception("Failed to send reset email to %s", email)
        return jsonify({'error': 'Failed to send reset email. Please try again.'}), 500

    body = {'message': GENERIC_RESET_MESSAGE}
    if reset_link and current_app.config['DEBUG']:
        body['reset_link'] = reset_link
    return jsonify(body), 200

@bp.route('/reset-password', methods=['POST'])
def reset_password():
    data = request.get_json() or {}
    token = data.get('token')
    email = data.get('email')
    password = data.get('password')

    if not token or not email or not password:
        return jsonify({'error': 'Missing required fields'}), 400

    try:
        PasswordResetService.reset_password(email, token, password)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except (InvalidTokenException, TokenExpiredException) as e:
        return jsonify({'error': str(e)}), 400
    except Exception:
        logger.exception("Password reset failed")
        return jsonify({'error': 'Something went wrong'}), 500

    return jsonify({'message': 'Password has been reset successfully'}), 200
