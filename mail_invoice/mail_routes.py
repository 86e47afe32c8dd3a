import logging
from flask import Blueprint, request, jsonify
from mail_invoice.email_service import EmailService

logger = logging.getLogger(__name__)

mail_bp = Blueprint('mail', __name__)


@mail_bp.route('/contact', methods=['POST'])
def send_contact_message():
    data = request.get_json() or {}

    missing = [field for field in ('name', 'email', 'subject', 'message') if not data.get(field)]
    if missing:
        return jsonify({'success': False, 'error': f"Missing required fields: {', '.join(missing)}"}), 400

    try:
        EmailService.send_contact_message(
            name=data['name'],
            email=data['email'],
            subject=data['subject'],
            message=data['message'],
            phone=data.get('phone'),
        )
    except Exception:
        logger.exception("Failed to send contact form message")
        return jsonify({'success': False, 'error': 'Failed to send email.'}), 500

    return jsonify({'success': True, 'message': 'Message sent successfully'}), 200
