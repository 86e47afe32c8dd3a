import logging
from flask import Blueprint, request, jsonify
from src.extensions import db
from settings.company_service import CompanyService, MIN_PASSWORD_LENGTH
from user.user import User
from user.jwt_middleware import login_required, current_user_id

logger = logging.getLogger(__name__)

bp = Blueprint("settings", __name__)

@bp.route("/", methods=["GET"])
@login_required
def get_profile():
    user = User.query.filter_by(id=current_user_id()).first()
    if not user:
        return jsonify({"error": "User not found"}), 404
    return jsonify({"user": CompanyService.serialize_profile(user)}), 200

@bp.route("/", methods=["PUT"])
@login_required
def update_profile():
    data = request.get_json() or {}

    user = User.query.filter_by(id=current_user_id()).first()
    if not user:
        return jsonify({"error": "User not found"}), 404

    try:
        CompanyService.validate_company_payload(data)
        password = data.get("password")
        if password is not None and not isinstance(password, str):
            raise ValueError("Password must be a string")
        if password and len(password) < MIN_PASSWORD_LENGTH:
            raise ValueError("Password must be at least 6 characters")
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    try:
        CompanyService.update_company(user, data)
        if password:
            user.set_password(password)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Profile update failed for user %s", user.id)
        return jsonify({"error": "Failed to update profile"}), 500

    logger.info("Profile updated for user %s", user.id)
    return jsonify({
        "message": "Profile updated successfully",
        "user": CompanyService.serialize_profile(user)
    }), 200
