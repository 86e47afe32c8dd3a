import logging
from flask import Blueprint, request, jsonify
from reports.report_service import ReportService
from user.jwt_middleware import login_required, current_user_id

logger = logging.getLogger(__name__)

bp = Blueprint("reports", __name__)


@bp.route("/", methods=["GET"])
@login_required
def broker_ledger():
    year = request.args.get("year", type=int)
    if not year or year < 1900 or year > 9998:
        return jsonify({"error": "A valid year parameter is required (YYYY)"}), 400

    try:
        return jsonify({"broker_summary": ReportService.broker_ledger(current_user_id(), year)}), 200
    except Exception:
        logger.exception("Error fetching broker ledger")
        return jsonify({"broker_summary": [], "error": "Failed to fetch broker ledger"}), 500
