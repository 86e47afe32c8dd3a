import logging
from flask import Blueprint, request, jsonify
from customers.gst_lookup_service import GstLookupService
from user.exceptions import GstLookupException

logger = logging.getLogger(__name__)

bp = Blueprint("gst_lookup", __name__)


@bp.route("/", methods=["GET"])
def gst_lookup():
    gst_number = request.args.get("gst_number")
    try:
        return jsonify(GstLookupService.lookup(gst_number)), 200
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except GstLookupException as e:
        return jsonify({"error": str(e)}), e.status_code
    except Exception:
        logger.exception("GST lookup failed")
        return jsonify({"error": "Failed to fetch GST details. Please try again."}), 500
