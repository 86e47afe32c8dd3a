import logging
from flask import Blueprint, request, jsonify
from src.extensions import db
from customers.customer import Customer
from user.jwt_middleware import login_required, current_user_id

logger = logging.getLogger(__name__)

bp = Blueprint("customers", __name__)

CUSTOMER_FIELDS = ("business_name", "contact_person", "phone", "address", "city", "state", "gst_number")


# -------------------- LIST CUSTOMERS --------------------
@bp.route("/", methods=["GET"])
@login_required
def list_customers():
    try:
        customers = Customer.query.filter_by(user_id=current_user_id()).order_by(Customer.id).all()
        return jsonify({"customers": [c.to_dict() for c in customers]}), 200
    except Exception:
        logger.exception("Error fetching customers")
        return jsonify({"error": "Error fetching customers"}), 500


# -------------------- CREATE CUSTOMER --------------------
@bp.route("/", methods=["POST"])
@login_required
def create_customer():
    data = request.get_json() or {}
    user_id = current_user_id()

    for field in CUSTOMER_FIELDS:
        if data.get(field) is not None and not isinstance(data.get(field), str):
            return jsonify({"error": f"{field} must be a string"}), 400

    gst_number = (data.get("gst_number") or "").strip().upper() or None
    if not data.get("business_name") and not data.get("contact_person"):
        return jsonify({"error": "business_name or contact_person is required"}), 400

    if gst_number and Customer.query.filter_by(user_id=user_id, gst_number=gst_number).first():
        return jsonify({"error": "Customer with this GST number already exists"}), 400

    try:
        cust = Customer(user_id=user_id, **{field: data.get(field) for field in CUSTOMER_FIELDS})
        cust.gst_number = gst_number
        db.session.add(cust)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Error adding customer")
        return jsonify({"error": "Error adding customer"}), 500

    return jsonify({
        "message": "Customer added successfully",
        "customer": cust.to_dict()
    }), 201
