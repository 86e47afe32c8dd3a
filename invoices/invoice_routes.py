import logging
from flask import Blueprint, request, jsonify
from src.extensions import db
from invoices.invoice_service import InvoiceService
from user.exceptions import ResourceNotFoundException, DuplicateResourceException
from user.jwt_middleware import login_required, current_user_id

logger = logging.getLogger(__name__)

bp = Blueprint("invoices", __name__)


@bp.route("/generate-number", methods=["GET"])
@login_required
def generate_invoice_number():
    try:
        return jsonify({"invoice_number": InvoiceService.generate_invoice_number(current_user_id())}), 200
    except Exception:
        logger.exception("Error generating invoice number")
        return jsonify({"error": "Failed to generate invoice number"}), 500


@bp.route("/", methods=["POST"])
@login_required
def create_invoice():
    payload = request.get_json() or {}
    try:
        invoice = InvoiceService.create_invoice(current_user_id(), payload)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except ResourceNotFoundException as e:
        return jsonify({"error": str(e)}), 404
    except DuplicateResourceException as e:
        return jsonify({"error": str(e)}), 409
    except Exception:
        db.session.rollback()
        logger.exception("Error creating invoice")
        return jsonify({"error": "Failed to create invoice"}), 500

    return jsonify({
        "message": "Invoice created successfully",
        "invoice_id": invoice.id,
        "invoice": InvoiceService.serialize_invoice(invoice, include_items=True),
    }), 201


@bp.route("/", methods=["GET"])
@login_required
def list_invoices():
    try:
        invoices = InvoiceService.list_invoices(current_user_id())
        return jsonify({"invoices": [InvoiceService.serialize_invoice(inv) for inv in invoices]}), 200
    except Exception:
        logger.exception("Error fetching invoices")
        return jsonify({"error": "Failed to fetch invoices"}), 500


@bp.route("/", methods=["PATCH"])
@login_required
def update_eway_bill():
    payload = request.get_json() or {}
    invoice_id = payload.get("invoice_id")
    if not invoice_id or "eway_bill_no" not in payload:
        return jsonify({"error": "invoice_id and eway_bill_no are required"}), 400

    try:
        invoice = InvoiceService.update_eway_bill(current_user_id(), invoice_id, payload.get("eway_bill_no"))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except ResourceNotFoundException as e:
        return jsonify({"error": str(e)}), 404
    except Exception:
        db.session.rollback()
        logger.exception("Error updating E-Way Bill")
        return jsonify({"error": "Failed to update E-Way Bill"}), 500

    return jsonify({
        "message": "E-Way Bill number updated successfully",
        "invoice": InvoiceService.serialize_invoice(invoice),
    }), 200
