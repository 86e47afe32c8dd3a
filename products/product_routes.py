import logging
from flask import Blueprint, request, jsonify
from src.extensions import db
from products.product_service import ProductService
from user.jwt_middleware import login_required, current_user_id

logger = logging.getLogger(__name__)

bp = Blueprint("products", __name__)


@bp.route("/", methods=["GET"])
@login_required
def list_products():
    try:
        products = ProductService.list_products(current_user_id())
        return jsonify({"products": [p.to_dict() for p in products]}), 200
    except Exception:
        logger.exception("Error fetching products")
        return jsonify({"error": "Error fetching products"}), 500


@bp.route("/", methods=["POST"])
@login_required
def create_product():
    data = request.get_json() or {}
    try:
        product = ProductService.create_product(current_user_id(), data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        db.session.rollback()
        logger.exception("Error adding product")
        return jsonify({"error": "Error adding product"}), 500

    return jsonify({
        "message": "Product added successfully",
        "product": product.to_dict()
    }), 201
