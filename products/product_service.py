from decimal import Decimal, InvalidOperation
from src.extensions import db
from products.product import Product, GST_RATES

class ProductService:
    @staticmethod
    def create_product(user_id, data):
        """
        Create a catalog product. default_gst falls back to 5% and must be one
        of the GST slabs.
        """
        name = data.get("name") or ""
        if not isinstance(name, str):
            raise ValueError("Product name must be a string")
        name = name.strip()
        if not name:
            raise ValueError("Product name is required")

        try:
            default_price = Decimal(str(data.get("default_price") or 0))
        except InvalidOperation:
            raise ValueError("default_price must be a number")
        if not default_price.is_finite() or default_price < 0:
            raise ValueError("default_price must be a non-negative number")

        default_gst = data.get("default_gst")
        if default_gst is None or default_gst == "":
            default_gst = 5
        try:
            default_gst = int(default_gst)
        except (TypeError, ValueError):
            raise ValueError("default_gst must be one of 0, 5, 12, 18, 28")
        if default_gst not in GST_RATES:
            raise ValueError("default_gst must be one of 0, 5, 12, 18, 28")

        product = Product(
            user_id=user_id,
            name=name,
            hsn_code=data.get("hsn_code"),
            default_price=default_price,
            default_gst=default_gst,
        )
        db.session.add(product)
        db.session.commit()
        return product

    @staticmethod
    def list_products(user_id):
        return Product.query.filter_by(user_id=user_id).order_by(Product.id).all()
