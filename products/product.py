from datetime import datetime
from src.extensions import db

GST_RATES = (0, 5, 12, 18, 28)

class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)

    # Owning account
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    # Product Name
    name = db.Column(db.String(255), nullable=False)

    # HSN code
    hsn_code = db.Column(db.String(20), nullable=True)

    # Default rate and GST percentage offered on invoice lines
    default_price = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    default_gst = db.Column(db.Integer, nullable=False, default=5)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "hsn_code": self.hsn_code,
            "default_price": float(self.default_price or 0),
            "default_gst": self.default_gst,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
