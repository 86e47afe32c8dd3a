from datetime import datetime
from src.extensions import db

class Customer(db.Model):
    __tablename__ = "customers"

    id = db.Column(db.Integer, primary_key=True)

    # Owning account
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    business_name = db.Column(db.String(255), nullable=True)
    contact_person = db.Column(db.String(255), nullable=True)
    phone = db.Column(db.String(50), nullable=True)

    # Billing Address
    address = db.Column(db.Text, nullable=True)
    city = db.Column(db.String(100), nullable=True)
    state = db.Column(db.String(100), nullable=True)

    # GSTIN, unique per account
    gst_number = db.Column(db.String(15), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, onupdate=datetime.utcnow)

    invoices = db.relationship("Invoice", back_populates="customer", lazy=True)

    __table_args__ = (
        db.UniqueConstraint("user_id", "gst_number", name="uq_customer_user_gst"),
    )

    @property
    def display_name(self):
        return self.business_name or self.contact_person or "Unknown"

    def to_dict(self):
        return {
            "id": self.id,
            "business_name": self.business_name,
            "contact_person": self.contact_person,
            "phone": self.phone,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "gst_number": self.gst_number,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
