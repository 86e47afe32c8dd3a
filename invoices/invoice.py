from datetime import datetime
from src.extensions import db
from sqlalchemy.orm import relationship

class Invoice(db.Model):
    __tablename__ = "invoices"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    invoice_number = db.Column(db.String(100), nullable=False)
    invoice_date = db.Column(db.Date, nullable=False)
    customer_id = db.Column(db.Integer, db.ForeignKey("customers.id"), nullable=False)
    # Snapshot of the customer name at creation, used by listings and the broker ledger
    customer_name = db.Column(db.String(255), nullable=True)
    broker_name = db.Column(db.String(255), nullable=True)
    eway_bill_no = db.Column(db.String(50), nullable=True)

    discount_rate = db.Column(db.Integer, nullable=False, default=0)
    is_same_state = db.Column(db.Boolean, nullable=False, default=True)

    subtotal = db.Column(db.Numeric(14, 2), default=0)
    discount = db.Column(db.Numeric(14, 2), default=0)
    taxable_amount = db.Column(db.Numeric(14, 2), default=0)
    gst_amount = db.Column(db.Numeric(14, 2), default=0)
    cgst = db.Column(db.Numeric(14, 2), default=0)
    sgst = db.Column(db.Numeric(14, 2), default=0)
    igst = db.Column(db.Numeric(14, 2), default=0)
    round_off = db.Column(db.Numeric(8, 2), default=0)
    total_amount = db.Column(db.Numeric(14, 2), default=0)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, onupdate=datetime.utcnow)

    items = relationship(
        "InvoiceItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InvoiceItem.position",
    )
    customer = relationship("Customer", back_populates="invoices")

    __table_args__ = (
        db.UniqueConstraint("user_id", "invoice_number", name="uq_invoice_user_number"),
    )
