from src.extensions import db
from sqlalchemy.orm import relationship

class InvoiceItem(db.Model):
    __tablename__ = "invoice_items"

    id = db.Column(db.Integer, primary_key=True)
    invoice_id = db.Column(db.Integer, db.ForeignKey("invoices.id"), nullable=False)
    position = db.Column(db.Integer, nullable=False, default=0)
    product_name = db.Column(db.String(255), nullable=False)
    hsn_code = db.Column(db.String(20), nullable=True)
    unit = db.Column(db.String(20), nullable=True)
    quantity = db.Column(db.Numeric(12, 3), nullable=False)
    rate = db.Column(db.Numeric(12, 2), nullable=False)
    gst_rate = db.Column(db.Numeric(5, 2), nullable=False, default=0)  # percentage

    invoice = relationship("Invoice", back_populates="items")

    @property
    def amount(self):
        return self.quantity * self.rate
