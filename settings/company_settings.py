from datetime import datetime
from src.extensions import db

class Company(db.Model):
    __tablename__ = "companies"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)

    # Business Information
    company_name = db.Column(db.String(255), nullable=False)
    company_type = db.Column(db.String(255), nullable=True)
    company_address = db.Column(db.Text, nullable=True)
    gstin = db.Column(db.String(15), nullable=False)

    # Contact Details
    phone1 = db.Column(db.String(50), nullable=False)
    phone2 = db.Column(db.String(50), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="company")
    bank_accounts = db.relationship(
        "BankAccount",
        back_populates="company",
        cascade="all, delete-orphan",
        order_by="BankAccount.position",
    )

class BankAccount(db.Model):
    __tablename__ = "bank_accounts"

    id = db.Column(db.Integer, primary_key=True)
    company_id = db.Column(db.Integer, db.ForeignKey("companies.id"), nullable=False)
    position = db.Column(db.Integer, nullable=False, default=0)
    bank_name = db.Column(db.String(255), nullable=False)
    account_number = db.Column(db.String(50), nullable=False)
    ifsc_code = db.Column(db.String(20), nullable=False)

    company = db.relationship("Company", back_populates="bank_accounts")
