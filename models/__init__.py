from src.extensions import db

# Import all models so migrations can detect them
from user.user import User, UserSession
from user.models import PasswordResetToken
from settings.company_settings import Company, BankAccount
from customers.customer import Customer
from products.product import Product
from invoices.invoice import Invoice
from invoices.invoice_item import InvoiceItem


__all__ = [
    "db",
    "User",
    "UserSession",
    "PasswordResetToken",
    "Company",
    "BankAccount",
    "Customer",
    "Product",
    "Invoice",
    "InvoiceItem",
]
