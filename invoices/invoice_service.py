import logging
from datetime import datetime, date
from decimal import Decimal, InvalidOperation
from sqlalchemy.exc import IntegrityError
from src.extensions import db
from invoices.invoice import Invoice
from invoices.invoice_item import InvoiceItem
from invoices.tax_calculator import LineItem, calculate_totals, quantize_money
from customers.customer import Customer
from products.product import GST_RATES
from user.exceptions import ResourceNotFoundException, DuplicateResourceException

logger = logging.getLogger(__name__)


def _text(value, field):
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value.strip()


def _parse_decimal(value, field, index, max_places):
    if value is None or value == "" or isinstance(value, bool):
        raise ValueError(f"Item {index}: {field} is required")
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Item {index}: {field} must be a number")
    if not number.is_finite():
        raise ValueError(f"Item {index}: {field} must be a finite number")
    if number.as_tuple().exponent < -max_places:
        raise ValueError(f"Item {index}: {field} allows at most {max_places} decimal places")
    return number


def parse_line_items(raw_items):
    """
    Validate the items of an invoice payload and build calculator LineItems.
    Raises ValueError naming the first offending item (1-based).
    """
    if not raw_items or not isinstance(raw_items, list):
        raise ValueError("items list is required")

    items = []
    for index, it in enumerate(raw_items, start=1):
        if not isinstance(it, dict):
            raise ValueError(f"Invalid item format: {it}")

        product_name = _text(it.get("product_name"), f"Item {index}: product_name")
        if not product_name:
            raise ValueError(f"Item {index}: product_name is required")

        quantity = _parse_decimal(it.get("quantity"), "quantity", index, 3)
        if quantity <= 0:
            raise ValueError(f"Item {index}: quantity must be greater than zero")

        rate = _parse_decimal(it.get("rate"), "rate", index, 2)
        if rate < 0:
            raise ValueError(f"Item {index}: rate cannot be negative")

        gst_rate = _parse_decimal(it.get("gst_rate", 5), "gst_rate", index, 2)
        if gst_rate not in GST_RATES:
            raise ValueError(f"Item {index}: gst_rate must be one of 0, 5, 12, 18, 28")

        items.append(LineItem(
            product_name=product_name,
            hsn_code=_text(it.get("hsn_code"), f"Item {index}: hsn_code"),
            unit=_text(it.get("unit"), f"Item {index}: unit") or "Pcs",
            quantity=quantity,
            rate=rate,
            gst_rate=gst_rate,
        ))
    return items


def parse_discount_rate(value):
    if value is None or value == "":
        return 0
    try:
        rate = Decimal(str(value))
    except InvalidOperation:
        raise ValueError("discount_rate must be a whole number between 0 and 100")
    if not rate.is_finite() or rate != rate.to_integral_value() or rate < 0 or rate > 100:
        raise ValueError("discount_rate must be a whole number between 0 and 100")
    return int(rate)


def parse_invoice_date(value):
    if not value:
        return date.today()
    try:
        return datetime.strptime(value[:10], "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValueError("invoice_date must be in YYYY-MM-DD format")


class InvoiceService:
    @staticmethod
    def generate_invoice_number(user_id, year=None):
        # Format: INV-YYYY-NNNN, numbered per account
        year = year or datetime.utcnow().year
        count = Invoice.query.filter_by(user_id=user_id).count()
        return f"INV-{year}-{count + 1:04d}"

    @staticmethod
    def invoice_number_taken(user_id, invoice_number):
        return Invoice.query.filter_by(user_id=user_id, invoice_number=invoice_number).first() is not None

    @staticmethod
    def create_invoice(user_id, payload):
        """
        payload: {invoice_number, invoice_date, customer_id, broker_name,
        eway_bill_no, items: [{product_name, hsn_code, unit, quantity, rate,
        gst_rate}], discount_rate, is_same_state}

        Totals are always recomputed from the items; client supplied totals
        are ignored.
        """
        invoice_number = _text(payload.get("invoice_number"), "invoice_number")
        customer_id = payload.get("customer_id")
        if not invoice_number or not customer_id or not payload.get("items"):
            raise ValueError("Missing required fields: invoice_number, customer_id, items")

        items = parse_line_items(payload.get("items"))
        discount_rate = parse_discount_rate(payload.get("discount_rate"))
        invoice_date = parse_invoice_date(payload.get("invoice_date"))
        broker_name = _text(payload.get("broker_name"), "broker_name")
        eway_bill_no = _text(payload.get("eway_bill_no"), "eway_bill_no")
        is_same_state = payload.get("is_same_state", True)
        if not isinstance(is_same_state, bool):
            raise ValueError("is_same_state must be true or false")

        customer = Customer.query.filter_by(id=customer_id, user_id=user_id).first()
        if not customer:
            raise ResourceNotFoundException("Customer not found")

        if InvoiceService.invoice_number_taken(user_id, invoice_number):
            raise DuplicateResourceException(f"Invoice number {invoice_number} already exists")

        totals = calculate_totals(items, discount_rate, is_same_state)
        gst_amount = quantize_money(totals.gst_amount)
        # sgst takes the remainder so cgst + sgst equals gst_amount
        cgst = quantize_money(totals.cgst)
        sgst = gst_amount - cgst if is_same_state else quantize_money(totals.sgst)

        invoice = Invoice(
            user_id=user_id,
            invoice_number=invoice_number,
            invoice_date=invoice_date,
            customer_id=customer.id,
            customer_name=customer.display_name,
            broker_name=broker_name or None,
            eway_bill_no=eway_bill_no or None,
            discount_rate=totals.discount_rate,
            is_same_state=is_same_state,
            subtotal=quantize_money(totals.subtotal),
            discount=quantize_money(totals.discount),
            taxable_amount=quantize_money(totals.taxable_amount),
            gst_amount=gst_amount,
            cgst=cgst,
            sgst=sgst,
            igst=quantize_money(totals.igst),
            round_off=quantize_money(totals.round_off),
            total_amount=quantize_money(totals.total_amount),
        )
        invoice.items = [
            InvoiceItem(
                position=position,
                product_name=item.product_name,
                hsn_code=item.hsn_code,
                unit=item.unit,
                quantity=item.quantity,
                rate=item.rate,
                gst_rate=item.gst_rate,
            )
            for position, item in enumerate(items)
        ]
        db.session.add(invoice)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise DuplicateResourceException(f"Invoice number {invoice_number} already exists")

        logger.info("Invoice %s created for user %s (total %s)", invoice_number, user_id, invoice.total_amount)
        return invoice

    @staticmethod
    def list_invoices(user_id):
        return Invoice.query.filter_by(user_id=user_id).order_by(Invoice.created_at.desc(), Invoice.id.desc()).all()

    @staticmethod
    def get_invoice(user_id, invoice_id):
        invoice = Invoice.query.filter_by(id=invoice_id, user_id=user_id).first()
        if not invoice:
            raise ResourceNotFoundException(f"Invoice with ID {invoice_id} not found")
        return invoice

    @staticmethod
    def update_eway_bill(user_id, invoice_id, eway_bill_no):
        """Attach the e-way bill number, the only change allowed after creation"""
        invoice = InvoiceService.get_invoice(user_id, invoice_id)
        invoice.eway_bill_no = _text(eway_bill_no, "eway_bill_no") or None
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info("E-Way Bill updated for invoice %s", invoice.id)
        return invoice

    @staticmethod
    def serialize_invoice(invoice, include_items=False):
        data = {
            "id": invoice.id,
            "invoice_number": invoice.invoice_number,
            "invoice_date": invoice.invoice_date.isoformat(),
            "customer_id": invoice.customer_id,
            "customer_name": invoice.customer_name or "Unknown",
            "broker_name": invoice.broker_name or "",
            "eway_bill_no": invoice.eway_bill_no or "",
            "total_amount": str(invoice.total_amount),
            "created_at": invoice.created_at.isoformat() if invoice.created_at else None,
        }
        if include_items:
            data.update({
                "discount_rate": invoice.discount_rate,
                "is_same_state": invoice.is_same_state,
                "subtotal": str(invoice.subtotal),
                "discount": str(invoice.discount),
                "taxable_amount": str(invoice.taxable_amount),
                "gst_amount": str(invoice.gst_amount),
                "cgst": str(invoice.cgst),
                "sgst": str(invoice.sgst),
                "igst": str(invoice.igst),
                "round_off": str(invoice.round_off),
                "items": [
                    {
                        "product_name": item.product_name,
                        "hsn_code": item.hsn_code,
                        "unit": item.unit,
                        "quantity": str(item.quantity),
                        "rate": str(item.rate),
                        "gst_rate": str(item.gst_rate),
                    }
                    for item in invoice.items
                ],
            })
        return data
