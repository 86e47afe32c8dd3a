import os
from datetime import date, datetime
from decimal import Decimal
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup
from invoices.number_words import number_to_words
from invoices.tax_calculator import quantize_money, to_decimal, ZERO, TWO

TEMPLATE_DIR = os.path.dirname(os.path.abspath(__file__))

COPY_LABELS = {
    "original": "Original for Recipient",
    "duplicate": "Duplicate for Transporter",
    "triplicate": "Triplicate for Supplier",
}

DEFAULT_COMPANY = {
    "company_name": "Shiv Sahai Shri Kishan",
    "company_type": "WHOLESALER CLOTH MERCHANT",
    "company_address": "1st Floor, Mukherjee Market, Subhash Bazaar, Agra 282003 U.P., INDIA",
    "gstin": "09AADFS1992C1Z6",
    "phone1": "9411924901",
    "phone2": "9410003450",
}

FALLBACK_BANK_ACCOUNTS = [
    {"bank_name": "PUNJAB NATIONAL BANK", "account_number": "0030002100090414", "ifsc_code": "PUNB0003000"},
    {"bank_name": "CANARA BANK, SIKANDRA, AGRA", "account_number": "3306214000016", "ifsc_code": "CNRB0006030"},
]

TERMS = [
    "All subject to Agra Jurisdiction.",
    "Our goods once sold will not be taken back or exchanged.",
    "If the bill is not paid within 45 days, interest @24% P.A will be charged extra.",
]


def format_money(value):
    return str(quantize_money(value if value is not None else ZERO))


def format_quantity(value):
    return f"{to_decimal(value).normalize():f}"


def format_percent(value):
    return f"{to_decimal(value).normalize():f}"


_env = Environment(loader=FileSystemLoader(TEMPLATE_DIR), autoescape=select_autoescape(["html"]))
_env.filters["money"] = format_money


def format_invoice_date(value):
    if isinstance(value, (date, datetime)):
        return value.strftime("%d/%m/%Y")
    if not value:
        return ""
    return datetime.strptime(str(value)[:10], "%Y-%m-%d").strftime("%d/%m/%Y")


def resolve_copy_labels(copies):
    """Map copy keys to their printed labels, keeping the requested order."""
    if not copies:
        return [None]
    labels = []
    for key in copies:
        if not isinstance(key, str) or key not in COPY_LABELS:
            raise ValueError(f"Unknown invoice copy: {key}")
        labels.append(COPY_LABELS[key])
    return labels


def _company_context(company):
    if company is None:
        return dict(DEFAULT_COMPANY)
    context = {}
    for field, default in DEFAULT_COMPANY.items():
        value = getattr(company, field, None)
        # second phone is optional on a configured company
        if field == "phone2":
            context[field] = value or ""
        else:
            context[field] = value or default
    return context


def _bank_context(company):
    accounts = list(getattr(company, "bank_accounts", None) or [])
    if not accounts:
        return FALLBACK_BANK_ACCOUNTS
    return [
        {"bank_name": b.bank_name, "account_number": b.account_number, "ifsc_code": b.ifsc_code}
        for b in accounts
    ]


def _customer_context(invoice, customer):
    if customer is None:
        return {"name": invoice.customer_name or "N/A", "address": "", "city_state": "", "gstin": "N/A"}
    city_state = ", ".join(part for part in (customer.city, customer.state) if part)
    return {
        "name": customer.business_name or customer.contact_person or invoice.customer_name or "N/A",
        "address": customer.address or "",
        "city_state": city_state,
        "gstin": customer.gst_number or "N/A",
    }


def _tax_labels(items):
    rates = {to_decimal(item.gst_rate) for item in items}
    if len(rates) != 1:
        return {"cgst": "CGST", "sgst": "SGST", "igst": "IGST"}
    rate = rates.pop()
    half = format_percent(rate / TWO)
    return {
        "cgst": f"CGST @ {half}%",
        "sgst": f"SGST @ {half}%",
        "igst": f"IGST @ {format_percent(rate)}%",
    }


def _totals_context(invoice):
    round_off = to_decimal(invoice.round_off or ZERO)
    discount = to_decimal(invoice.discount or ZERO)
    return {
        "subtotal": invoice.subtotal,
        "discount": discount,
        "discount_rate": invoice.discount_rate,
        "has_discount": discount > ZERO,
        "taxable_amount": invoice.taxable_amount,
        "is_same_state": invoice.is_same_state,
        "cgst": invoice.cgst,
        "sgst": invoice.sgst,
        "igst": invoice.igst,
        "round_off_sign": "-" if round_off < ZERO else "+",
        "round_off_abs": abs(round_off),
        "total_amount": invoice.total_amount,
    }


def build_context(invoice, customer, company, base_url):
    items = list(invoice.items)
    return {
        "company": _company_context(company),
        "bank_accounts": _bank_context(company),
        "customer": _customer_context(invoice, customer),
        "invoice": {
            "number": invoice.invoice_number,
            "date": format_invoice_date(invoice.invoice_date),
            "eway_bill_no": invoice.eway_bill_no,
            "broker_name": invoice.broker_name,
        },
        "items": [
            {
                "product_name": item.product_name,
                "hsn_code": item.hsn_code or "",
                "unit": item.unit or "",
                "quantity": format_quantity(item.quantity),
                "rate": item.rate,
                "amount": to_decimal(item.quantity) * to_decimal(item.rate),
            }
            for item in items
        ],
        "totals": _totals_context(invoice),
        "tax_labels": _tax_labels(items),
        "amount_in_words": number_to_words(Decimal(invoice.total_amount or 0)),
        "terms": TERMS,
        "logo_url": f"{(base_url or '').rstrip('/')}/ganesh.png",
    }


def render_invoice_html(invoice, customer, company, base_url, copies=None, download_mode=False):
    """
    Render a stored invoice as a standalone HTML document.

    The invoice body is rendered once; with copies (e.g. ["original",
    "duplicate"]) it is repeated under each copy label with page breaks in
    between. Only stored values are printed, so the output for a given
    invoice never changes.
    """
    labels = resolve_copy_labels(copies)
    context = build_context(invoice, customer, company, base_url)
    body = _env.get_template("invoice_body.html").render(**context)
    return _env.get_template("invoice_template.html").render(
        body=Markup(body),
        pages=[{"label": label} for label in labels],
        invoice_number=invoice.invoice_number,
        download_mode=download_mode,
    )
