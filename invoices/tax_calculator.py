"""GST totals for an invoice.

All arithmetic is exact Decimal arithmetic; only the grand total is rounded
(half-up, to whole rupees). GST is computed line by line because lines carry
different GST slabs.
"""
from dataclasses import dataclass, asdict
from decimal import Decimal, ROUND_HALF_UP

ZERO = Decimal("0")
HUNDRED = Decimal("100")
TWO = Decimal("2")
PAISE = Decimal("0.01")
RUPEE = Decimal("1")


def to_decimal(value):
    if isinstance(value, Decimal):
        return value
    # str() keeps 0.1 as 0.1 instead of its binary float expansion
    return Decimal(str(value))


def quantize_money(value):
    return to_decimal(value).quantize(PAISE, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class LineItem:
    product_name: str
    hsn_code: str
    unit: str
    quantity: Decimal
    rate: Decimal
    gst_rate: Decimal

    @property
    def amount(self):
        return self.quantity * self.rate


@dataclass(frozen=True)
class TaxBreakdown:
    subtotal: Decimal
    discount_rate: int
    discount: Decimal
    taxable_amount: Decimal
    gst_amount: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    round_off: Decimal
    total_amount: Decimal

    def to_dict(self):
        return asdict(self)


def calculate_totals(items, discount_rate, is_same_state):
    """
    Compute the TaxBreakdown of items.

    items must already be validated (non-negative, finite quantities and
    rates); discount_rate is a whole percentage between 0 and 100.
    """
    rate = to_decimal(discount_rate)
    discount_factor = RUPEE - rate / HUNDRED

    subtotal = sum((item.amount for item in items), ZERO)
    discount = subtotal * rate / HUNDRED
    taxable_amount = subtotal - discount

    gst_amount = ZERO
    for item in items:
        item_taxable = item.amount * discount_factor
        gst_amount += item_taxable * to_decimal(item.gst_rate) / HUNDRED

    if is_same_state:
        cgst = sgst = gst_amount / TWO
        igst = ZERO
    else:
        cgst = sgst = ZERO
        igst = gst_amount

    raw_total = taxable_amount + gst_amount
    total_amount = raw_total.quantize(RUPEE, rounding=ROUND_HALF_UP)
    round_off = total_amount - raw_total

    return TaxBreakdown(
        subtotal=subtotal,
        discount_rate=int(rate),
        discount=discount,
        taxable_amount=taxable_amount,
        gst_amount=gst_amount,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
        round_off=round_off,
        total_amount=total_amount,
    )
