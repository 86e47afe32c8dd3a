from datetime import date
from decimal import Decimal
from types import SimpleNamespace
import pytest
from templates.invoice_renderer import render_invoice_html, resolve_copy_labels, format_money


def make_invoice(**overrides):
    fields = dict(
        invoice_number="INV-2024-0007",
        invoice_date=date(2024, 3, 5),
        customer_name="Ram Garments",
        broker_name=None,
        eway_bill_no=None,
        discount_rate=0,
        is_same_state=True,
        subtotal=Decimal("1000.00"),
        discount=Decimal("0.00"),
        taxable_amount=Decimal("1000.00"),
        gst_amount=Decimal("50.00"),
        cgst=Decimal("25.00"),
        sgst=Decimal("25.00"),
        igst=Decimal("0.00"),
        round_off=Decimal("0.00"),
        total_amount=Decimal("1050.00"),
        items=[
            SimpleNamespace(
                product_name="Cotton Shirting", hsn_code="5208", unit="Mtr",
                quantity=Decimal("10.000"), rate=Decimal("100.00"), gst_rate=Decimal("5.00"),
            )
        ],
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def make_customer(**overrides):
    fields = dict(
        business_name="Ram Garments", contact_person="Ram Prasad", address="12 Raja Mandi",
        city="Agra", state="Uttar Pradesh", gst_number="09ABCDE1234F1Z5",
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def make_company(**overrides):
    fields = dict(
        company_name="Kishan Textiles", company_type="Cloth Merchant", company_address="Agra",
        gstin="09AADFS1992C1Z6", phone1="9411924901", phone2="",
        bank_accounts=[SimpleNamespace(bank_name="STATE BANK OF INDIA", account_number="1234567890", ifsc_code="SBIN0000001")],
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def render(invoice=None, customer=None, company=None, copies=None):
    return render_invoice_html(
        invoice or make_invoice(),
        customer if customer is not None else make_customer(),
        company,
        "http://billing.test/",
        copies=copies,
    )


def test_same_state_invoice_shows_cgst_and_sgst():
    html = render(company=make_company())

    assert "TAX INVOICE" in html
    assert "INV-2024-0007" in html
    assert "05/03/2024" in html
    assert "CGST @ 2.5%" in html
    assert "SGST @ 2.5%" in html
    assert "igst-row" not in html
    assert "&#8377;1050.00" in html
    assert "One Thousand Fifty Rupees Only" in html
    assert 'src="http://billing.test/ganesh.png"' in html


def test_inter_state_invoice_shows_igst_only():
    invoice = make_invoice(is_same_state=False, cgst=Decimal("0.00"), sgst=Decimal("0.00"), igst=Decimal("50.00"))
    html = render(invoice=invoice, company=make_company())

    assert "IGST @ 5%" in html
    assert "cgst-row" not in html
    assert "sgst-row" not in html


def test_mixed_rates_use_plain_tax_labels():
    items = make_invoice().items + [
        SimpleNamespace(product_name="Silk", hsn_code="5007", unit="Mtr",
                        quantity=Decimal("1"), rate=Decimal("500.00"), gst_rate=Decimal("12.00"))
    ]
    html = render(invoice=make_invoice(items=items), company=make_company())

    assert "Add: CGST</td>" in html
    assert "@ 2.5%" not in html


def test_optional_rows():
    plain = render(company=make_company())
    assert "discount-row" not in plain
    assert "eway-bill" not in plain
    assert "Broker Name" not in plain

    invoice = make_invoice(
        discount_rate=10, discount=Decimal("100.00"), eway_bill_no="EWB123456789", broker_name="Mohan Lal",
    )
    html = render(invoice=invoice, company=make_company())
    assert "Less: Discount (10%)" in html
    assert "-&#8377;100.00" in html
    assert "EWB123456789" in html
    assert "Mohan Lal" in html


def test_round_off_is_signed():
    down = render(invoice=make_invoice(round_off=Decimal("-0.33")), company=make_company())
    assert "-&#8377;0.33" in down

    up = render(invoice=make_invoice(round_off=Decimal("0.40")), company=make_company())
    assert "+&#8377;0.40" in up


def test_company_banks_are_listed():
    company = make_company(bank_accounts=[
        SimpleNamespace(bank_name="STATE BANK OF INDIA", account_number="111", ifsc_code="SBIN0000001"),
        SimpleNamespace(bank_name="HDFC BANK", account_number="222", ifsc_code="HDFC0000002"),
    ])
    html = render(company=company)

    assert "STATE BANK OF INDIA" in html
    assert "HDFC BANK" in html
    assert "PUNJAB NATIONAL BANK" not in html


def test_missing_company_uses_default_letterhead_and_fallback_banks():
    html = render(company=None)

    assert "Shiv Sahai Shri Kishan" in html
    assert "09AADFS1992C1Z6" in html
    assert "9410003450" in html
    assert "PUNJAB NATIONAL BANK" in html
    assert "0030002100090414" in html
    assert "CANARA BANK, SIKANDRA, AGRA" in html
    assert "CNRB0006030" in html


def test_company_without_bank_accounts_uses_fallback_banks():
    html = render(company=make_company(bank_accounts=[]))

    assert "Kishan Textiles" in html
    assert "PUNJAB NATIONAL BANK" in html
    assert "3306214000016" in html
    assert "STATE BANK OF INDIA" not in html


def test_customer_without_gstin_shows_na():
    html = render(customer=make_customer(gst_number=None), company=make_company())
    assert "N/A" in html


def test_customer_text_is_escaped():
    html = render(customer=make_customer(business_name="<script>alert(1)</script>"), company=make_company())

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_multi_copy_repeats_body_under_each_label():
    html = render(company=make_company(), copies=["original", "duplicate", "triplicate"])

    assert html.count('class="invoice"') == 3
    assert html.count('class="page-break"') == 2
    original = html.index("Original for Recipient")
    duplicate = html.index("Duplicate for Transporter")
    triplicate = html.index("Triplicate for Supplier")
    assert original < duplicate < triplicate


def test_single_copy_has_no_label():
    html = render(company=make_company())

    assert html.count('class="invoice"') == 1
    assert "copy-label" not in html.split("</style>")[1]


def test_unknown_copy_is_rejected():
    with pytest.raises(ValueError):
        resolve_copy_labels(["quadruplicate"])
    with pytest.raises(ValueError):
        resolve_copy_labels([["original"]])
    with pytest.raises(ValueError):
        resolve_copy_labels([1])


def test_rendering_is_idempotent():
    assert render(company=make_company()) == render(company=make_company())


def test_money_always_has_two_decimals():
    assert format_money(Decimal("1050")) == "1050.00"
    assert format_money(Decimal("0.005")) == "0.01"
    assert format_money(None) == "0.00"
