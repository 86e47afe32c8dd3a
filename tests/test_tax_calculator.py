from decimal import Decimal
from invoices.tax_calculator import LineItem, calculate_totals, quantize_money


def item(quantity, rate, gst_rate, name="Cloth"):
    return LineItem(
        product_name=name,
        hsn_code="5208",
        unit="Mtr",
        quantity=Decimal(str(quantity)),
        rate=Decimal(str(rate)),
        gst_rate=Decimal(str(gst_rate)),
    )


def test_single_item_same_state_splits_gst_evenly():
    totals = calculate_totals([item(10, 100, 5)], 0, True)

    assert totals.subtotal == Decimal("1000")
    assert totals.discount == Decimal("0")
    assert totals.taxable_amount == Decimal("1000")
    assert totals.gst_amount == Decimal("50")
    assert totals.cgst == Decimal("25")
    assert totals.sgst == Decimal("25")
    assert totals.igst == Decimal("0")
    assert totals.total_amount == Decimal("1050")
    assert totals.round_off == Decimal("0")


def test_inter_state_charges_igst_only():
    totals = calculate_totals([item(10, 100, 5)], 0, False)

    assert totals.igst == Decimal("50")
    assert totals.cgst == Decimal("0")
    assert totals.sgst == Decimal("0")
    assert totals.total_amount == Decimal("1050")


def test_gst_is_computed_per_line_for_mixed_rates():
    items = [item(1, 1000, 5), item(1, 500, 18)]
    totals = calculate_totals(items, 10, True)

    assert totals.subtotal == Decimal("1500")
    assert totals.discount == Decimal("150")
    assert totals.taxable_amount == Decimal("1350")
    # 900 @ 5% + 450 @ 18%
    assert totals.gst_amount == Decimal("126")
    assert totals.cgst + totals.sgst == totals.gst_amount
    assert totals.total_amount == Decimal("1476")


def test_total_rounds_down_with_negative_round_off():
    totals = calculate_totals([item(1, "984.12", 5)], 0, True)

    raw_total = totals.taxable_amount + totals.gst_amount
    assert raw_total == Decimal("1033.326")
    assert totals.total_amount == Decimal("1033")
    assert totals.round_off == Decimal("-0.326")
    assert quantize_money(totals.round_off) == Decimal("-0.33")


def test_half_rupee_rounds_up():
    assert calculate_totals([item(1, 10, 5)], 0, True).total_amount == Decimal("11")
    assert calculate_totals([item(1, "0.50", 0)], 0, True).total_amount == Decimal("1")
    assert calculate_totals([item(1, "2.50", 0)], 0, True).total_amount == Decimal("3")


def test_round_off_stays_within_half_rupee():
    for rate in ("99.99", "123.45", "0.01", "777.77", "10.10"):
        totals = calculate_totals([item(3, rate, 12), item("1.5", rate, 28)], 7, False)
        assert abs(totals.round_off) <= Decimal("0.5")
        assert totals.total_amount == totals.taxable_amount + totals.gst_amount + totals.round_off
        assert totals.total_amount == totals.total_amount.to_integral_value()


def test_decimal_fractions_stay_exact():
    totals = calculate_totals([item(3, "0.1", 0)], 0, True)
    assert totals.subtotal == Decimal("0.3")


def test_full_discount_leaves_nothing_to_tax():
    totals = calculate_totals([item(2, 250, 18)], 100, True)

    assert totals.taxable_amount == Decimal("0")
    assert totals.gst_amount == Decimal("0")
    assert totals.total_amount == Decimal("0")


def test_empty_items_give_zero_totals():
    totals = calculate_totals([], 0, True)

    assert totals.subtotal == Decimal("0")
    assert totals.total_amount == Decimal("0")
    assert totals.round_off == Decimal("0")


def test_to_dict_exposes_every_figure():
    data = calculate_totals([item(10, 100, 5)], 5, True).to_dict()

    assert set(data) == {
        "subtotal", "discount_rate", "discount", "taxable_amount", "gst_amount",
        "cgst", "sgst", "igst", "round_off", "total_amount",
    }
    assert data["discount_rate"] == 5
    assert data["discount"] == Decimal("50")


def test_pre_round_total_of_1033_33():
    totals = calculate_totals([item(1, "1033.33", 0)], 0, True)

    assert totals.total_amount == Decimal("1033")
    assert totals.round_off == Decimal("-0.33")
