from datetime import date
from decimal import Decimal
from invoices.invoice import Invoice
from invoices.tax_calculator import quantize_money

NO_BROKER = "No Broker"


class ReportService:
    @staticmethod
    def broker_ledger(user_id, year):
        """
        Group the user's invoices dated in year by broker.

        Returns a list of {broker_name, total_invoices, total_amount, invoices}
        in order of each broker's first invoice.
        """
        start_date = date(year, 1, 1)
        end_date = date(year + 1, 1, 1)

        invoices = (
            Invoice.query
            .filter(Invoice.user_id == user_id)
            .filter(Invoice.invoice_date >= start_date, Invoice.invoice_date < end_date)
            .order_by(Invoice.invoice_date, Invoice.id)
            .all()
        )

        brokers = {}
        for inv in invoices:
            broker_name = (inv.broker_name or "").strip() or NO_BROKER
            entry = brokers.setdefault(broker_name, {
                "broker_name": broker_name,
                "total_invoices": 0,
                "total_amount": Decimal("0"),
                "invoices": [],
            })
            amount = inv.total_amount or Decimal("0")
            entry["total_invoices"] += 1
            entry["total_amount"] += amount
            entry["invoices"].append({
                "broker_name": broker_name,
                "invoice_number": inv.invoice_number,
                "invoice_date": inv.invoice_date.isoformat(),
                "customer_name": inv.customer_name or "Unknown",
                "amount": str(quantize_money(amount)),
            })

        summary = list(brokers.values())
        for entry in summary:
            entry["total_amount"] = str(quantize_money(entry["total_amount"]))
        return summary
