"""
GST summary of sales (output tax) and purchases (input credit).

All supplies are treated as intra-state: the tax on each invoice
is split evenly into CGST and SGST and IGST stays zero. The
inter-state buckets are part of the report shape but are never
filled, because the customer's and supplier's states are not
recorded.
"""

import datetime as dt
from collections.abc import Iterable
from decimal import Decimal, ROUND_HALF_UP

from erp_accounting.schemas.reports import GSTBucket, GSTReport, GSTSummary

ZERO = Decimal("0")
RATE_PRECISION = Decimal("0.01")


def derived_gst_rate(document) -> Decimal:
    """
    GST percent implied by an invoice: tax / taxable value × 100,
    rounded to two places so that e.g. 18 and 18.0000001 group
    together. Zero when the rate or taxable value is not positive.
    """
    if document.rate <= 0 or document.total_value <= 0:
        return ZERO
    rate = document.gst_amount / document.total_value * 100
    return rate.quantize(RATE_PRECISION, rounding=ROUND_HALF_UP)


def summarize_by_rate(documents: Iterable) -> list[GSTSummary]:
    """One intra-state summary per distinct rate, in order of first appearance."""
    by_rate: dict[Decimal, dict[str, Decimal]] = {}

    for doc in documents:
        rate = derived_gst_rate(doc)
        half = doc.gst_amount / 2
        acc = by_rate.setdefault(rate, {
            "taxable_value": ZERO,
            "cgst_amount": ZERO,
            "sgst_amount": ZERO,
            "total_amount": ZERO,
        })
        acc["taxable_value"] += doc.total_value
        acc["cgst_amount"] += half
        acc["sgst_amount"] += half
        acc["total_amount"] += doc.grand_total

    return [
        GSTSummary(gst_rate=rate, igst_amount=ZERO, **acc)
        for rate, acc in by_rate.items()
    ]


def gst_report(
    sales: Iterable,
    purchases: Iterable,
    start_date: dt.date,
    end_date: dt.date,
) -> GSTReport:
    outward = summarize_by_rate(
        s for s in sales if start_date <= s.date <= end_date
    )
    inward = summarize_by_rate(
        p for p in purchases if start_date <= p.date <= end_date
    )

    total_tax_payable = sum((g.cgst_amount + g.sgst_amount for g in outward), ZERO)
    total_tax_paid = sum((g.cgst_amount + g.sgst_amount for g in inward), ZERO)

    return GSTReport(
        outward_taxable=GSTBucket(inter_state=[], intra_state=outward),
        inward_taxable=GSTBucket(inter_state=[], intra_state=inward),
        total_tax_payable=total_tax_payable,
        total_tax_paid=total_tax_paid,
        net_tax_liability=total_tax_payable - total_tax_paid,
    )
