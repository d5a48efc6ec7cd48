"""Business logic services."""

from erp_accounting.services.ledger_service import LedgerService
from erp_accounting.services.voucher_service import VoucherService
from erp_accounting.services.report_service import ReportService
from erp_accounting.services.inventory_service import InventoryService

__all__ = ["LedgerService", "VoucherService", "ReportService", "InventoryService"]
