from ..models.gc_string_enum import GcStringEnum


class BalanceBalanceType(GcStringEnum):
    UNKNOWN = "unknown"
    CONFIRMED_FUNDS = "confirmed_funds"
    PENDING_PAYOUTS = "pending_payouts"
    PENDING_PAYMENTS_SUBMITTED = "pending_payments_submitted"
