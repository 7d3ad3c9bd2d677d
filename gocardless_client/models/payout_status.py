from ..models.gc_string_enum import GcStringEnum


class PayoutStatus(GcStringEnum):
    UNKNOWN = "unknown"
    PENDING = "pending"
    PAID = "paid"
    BOUNCED = "bounced"
