from ..models.gc_string_enum import GcStringEnum


class PayoutPayoutType(GcStringEnum):
    UNKNOWN = "unknown"
    MERCHANT = "merchant"
    PARTNER = "partner"
