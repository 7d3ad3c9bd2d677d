from ..models.gc_string_enum import GcStringEnum


class PayoutFxFxCurrency(GcStringEnum):
    """Currency in which amounts are paid out after foreign exchange"""

    UNKNOWN = "unknown"
    AUD = "AUD"
    CAD = "CAD"
    DKK = "DKK"
    EUR = "EUR"
    GBP = "GBP"
    NZD = "NZD"
    SEK = "SEK"
    USD = "USD"
