from ..models.gc_string_enum import GcStringEnum


class PayoutCurrency(GcStringEnum):
    UNKNOWN = "unknown"
    AUD = "AUD"
    CAD = "CAD"
    DKK = "DKK"
    EUR = "EUR"
    GBP = "GBP"
    NZD = "NZD"
    SEK = "SEK"
    USD = "USD"
