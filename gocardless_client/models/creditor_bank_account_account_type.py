from ..models.gc_string_enum import GcStringEnum


class CreditorBankAccountAccountType(GcStringEnum):
    """Bank account type, required for USD-denominated bank accounts"""

    UNKNOWN = "unknown"
    SAVINGS = "savings"
    CHECKING = "checking"
