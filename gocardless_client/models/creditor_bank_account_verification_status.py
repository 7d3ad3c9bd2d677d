from ..models.gc_string_enum import GcStringEnum


class CreditorBankAccountVerificationStatus(GcStringEnum):
    UNKNOWN = "unknown"
    PENDING = "pending"
    IN_REVIEW = "in_review"
    SUCCESSFUL = "successful"
    COULD_NOT_VERIFY = "could_not_verify"
