"""
Validation Errors Module

A single error kind is raised by the banking model: InvalidArgumentError,
carrying a reason code naming the rule that was violated.
"""

from enum import Enum


class ValidationReason(Enum):
    """Reason codes for rejected arguments"""
    MISSING_FIELD = "missing_field"
    NEGATIVE_ACCOUNT_NUMBER = "negative_account_number"
    MISSING_OWNER = "missing_owner"
    BALANCE_BELOW_OVERDRAFT = "balance_below_overdraft"
    NEGATIVE_OVERDRAFT_LIMIT = "negative_overdraft_limit"
    NEGATIVE_DEBIT_LIMIT = "negative_debit_limit"
    OVERDRAFT_LIMIT_BELOW_CURRENT_OVERDRAFT = "overdraft_limit_below_current_overdraft"
    NON_POSITIVE_AMOUNT = "non_positive_amount"
    DEBIT_LIMIT_EXCEEDED = "debit_limit_exceeded"
    OVERDRAFT_LIMIT_EXCEEDED = "overdraft_limit_exceeded"
    MISSING_DESTINATION = "missing_destination"
    INVALID_AMOUNT = "invalid_amount"


class InvalidArgumentError(ValueError):
    """
    Raised when an operation receives an argument that breaks a model rule.

    Subclasses ValueError so callers catching ValueError keep working.
    """

    def __init__(self, message: str, reason: ValidationReason):
        super().__init__(message)
        self.message = message
        self.reason = reason

    def __str__(self) -> str:
        return self.message
