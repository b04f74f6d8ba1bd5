"""
Account Management Module

Bank accounts owned by a Person, with a signed balance guarded by two limits:
the overdraft limit (how far below zero the balance may go) and the debit
limit (the most any single debit may remove). Credits, debits and transfers
validate their arguments and raise InvalidArgumentError on any violation.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Union

from .config import get_config
from .errors import InvalidArgumentError, ValidationReason
from .logging_config import get_logger, log_action
from .persons import Person


Amount = Union[int, float, str, Decimal]

logger = get_logger("simple_bank.accounts")


def to_decimal(value: Amount) -> Decimal:
    """
    Convert an amount to Decimal, going through str so floats stay exact

    Raises:
        InvalidArgumentError: If value is not a finite number
    """
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InvalidArgumentError(
                f"Amount is not a number: {value!r}",
                ValidationReason.INVALID_AMOUNT
            ) from None
    if not value.is_finite():
        raise InvalidArgumentError(
            f"Amount must be finite: {value}",
            ValidationReason.INVALID_AMOUNT
        )
    return value


class Account:
    """
    Bank account with overdraft and per-debit limits

    Invariants:
        number >= 0, owner is set, balance >= -overdraft_limit,
        overdraft_limit >= 0, debit_limit >= 0
    """

    def __init__(
        self,
        number: int,
        owner: Person,
        balance: Amount = 0,
        overdraft_limit: Optional[Amount] = None,
        debit_limit: Optional[Amount] = None
    ):
        """
        Open an account

        Args:
            number: Account number (non-negative)
            owner: Account holder, may be shared with other accounts
            balance: Initial balance, may be negative within the overdraft limit
            overdraft_limit: Overdraft limit (configured default when omitted)
            debit_limit: Per-debit limit (configured default when omitted)
        """
        config = get_config()
        if overdraft_limit is None:
            overdraft_limit = config.default_overdraft_limit
        if debit_limit is None:
            debit_limit = config.default_debit_limit

        balance = to_decimal(balance)
        overdraft_limit = to_decimal(overdraft_limit)
        debit_limit = to_decimal(debit_limit)

        if number < 0:
            self._reject(
                f"Account number cannot be negative: {number}",
                ValidationReason.NEGATIVE_ACCOUNT_NUMBER,
                number=number
            )
        if owner is None:
            self._reject(
                "Account owner is required",
                ValidationReason.MISSING_OWNER,
                number=number
            )
        if balance < -overdraft_limit:
            self._reject(
                f"Initial balance {balance} is below the overdraft limit {overdraft_limit}",
                ValidationReason.BALANCE_BELOW_OVERDRAFT,
                number=number
            )
        if overdraft_limit < 0:
            self._reject(
                f"Overdraft limit cannot be negative: {overdraft_limit}",
                ValidationReason.NEGATIVE_OVERDRAFT_LIMIT,
                number=number
            )
        if debit_limit < 0:
            self._reject(
                f"Debit limit cannot be negative: {debit_limit}",
                ValidationReason.NEGATIVE_DEBIT_LIMIT,
                number=number
            )

        self._number = number
        self._owner = owner
        self._balance = balance
        self._overdraft_limit = overdraft_limit
        self._debit_limit = debit_limit

        self._log("Account opened", "open_account", {
            "owner": owner.full_name,
            "overdraft_limit": str(overdraft_limit),
            "debit_limit": str(debit_limit),
        })

    @property
    def number(self) -> int:
        return self._number

    @property
    def owner(self) -> Person:
        return self._owner

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def overdraft_limit(self) -> Decimal:
        return self._overdraft_limit

    @overdraft_limit.setter
    def overdraft_limit(self, new_limit: Amount) -> None:
        self.set_overdraft_limit(new_limit)

    @property
    def debit_limit(self) -> Decimal:
        return self._debit_limit

    @debit_limit.setter
    def debit_limit(self, new_limit: Amount) -> None:
        self.set_debit_limit(new_limit)

    @property
    def overdraft_amount(self) -> Decimal:
        """Amount currently overdrawn, zero when the balance is not negative"""
        return max(Decimal("0"), -self._balance)

    @property
    def is_overdrawn(self) -> bool:
        """Check if balance is below zero"""
        return self._balance < 0

    @property
    def allowed_debit(self) -> Decimal:
        """
        Largest amount that could be debited right now under both limits.
        Not clamped: reads negative if the balance is already past the overdraft limit.
        """
        return min(self._debit_limit, self._balance + self._overdraft_limit)

    def set_overdraft_limit(self, new_limit: Amount) -> None:
        """
        Replace the overdraft limit

        The new limit cannot be lower than the overdraft currently in use.
        """
        new_limit = to_decimal(new_limit)
        if new_limit < 0:
            self._reject(
                f"Overdraft limit cannot be negative: {new_limit}",
                ValidationReason.NEGATIVE_OVERDRAFT_LIMIT
            )
        if new_limit < abs(min(self._balance, Decimal("0"))):
            self._reject(
                f"Overdraft limit {new_limit} is below the current overdraft {self.overdraft_amount}",
                ValidationReason.OVERDRAFT_LIMIT_BELOW_CURRENT_OVERDRAFT
            )

        old_limit = self._overdraft_limit
        self._overdraft_limit = new_limit
        self._log("Overdraft limit changed", "set_overdraft_limit", {
            "old_limit": str(old_limit),
            "new_limit": str(new_limit),
        })

    def set_debit_limit(self, new_limit: Amount) -> None:
        """Replace the per-debit limit"""
        new_limit = to_decimal(new_limit)
        if new_limit < 0:
            self._reject(
                f"Debit limit cannot be negative: {new_limit}",
                ValidationReason.NEGATIVE_DEBIT_LIMIT
            )

        old_limit = self._debit_limit
        self._debit_limit = new_limit
        self._log("Debit limit changed", "set_debit_limit", {
            "old_limit": str(old_limit),
            "new_limit": str(new_limit),
        })

    def credit(self, amount: Amount) -> None:
        """
        Add a positive amount to the balance

        Raises:
            InvalidArgumentError: If amount is zero or negative
        """
        amount = to_decimal(amount)
        if amount <= 0:
            self._reject(
                f"Credit amount must be positive: {amount}",
                ValidationReason.NON_POSITIVE_AMOUNT
            )

        self._balance += amount
        self._log("Account credited", "credit", {
            "amount": str(amount),
            "balance": str(self._balance),
        })

    def debit(self, amount: Amount) -> None:
        """
        Remove a positive amount from the balance

        Raises:
            InvalidArgumentError: If amount is zero or negative, exceeds the
                debit limit, or would take the balance past the overdraft limit
        """
        amount = to_decimal(amount)
        reason = self._debit_violation(amount)
        if reason == ValidationReason.NON_POSITIVE_AMOUNT:
            self._reject(f"Debit amount must be positive: {amount}", reason)
        elif reason == ValidationReason.DEBIT_LIMIT_EXCEEDED:
            self._reject(
                f"Debit amount {amount} exceeds the debit limit {self._debit_limit}",
                reason
            )
        elif reason == ValidationReason.OVERDRAFT_LIMIT_EXCEEDED:
            self._reject(
                f"Debit of {amount} would take the balance below the overdraft limit {self._overdraft_limit}",
                reason
            )

        self._balance -= amount
        self._log("Account debited", "debit", {
            "amount": str(amount),
            "balance": str(self._balance),
        })

    def can_debit(self, amount: Amount) -> bool:
        """Check if a debit of amount would be accepted, without applying it"""
        try:
            amount = to_decimal(amount)
        except InvalidArgumentError:
            return False
        return self._debit_violation(amount) is None

    def transfer(self, amount: Amount, destination: "Account") -> None:
        """
        Move amount from this account to destination

        Debits this account then credits destination. A rejected debit leaves
        destination untouched. The two steps are not atomic.

        Args:
            amount: Amount to transfer
            destination: Account receiving the funds
        """
        if destination is None:
            self._reject(
                "Transfer destination account is required",
                ValidationReason.MISSING_DESTINATION
            )

        amount = to_decimal(amount)
        self.debit(amount)
        destination.credit(amount)

        self._log("Transfer completed", "transfer", {
            "amount": str(amount),
            "to_account": destination.number,
            "balance": str(self._balance),
        })

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the account with Decimal values as strings"""
        return {
            "number": self._number,
            "owner": self._owner.to_dict(),
            "balance": str(self._balance),
            "overdraft_limit": str(self._overdraft_limit),
            "debit_limit": str(self._debit_limit),
            "overdraft_amount": str(self.overdraft_amount),
        }

    def _debit_violation(self, amount: Decimal) -> Optional[ValidationReason]:
        """First debit rule broken by amount, or None"""
        if amount <= 0:
            return ValidationReason.NON_POSITIVE_AMOUNT
        if amount > self._debit_limit:
            return ValidationReason.DEBIT_LIMIT_EXCEEDED
        if self._balance - amount < -self._overdraft_limit:
            return ValidationReason.OVERDRAFT_LIMIT_EXCEEDED
        return None

    def _log(self, message: str, action: str, extra: Dict[str, Any]) -> None:
        log_action(
            logger, "info", message,
            action=action, resource=f"account:{self._number}", extra=extra
        )

    def _reject(self, message: str, reason: ValidationReason,
                number: Optional[int] = None) -> None:
        if number is None:
            number = self._number
        log_action(
            logger, "warning", f"Rejected: {message}",
            action=reason.value, resource=f"account:{number}",
            extra={"reason": reason.value}
        )
        raise InvalidArgumentError(message, reason)

    def __str__(self) -> str:
        return (
            f"Account(number={self._number}, owner={self._owner}, "
            f"balance={self._balance}, overdraft={self.overdraft_amount})"
        )
