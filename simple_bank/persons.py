"""
Account Holder Module

A Person is the immutable owner of one or more bank accounts.
"""

from dataclasses import dataclass, asdict
from typing import Dict

from .errors import InvalidArgumentError, ValidationReason


@dataclass(frozen=True)
class Person:
    """
    Account holder identified by name, first name and address.
    Immutable: the same Person may be shared by many accounts.
    """
    name: str
    first_name: str
    address: str

    def __post_init__(self):
        # Only absence is rejected, empty strings are accepted
        if self.name is None or self.first_name is None or self.address is None:
            raise InvalidArgumentError(
                "Person name, first name and address are required",
                ValidationReason.MISSING_FIELD
            )

    @property
    def full_name(self) -> str:
        """Get the holder's full name"""
        return f"{self.first_name} {self.name}"

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.first_name} {self.name} ({self.address})"
