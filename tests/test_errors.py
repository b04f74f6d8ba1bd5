"""
Tests for validation errors
"""

import pytest

from simple_bank import InvalidArgumentError, ValidationReason


class TestInvalidArgumentError:
    """Test the error type raised by the banking model"""
    
    def test_carries_reason_and_message(self):
        """Test reason code and message are kept"""
        error = InvalidArgumentError("Debit limit cannot be negative: -1",
                                     ValidationReason.NEGATIVE_DEBIT_LIMIT)
        
        assert error.reason == ValidationReason.NEGATIVE_DEBIT_LIMIT
        assert error.message == "Debit limit cannot be negative: -1"
        assert str(error) == "Debit limit cannot be negative: -1"
    
    def test_is_value_error(self):
        """Test the error can be caught as ValueError"""
        with pytest.raises(ValueError):
            raise InvalidArgumentError("bad", ValidationReason.MISSING_FIELD)
    
    def test_reason_values_are_unique(self):
        """Test every reason code has a distinct value"""
        values = [reason.value for reason in ValidationReason]
        assert len(values) == len(set(values))
