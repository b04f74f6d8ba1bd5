"""
Tests for environment-driven configuration
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from simple_bank import config as config_module
from simple_bank.accounts import Account
from simple_bank.config import BankConfig, get_config, reload_config
from simple_bank.persons import Person


@pytest.fixture
def restore_config():
    """Put the global configuration back after a test reloads it"""
    saved = config_module.config
    yield
    config_module.config = saved


class TestBankConfig:
    """Test BankConfig defaults and overrides"""
    
    def test_defaults(self, monkeypatch):
        """Test built-in defaults"""
        monkeypatch.delenv("BANK_DEFAULT_OVERDRAFT_LIMIT", raising=False)
        monkeypatch.delenv("BANK_DEFAULT_DEBIT_LIMIT", raising=False)
        settings = BankConfig()
        
        assert settings.default_overdraft_limit == Decimal('800')
        assert settings.default_debit_limit == Decimal('1000')
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
    
    def test_env_override(self, monkeypatch):
        """Test BANK_ prefixed environment variables override defaults"""
        monkeypatch.setenv("BANK_DEFAULT_OVERDRAFT_LIMIT", "250.50")
        monkeypatch.setenv("bank_log_level", "DEBUG")
        settings = BankConfig()
        
        assert settings.default_overdraft_limit == Decimal('250.50')
        assert settings.log_level == "DEBUG"
    
    def test_negative_limit_rejected(self, monkeypatch):
        """Test a negative configured limit fails at load"""
        monkeypatch.setenv("BANK_DEFAULT_DEBIT_LIMIT", "-1")
        
        with pytest.raises(ValidationError):
            BankConfig()
    
    def test_reload_config(self, monkeypatch, restore_config):
        """Test reload picks up environment changes"""
        monkeypatch.setenv("BANK_DEFAULT_DEBIT_LIMIT", "1500")
        
        reloaded = reload_config()
        
        assert reloaded is get_config()
        assert reloaded.default_debit_limit == Decimal('1500')
    
    def test_accounts_use_configured_defaults(self, monkeypatch, restore_config):
        """Test new accounts pick up configured default limits"""
        monkeypatch.setenv("BANK_DEFAULT_OVERDRAFT_LIMIT", "100")
        monkeypatch.setenv("BANK_DEFAULT_DEBIT_LIMIT", "50")
        reload_config()
        owner = Person("Dupont", "Jean", "123 rue de la Paix")
        
        account = Account(1001, owner)
        assert account.overdraft_limit == Decimal('100')
        assert account.debit_limit == Decimal('50')
        
        # Explicit limits still win
        explicit = Account(1002, owner, 0, 800, 1000)
        assert explicit.overdraft_limit == Decimal('800')
        assert explicit.debit_limit == Decimal('1000')
    
    def test_settings_config(self):
        """Test settings use the BANK_ prefix and optional .env file"""
        assert BankConfig.model_config["env_prefix"] == "BANK_"
        assert BankConfig.model_config["env_file"] == ".env"
        assert BankConfig.model_config["case_sensitive"] is False
