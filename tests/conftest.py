"""Shared pytest fixtures for all tests."""

from decimal import Decimal

import pytest

from config import Config, get_default_seed_file
from models.account import Account, AccountKind
from models.user import User
from services.base import Services
from services.directory import Directory


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to temporary directories.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "teller",
        log_level="DEBUG",
        log_dir=tmp_path / "teller" / "logs",
        seed_file=get_default_seed_file(),
    )


@pytest.fixture
def checking():
    """Checking account with a 1000.00 opening balance."""
    return Account("CHK123", "Alice", AccountKind.CHECKING, Decimal("1000.00"))


@pytest.fixture
def savings():
    """Savings account with a 5000.00 opening balance."""
    return Account("SAV123", "Alice", AccountKind.SAVINGS, Decimal("5000.00"))


@pytest.fixture
def alice(checking, savings):
    """User owning the checking and savings fixtures."""
    user = User(name="Alice", pin="1234")
    user.add_account(checking)
    user.add_account(savings)
    return user


@pytest.fixture
def directory(alice):
    """Directory with Alice and a second user, Bob, registered."""
    directory = Directory()
    directory.register(alice)

    bob = User(name="Bob", pin="0000")
    bob.add_account(Account("CHK900", "Bob", AccountKind.CHECKING, Decimal("50.00")))
    directory.register(bob)

    return directory


@pytest.fixture
def services(test_config, directory):
    """Create a Services container around the test directory.

    Args:
        test_config: Test configuration fixture.
        directory: Directory fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, directory=directory)
