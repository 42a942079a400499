import json
from decimal import Decimal

import pytest

from config import get_default_seed_file
from models.account import AccountKind
from services.base import Services
from services.seed import build_directory, build_user, load_directory


class TestSeed:
    """Tests for loading the startup directory."""

    def test_bundled_seed(self):
        """Test that the bundled seed has Alice with both accounts."""
        directory = load_directory(get_default_seed_file())

        result = directory.authenticate("Alice", "1234")
        assert result.success is True

        alice = result.value
        assert directory.accounts_of(alice) == ["CHK123", "SAV123"]
        assert alice.get_account("CHK123").kind == AccountKind.CHECKING
        assert alice.get_account("CHK123").balance == Decimal("1000.00")
        assert alice.get_account("SAV123").kind == AccountKind.SAVINGS
        assert alice.get_account("SAV123").balance == Decimal("5000.00")

    def test_float_balance_is_exact(self):
        """Test that JSON float balances become exact decimals."""
        user = build_user(
            {
                "name": "Zed",
                "pin": 42,
                "accounts": [{"id": "C1", "kind": "checking", "balance": 0.1}],
            }
        )

        assert user.pin == "42"
        assert user.get_account("C1").balance == Decimal("0.1")
        assert user.get_account("C1").owner_name == "Zed"

    def test_missing_balance_defaults_to_zero(self):
        """Test that an account without a balance opens empty."""
        user = build_user(
            {"name": "Zed", "pin": "1", "accounts": [{"id": "S1", "kind": "savings"}]}
        )

        assert user.get_account("S1").balance == Decimal("0.00")

    def test_unknown_kind_raises(self):
        """Test that an unknown account kind is rejected."""
        with pytest.raises(ValueError):
            build_user(
                {"name": "Zed", "pin": "1", "accounts": [{"id": "X", "kind": "loan"}]}
            )

    def test_build_directory_registers_all(self):
        """Test that every seed entry is registered."""
        directory = build_directory(
            [{"name": "A", "pin": "1"}, {"name": "B", "pin": "2"}]
        )

        assert [u.name for u in directory.users()] == ["A", "B"]

    def test_load_directory_from_file(self, tmp_path):
        """Test loading a seed file from disk."""
        seed_file = tmp_path / "users.json"
        seed_file.write_text(
            json.dumps(
                [
                    {
                        "name": "Carol",
                        "pin": "5555",
                        "accounts": [
                            {"id": "CHK1", "kind": "checking", "balance": "12.34"}
                        ],
                    }
                ]
            )
        )

        directory = load_directory(seed_file)

        carol = directory.authenticate("Carol", "5555").value
        assert carol.get_account("CHK1").balance == Decimal("12.34")

    def test_missing_file_raises(self, tmp_path):
        """Test that a missing seed file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_directory(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path):
        """Test that a malformed seed file raises a decode error."""
        seed_file = tmp_path / "users.json"
        seed_file.write_text("{not json")

        with pytest.raises(json.JSONDecodeError):
            load_directory(seed_file)

    def test_services_loads_seed_from_config(self, test_config):
        """Test that Services reads the configured seed file."""
        services = Services(test_config)

        assert services.directory.authenticate("Alice", "1234").success is True
        assert services.transfers.directory is services.directory
