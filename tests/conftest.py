"""Shared pytest fixtures for farmledger tests."""

import json
import tempfile
import os
import pytest

from farmledger.database.factories import create_sqlite_database
from farmledger.domain.finance import FinanceService
from farmledger.domain.records_import import RecordImportService
from farmledger.domain.user import UserService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user_service(temp_db):
    """Create a UserService with a temporary database."""
    return UserService(temp_db)


@pytest.fixture
def finance_service(temp_db):
    """Create a FinanceService with a temporary database."""
    return FinanceService(temp_db)


@pytest.fixture
def import_service(temp_db):
    """Create a RecordImportService with a temporary database."""
    return RecordImportService(temp_db)


@pytest.fixture
def sample_user(user_service):
    """Create a sample user declaring poultry and apiculture."""
    user_id = user_service.create_user(name="alice", occupations=["Poultry", "Apiculture"])
    return user_service.get_user(user_id)


@pytest.fixture
def sample_payload():
    """Backend-shaped payload with sales and expenses around 2024-03-15."""
    return {
        "user": {"sub_type": '{Poultry,"Apiculture"}'},
        "sales": [
            {
                "sales_id": 1,
                "sales_date": "2024-03-15T09:30:00",
                "occupation": "Poultry",
                "items_sold": ["Eggs", "Broilers"],
                "quantities_sold": [10, 2],
                "prices_per_unit": [5, 100],
            },
            {
                "sales_id": 2,
                "sales_date": "2024-03-14",
                "occupation": "Apiculture",
                "items_sold": ["Honey"],
                "quantities_sold": [3],
                "prices_per_unit": [40],
            },
        ],
        "expenses": [
            {
                "expense_id": 10,
                "occupation": "Poultry",
                "category": "Agricultural Feeds",
                "expense": 60,
                "date_created": "2024-03-15",
            },
            {
                "expense_id": 11,
                "occupation": "Poultry",
                "category": "Electricity",
                "expense": "25.5",
                "date_created": "2024-03-15",
            },
            {
                "expense_id": 12,
                "occupation": None,
                "category": "UnknownThing",
                "expense": 999,
                "date_created": "2024-03-15",
            },
        ],
    }


@pytest.fixture
def payload_file(tmp_path, sample_payload):
    """Write sample_payload to a JSON file and return its path."""
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


