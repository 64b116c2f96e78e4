"""Tests for importing backend payloads."""

from datetime import date

import pytest

from farmledger.domain.errors import NotFoundError, ValidationError
from farmledger.domain.records_import import parse_expense, parse_sale


def test_parse_sale_backend_fields():
    sale = parse_sale(
        {
            "sales_id": "7",
            "sales_date": "2024-03-15T10:00:00",
            "occupation": "Poultry",
            "items_sold": ["Eggs"],
            "quantities_sold": [10],
            "prices_per_unit": [5],
        }
    )

    assert sale.sale_id == 7
    assert sale.sale_date == date(2024, 3, 15)
    assert sale.occupation == "Poultry"
    assert sale.items_sold == ("Eggs",)
    assert sale.prices_per_unit == (5,)


def test_parse_sale_without_prices_or_occupation():
    sale = parse_sale({"sales_date": "2024-03-15", "items_sold": "Eggs", "occupation": ""})

    assert sale.prices_per_unit is None
    assert sale.items_sold == ()
    assert sale.occupation is None
    assert sale.sale_id is None


@pytest.mark.parametrize(
    "data,message",
    [
        ({}, "missing sales_date"),
        ({"sales_date": "yesterday-ish"}, "invalid sales_date"),
        ({"sales_date": 20240315}, "invalid sales_date"),
        ({"sales_date": "2024-03-15", "sales_id": "abc"}, "sales_id must be an integer"),
    ],
)
def test_parse_sale_rejects_bad_fields(data, message):
    with pytest.raises(ValidationError, match=message):
        parse_sale(data)


@pytest.mark.parametrize("value", [2**70, -(2**64), str(2**63)])
def test_parse_sale_rejects_out_of_range_id(value):
    with pytest.raises(ValidationError, match="out of range"):
        parse_sale({"sales_date": "2024-03-15", "sales_id": value})


@pytest.mark.parametrize("value", [1.9, True, "1.5", "+"])
def test_parse_sale_rejects_fractional_and_boolean_ids(value):
    with pytest.raises(ValidationError, match="must be an integer"):
        parse_sale({"sales_date": "2024-03-15", "sales_id": value})


@pytest.mark.parametrize("value,expected", [(7, 7), (7.0, 7), (" 12 ", 12), ("-3", -3)])
def test_parse_sale_accepts_whole_number_ids(value, expected):
    assert parse_sale({"sales_date": "2024-03-15", "sales_id": value}).sale_id == expected


def test_import_payload_oversized_id_is_a_record_error(import_service, temp_db, sample_user):
    payload = {
        "sales": [
            {"sales_id": 1, "sales_date": "2024-03-15"},
            {"sales_id": 2**70, "sales_date": "2024-03-15"},
        ],
        "expenses": [
            {
                "expense_id": 2**70,
                "category": "Electricity",
                "expense": 5,
                "date_created": "2024-03-15",
            }
        ],
    }

    result = import_service.import_payload(payload, sample_user.id)

    assert result["imported_sales"] == 1
    assert result["imported_expenses"] == 0
    assert len(result["errors"]) == 2
    assert result["errors"][0].startswith("Sale #2: sales_id")
    assert result["errors"][1].startswith("Expense #1: expense_id")
    assert len(temp_db.list_sales(sample_user.id)) == 1


def test_parse_expense_coerces_amount():
    expense = parse_expense(
        {"category": " Electricity ", "expense": "oops", "date_created": "2024-03-15"}
    )

    assert expense.category == "Electricity"
    assert expense.amount == 0.0


def test_parse_expense_requires_category():
    with pytest.raises(ValidationError, match="missing category"):
        parse_expense({"expense": 10, "date_created": "2024-03-15"})


def test_import_payload(import_service, temp_db, sample_user, sample_payload):
    result = import_service.import_payload(sample_payload, sample_user.id)

    assert result["imported_sales"] == 2
    assert result["imported_expenses"] == 3
    assert result["skipped"] == 0
    assert result["errors"] == []
    assert result["occupations"] == ["Poultry", "Apiculture"]

    sales = temp_db.list_sales(sample_user.id)
    assert [s.sale_id for s in sales] == [2, 1]
    assert sales[1].quantities_sold == (10.0, 2.0)
    expenses = temp_db.list_expenses(sample_user.id)
    assert [e.amount for e in expenses] == [60.0, 25.5, 999.0]


def test_import_payload_skips_duplicates(import_service, sample_user, sample_payload):
    import_service.import_payload(sample_payload, sample_user.id)
    result = import_service.import_payload(sample_payload, sample_user.id)

    assert result["imported_sales"] == 0
    assert result["imported_expenses"] == 0
    assert result["skipped"] == 5


def test_import_payload_collects_record_errors(import_service, temp_db, sample_user):
    payload = {
        "sales": [
            {"sales_id": 1, "sales_date": "2024-03-15"},
            {"sales_id": 2, "sales_date": "garbage"},
            "not a sale",
        ],
        "expenses": [{"expense_id": 3, "expense": 10, "date_created": "2024-03-15"}],
    }

    result = import_service.import_payload(payload, sample_user.id)

    assert result["imported_sales"] == 1
    assert result["imported_expenses"] == 0
    assert len(result["errors"]) == 3
    assert result["errors"][0].startswith("Sale #2: invalid sales_date")
    assert result["errors"][1] == "Sale #3: not an object"
    assert result["errors"][2] == "Expense #1: missing category"
    assert result["occupations"] is None


def test_import_payload_reads_data_envelope(import_service, user_service, sample_user):
    payload = {"data": {"user": {"sub_type": ["Fishery"]}}}

    result = import_service.import_payload(payload, sample_user.id)

    assert result["occupations"] == ["Fishery"]
    assert user_service.get_user(sample_user.id).occupations == ("Fishery",)


def test_import_payload_requires_object(import_service, sample_user):
    with pytest.raises(ValidationError, match="JSON object"):
        import_service.import_payload([1, 2], sample_user.id)


def test_import_payload_unknown_user(import_service, sample_payload):
    with pytest.raises(NotFoundError):
        import_service.import_payload(sample_payload, 404)


def test_import_file(import_service, sample_user, payload_file):
    result = import_service.import_file(payload_file, sample_user.id)

    assert result["imported_sales"] == 2
    assert result["imported_expenses"] == 3


def test_import_file_invalid_json(import_service, sample_user, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValidationError, match="not valid JSON"):
        import_service.import_file(path, sample_user.id)


def test_import_file_missing(import_service, sample_user, tmp_path):
    with pytest.raises(FileNotFoundError):
        import_service.import_file(tmp_path / "missing.json", sample_user.id)
