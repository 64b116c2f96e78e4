"""Import of backend sales and expense payloads into the record store."""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Optional

from farmledger.database.base import Database
from farmledger.domain.entities import ExpenseRecord, SaleRecord
from farmledger.domain.errors import ValidationError, invalid_record
from farmledger.domain.user import UserService
from farmledger.utils.amount_parser import coerce_number
from farmledger.utils.date_parser import to_local_date

logger = logging.getLogger(__name__)


# IDs are stored in a signed 64-bit integer column
MAX_RECORD_ID = 2**63 - 1
MIN_RECORD_ID = -(2**63)


def _optional_id(value: Any, field: str) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        record_id = None
    elif isinstance(value, int):
        record_id = value
    elif isinstance(value, float) and value.is_integer():
        record_id = int(value)
    elif isinstance(value, str) and value.strip().removeprefix("-").isdecimal():
        record_id = int(value.strip())
    else:
        record_id = None
    if record_id is None:
        raise ValidationError(f"{field} must be an integer, got {value!r}")
    if not MIN_RECORD_ID <= record_id <= MAX_RECORD_ID:
        raise ValidationError(f"{field} {record_id} is out of range")
    return record_id


def _record_date(value: Any, field: str):
    if value is None or value == "":
        raise ValidationError(f"missing {field}")
    if not isinstance(value, (str, date)):
        raise ValidationError(f"invalid {field} {value!r}: expected an ISO date string")
    try:
        return to_local_date(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValidationError(f"invalid {field} {value!r}: {e}")


def _list_or_empty(value: Any) -> tuple:
    return tuple(value) if isinstance(value, (list, tuple)) else ()


def parse_sale(data: dict[str, Any]) -> SaleRecord:
    """Build a SaleRecord from a backend sale object.

    Line-item arrays that are missing or not arrays become empty, so the sale
    is still stored and simply totals 0.

    Raises:
        ValidationError: If the sale date or ID is unusable
    """
    prices = data.get("prices_per_unit")
    return SaleRecord(
        sale_id=_optional_id(data.get("sales_id"), "sales_id"),
        sale_date=_record_date(data.get("sales_date"), "sales_date"),
        occupation=data.get("occupation") or None,
        items_sold=_list_or_empty(data.get("items_sold")),
        quantities_sold=_list_or_empty(data.get("quantities_sold")),
        prices_per_unit=tuple(prices) if isinstance(prices, (list, tuple)) else None,
    )


def parse_expense(data: dict[str, Any]) -> ExpenseRecord:
    """Build an ExpenseRecord from a backend expense object.

    Raises:
        ValidationError: If the date, category or ID is unusable
    """
    category = data.get("category")
    if not isinstance(category, str) or not category.strip():
        raise ValidationError("missing category")
    return ExpenseRecord(
        expense_id=_optional_id(data.get("expense_id"), "expense_id"),
        date_created=_record_date(data.get("date_created"), "date_created"),
        occupation=data.get("occupation") or None,
        category=category.strip(),
        amount=coerce_number(data.get("expense")),
    )


class RecordImportService:
    """Service for importing backend JSON payloads."""

    def __init__(self, db: Database):
        """Initialize record import service.

        Args:
            db: Database instance
        """
        self.db = db
        self.user_service = UserService(db)

    def import_file(self, path: str | Path, user_id: int) -> dict[str, Any]:
        """Import sales and expenses from a JSON file.

        Args:
            path: Path to a JSON document shaped like the backend responses
            user_id: User the records belong to

        Returns:
            Import statistics, see :meth:`import_payload`

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the file is not a JSON object
            NotFoundError: If the user doesn't exist
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            try:
                payload = json.load(f)
            except json.JSONDecodeError as e:
                raise ValidationError(f"{path} is not valid JSON: {e}")
        return self.import_payload(payload, user_id)

    def import_payload(self, payload: Any, user_id: int) -> dict[str, Any]:
        """Import a decoded payload.

        The payload may carry ``sales`` and/or ``expenses`` arrays, and a
        ``user`` object whose ``sub_type`` replaces the declared occupations.
        Any of these may also sit under a ``data`` envelope.

        Returns:
            Dict with import statistics:
            - imported_sales: number of sales stored
            - imported_expenses: number of expenses stored
            - skipped: records whose backend ID was already stored
            - occupations: the declared occupations after import, or None
              if the payload carried no user object
            - errors: list of error messages for records that were rejected
        """
        if not isinstance(payload, dict):
            raise ValidationError("Payload must be a JSON object")
        self.user_service.require_user(user_id)

        envelope = payload.get("data")
        if isinstance(envelope, dict):
            payload = {**envelope, **payload}

        stats: dict[str, Any] = {
            "imported_sales": 0,
            "imported_expenses": 0,
            "skipped": 0,
            "occupations": None,
            "errors": [],
        }

        user = payload.get("user")
        if isinstance(user, dict) and "sub_type" in user:
            stats["occupations"] = self.user_service.set_occupations(
                user_id, user["sub_type"]
            )

        for index, data in enumerate(payload.get("sales") or [], start=1):
            try:
                if not isinstance(data, dict):
                    raise ValidationError("not an object")
                sale = parse_sale(data)
            except ValidationError as e:
                stats["errors"].append(invalid_record("Sale", index, str(e)))
                continue
            if sale.sale_id is not None and self.db.sale_exists(user_id, sale.sale_id):
                stats["skipped"] += 1
                continue
            self.db.add_sale(user_id, sale)
            stats["imported_sales"] += 1

        for index, data in enumerate(payload.get("expenses") or [], start=1):
            try:
                if not isinstance(data, dict):
                    raise ValidationError("not an object")
                expense = parse_expense(data)
            except ValidationError as e:
                stats["errors"].append(invalid_record("Expense", index, str(e)))
                continue
            if expense.expense_id is not None and self.db.expense_exists(
                user_id, expense.expense_id
            ):
                stats["skipped"] += 1
                continue
            self.db.add_expense(user_id, expense)
            stats["imported_expenses"] += 1

        for message in stats["errors"]:
            logger.warning("Rejected record for user %s: %s", user_id, message)
        logger.info(
            "Imported %d sale(s) and %d expense(s) for user %s",
            stats["imported_sales"],
            stats["imported_expenses"],
            user_id,
        )
        return stats
