# fabric_erp/data_access/base_repository.py

from typing import Generic, TypeVar, Type, List, Optional, Dict, Any, Union, Sequence
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from dataclasses import fields, MISSING
import logging

from fabric_erp.constants import DiscountType, DISCOUNT_TYPE_ALIASES
from fabric_erp.data_access.database_manager import DatabaseManager
from fabric_erp.utils.date_converter import to_date
from fabric_erp.utils.numbers import to_decimal

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Read-only access to one table. Rows are mapped onto the dataclass
    `model_type`, converting Decimal, Enum, date and bool columns on the way.
    """

    def __init__(self, db_manager: DatabaseManager, model_type: Type[T], table_name: str):
        self.db_manager = db_manager
        self.model_type = model_type
        self._table_name = table_name
        logger.debug(f"BaseRepository for {self._table_name} initialized.")

    def get_by_id(self, entity_id: int) -> Optional[T]:
        query = f"SELECT * FROM {self._table_name} WHERE id = ?"
        row = self.db_manager.fetch_one(query, (entity_id,))
        return self._entity_from_row(row) if row else None

    def get_all(self, order_by: Optional[str] = None) -> List[T]:
        query = f"SELECT * FROM {self._table_name}"
        if order_by:
            query += f" ORDER BY {order_by}"
        return self._fetch_entities(query)

    def find_by_criteria(self, criteria: Dict[str, Any], order_by: Optional[str] = None) -> List[T]:
        """
        Equality match per column; a (operator, value) tuple allows other
        comparisons, e.g. {"status": ("IN", ["open", "partially_paid"])}.
        """
        if not criteria:
            return self.get_all(order_by=order_by)

        conditions = []
        params: List[Any] = []
        for key, value in criteria.items():
            if isinstance(value, tuple) and len(value) == 2:
                operator, val = value
                operator = str(operator).upper()
                if operator in ('IN', 'NOT IN') and isinstance(val, (list, tuple)):
                    conditions.append(f"{key} {operator} ({', '.join('?' * len(val))})")
                    params.extend(self._to_db_value(v) for v in val)
                elif operator == 'BETWEEN' and isinstance(val, (list, tuple)) and len(val) == 2:
                    conditions.append(f"{key} BETWEEN ? AND ?")
                    params.extend(self._to_db_value(v) for v in val)
                else:
                    conditions.append(f"{key} {operator} ?")
                    params.append(self._to_db_value(val))
            else:
                conditions.append(f"{key} = ?")
                params.append(self._to_db_value(value))

        query = f"SELECT * FROM {self._table_name} WHERE " + " AND ".join(conditions)
        if order_by:
            query += f" ORDER BY {order_by}"
        logger.debug(f"BaseRepository.find_by_criteria: Query: {query}, Values: {tuple(params)}")
        return self._fetch_entities(query, params)

    def _fetch_entities(self, query: str, params: Sequence[Any] = ()) -> List[T]:
        rows = self.db_manager.fetch_all(query, tuple(params))
        return [self._entity_from_row(row) for row in rows if row]

    @staticmethod
    def _to_db_value(value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, Decimal):
            return float(value)
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        return value

    def _entity_from_row(self, row: Dict[str, Any]) -> T:
        """
        Builds the dataclass from a row. A NULL in a required column is an
        integrity error; a value that does not convert (unknown enum member,
        malformed number or date) is logged and replaced by the field default.
        """
        entity_data = {}

        for f in fields(self.model_type):
            if not f.init:
                continue

            field_name = f.name
            field_type = f.type
            value_from_db = row.get(field_name)
            has_default = f.default is not MISSING or f.default_factory is not MISSING

            is_optional = getattr(field_type, '__origin__', None) is Union and type(None) in getattr(field_type, '__args__', [])
            if value_from_db is None:
                if not has_default and not is_optional:
                    raise ValueError(
                        f"Database integrity error: NULL value found for required field '{field_name}' "
                        f"in table '{self._table_name}' for row: {row}"
                    )
                continue

            actual_type = field_type
            if is_optional:
                possible_types = [arg for arg in getattr(field_type, '__args__', []) if arg is not type(None)]
                if possible_types:
                    actual_type = possible_types[0]

            converted = self._convert(actual_type, value_from_db)
            if converted is None:
                logger.warning(
                    f"Type conversion failed for field '{field_name}' with value {value_from_db!r} "
                    f"in table '{self._table_name}'. Using the field default."
                )
                if has_default or is_optional:
                    continue
            entity_data[field_name] = converted

        return self.model_type(**entity_data)

    @staticmethod
    def _convert(actual_type: Any, value: Any) -> Any:
        if isinstance(actual_type, type) and issubclass(actual_type, Enum):
            if actual_type is DiscountType and str(value).lower() in DISCOUNT_TYPE_ALIASES:
                return DISCOUNT_TYPE_ALIASES[str(value).lower()]
            try:
                return actual_type(value)
            except ValueError:
                return None
        if actual_type is Decimal:
            return to_decimal(value, default=None)
        if actual_type is date:
            return to_date(value)
        if actual_type is datetime and isinstance(value, str):
            try:
                return datetime.fromisoformat(value)
            except ValueError:
                return None
        if actual_type is bool:
            return bool(value)
        return value
