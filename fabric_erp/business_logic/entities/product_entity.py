# fabric_erp/business_logic/entities/product_entity.py
from dataclasses import dataclass, field
from typing import Optional
from decimal import Decimal
from .base_entity import BaseEntity
from fabric_erp.constants import StockType, MeasuringUnit, TaxType
from fabric_erp.utils.measuring_units import get_canonical_unit, get_measuring_unit_abbreviation

@dataclass
class ProductEntity(BaseEntity):
    name: str
    sequence_number: Optional[int] = field(default=None)
    stock_type: Optional[StockType] = field(default=None)
    measuring_unit: Optional[MeasuringUnit] = field(default=None) # may be stale for piece/batch stock
    hsn_code: Optional[str] = field(default=None)
    tax_type: TaxType = field(default=TaxType.GST)
    gst_rate: Decimal = field(default_factory=lambda: Decimal("0"))
    min_stock_threshold: Optional[Decimal] = field(default=None)

    @property
    def canonical_unit(self) -> MeasuringUnit:
        return get_canonical_unit(self.stock_type, self.measuring_unit)

    @property
    def unit_abbreviation(self) -> str:
        return get_measuring_unit_abbreviation(self.canonical_unit)
