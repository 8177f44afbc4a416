from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .utils import sanitize_text


class Item(BaseModel):
    """
    A stocked product. Field order matches the persisted column order;
    aliases are the headers used in exported reports.
    Quantity and prices carry no sign constraint: update writes whatever it is given.
    """

    id: int = Field(..., ge=1, alias="ID")
    name: str = Field(..., alias="Name")
    size_or_variant: str = Field(..., alias="Size/Variant")
    quantity: int = Field(..., alias="Quantity")
    purchase_price: float = Field(..., alias="Purchase Price")
    selling_price: float = Field(..., alias="Selling Price")

    class Config:
        populate_by_name = True
        validate_assignment = True

    @field_validator("name", "size_or_variant")
    @classmethod
    def strip_delimiter(cls, value: str) -> str:
        return sanitize_text(value)


class Sale(BaseModel):
    """
    An immutable sale record. item_name is a snapshot taken at sale time,
    so history stays readable after the item is renamed or deleted.
    """

    id: int = Field(..., ge=1, alias="Sale ID")
    item_id: int = Field(..., alias="Item ID")
    item_name: str = Field(..., alias="Item")
    quantity_sold: int = Field(..., alias="Quantity Sold")
    profit: float = Field(..., alias="Profit")
    date_sold: str = Field(..., alias="Date Sold")

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("item_name", "date_sold")
    @classmethod
    def strip_delimiter(cls, value: str) -> str:
        return sanitize_text(value)


class SaleStatus(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INVALID_QUANTITY = "invalid_quantity"


class SaleResult(BaseModel):
    """Outcome of InventoryStore.sell. profit and sale are only set on SUCCESS."""

    status: SaleStatus
    profit: Optional[float] = None
    sale: Optional[Sale] = None

    @property
    def ok(self) -> bool:
        return self.status is SaleStatus.SUCCESS


class RowIssue(BaseModel):
    """A persisted row that was skipped during load, and why."""

    source: str
    line_number: int
    reason: str
    raw: str


class LoadReport(BaseModel):
    items_loaded: int = 0
    sales_loaded: int = 0
    skipped: list[RowIssue] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    seeded: bool = False

    @property
    def ok(self) -> bool:
        return not self.skipped and not self.errors


class SaveReport(BaseModel):
    items_saved: bool = False
    sales_saved: bool = False
    errors: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.items_saved and self.sales_saved
