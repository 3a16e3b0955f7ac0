"""Pydantic schemas for the checkout validation function wire format.

Field names follow the host platform's camelCase payloads through aliases;
snake_case names are accepted too. Unknown fields are ignored.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..domain.validation.models import CartLine as CartLineSnapshot
from ..domain.validation.models import CartSnapshot


class _HostModel(BaseModel):
    class Config:
        populate_by_name = True
        extra = "ignore"


class CartAttributeInput(_HostModel):
    key: str
    value: Optional[str] = None


class ProductInput(_HostModel):
    product_type: Optional[str] = Field(None, alias="productType")


class MerchandiseInput(_HostModel):
    product: Optional[ProductInput] = None


class CartLineInput(_HostModel):
    merchandise: Optional[MerchandiseInput] = None

    @property
    def product_type(self) -> Optional[str]:
        if self.merchandise is None or self.merchandise.product is None:
            return None
        return self.merchandise.product.product_type


class DeliveryAddressInput(_HostModel):
    province: Optional[str] = None
    province_code: Optional[str] = Field(None, alias="provinceCode")

    @property
    def region(self) -> Optional[str]:
        """Province, falling back to the province code; blank counts as absent."""
        for value in (self.province, self.province_code):
            if value and value.strip():
                return value.strip()
        return None


class DeliveryGroupInput(_HostModel):
    delivery_address: Optional[DeliveryAddressInput] = Field(None, alias="deliveryAddress")


class CartInput(_HostModel):
    attributes: list[CartAttributeInput] = Field(default_factory=list)
    lines: list[CartLineInput] = Field(default_factory=list)
    delivery_groups: list[DeliveryGroupInput] = Field(default_factory=list, alias="deliveryGroups")

    def attribute_value(self, key: str) -> Optional[str]:
        """Value of the first attribute with the given key, if any."""
        for attribute in self.attributes:
            if attribute.key == key:
                return attribute.value
        return None

    @property
    def delivery_region(self) -> Optional[str]:
        if not self.delivery_groups:
            return None
        address = self.delivery_groups[0].delivery_address
        return address.region if address else None

    def to_snapshot(self) -> CartSnapshot:
        """Reduce the host cart to the read-only snapshot the rules consume."""
        return CartSnapshot(
            lines=tuple(CartLineSnapshot(product_type=line.product_type) for line in self.lines),
            delivery_region=self.delivery_region,
        )


class RunInput(_HostModel):
    """Input handed to the validation function by the host checkout."""
    cart: CartInput


class FunctionError(BaseModel):
    message: str
    target: str


class HideOperation(BaseModel):
    errors: list[FunctionError]


class Operation(BaseModel):
    hide: HideOperation


class FunctionRunResult(BaseModel):
    """Result returned to the host. No operations means checkout proceeds."""
    operations: list[Operation] = Field(default_factory=list)
