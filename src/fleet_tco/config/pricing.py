"""Price catalog — part number → unit price."""

from __future__ import annotations

from pydantic import BaseModel, Field, PrivateAttr


class PriceListItem(BaseModel):
    """One priced part in a catalog."""

    part_number: str = Field(min_length=1)
    description: str | None = None
    category: str | None = None
    unit_price: float = Field(ge=0, description="List price per unit before discount")
    unit: str = "each"


class PriceList(BaseModel):
    """The active price catalog for a scenario."""

    id: int | None = None
    name: str = "Price list"
    items: list[PriceListItem] = Field(default_factory=list)

    _index: dict[str, PriceListItem] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: object) -> None:
        self._index = {item.part_number: item for item in self.items}

    def lookup(self, part_number: str | None) -> PriceListItem | None:
        """Return the catalog entry, or ``None`` when the part is unpriced."""
        if not part_number:
            return None
        return self._index.get(part_number)

    def unit_price(self, part_number: str | None) -> float | None:
        item = self.lookup(part_number)
        return item.unit_price if item is not None else None
