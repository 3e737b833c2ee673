"""ShoppingListLine: one derived line of the shopping list (never stored)."""


class ShoppingListLine:
    def __init__(self, name: str, total_quantity: int = 0, unit: str = ""):
        self.name = name
        self.total_quantity = total_quantity
        self.unit = unit

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingListLine):
            return NotImplemented
        return (self.name, self.total_quantity, self.unit) == (other.name, other.total_quantity, other.unit)

    def __hash__(self) -> int:
        return hash((self.name, self.total_quantity, self.unit))

    def __str__(self) -> str:
        return f"{self.total_quantity} {self.unit} of {self.name}"

    def __repr__(self) -> str:
        return f"ShoppingListLine({self.name!r}, {self.total_quantity}, {self.unit!r})"

    def to_dict(self):
        return {
            "name": self.name,
            "total_quantity": self.total_quantity,
            "unit": self.unit,
        }
