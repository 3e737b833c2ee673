"""Ingredient domain entity: name, integer quantity, unit."""


class Ingredient:
    def __init__(self, name: str = "", quantity: int = 0, unit: str = ""):
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        self.name = name
        self.quantity = quantity
        self.unit = unit

    def key(self):
        '''Identity used when merging ingredients into a shopping list.'''
        return (self.name, self.unit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.quantity, self.unit) == (other.name, other.quantity, other.unit)

    def __hash__(self) -> int:
        return hash((self.name, self.quantity, self.unit))

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            name=d.get("name", ""),
            quantity=int(d.get("quantity", 0) or 0),
            unit=d.get("unit", ""),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
        }
