"""Items, the backpack inventory, worn equipment and crafting recipes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable

INVENTORY_SIZE = 28

Rect = tuple[float, float, float, float]


@dataclass(frozen=True)
class ItemSlot:
    """A stack of one kind of item; an empty name means an empty slot."""

    name: str = ""
    count: int = 0
    item_type: str = ""
    frame: Rect = (0.0, 0.0, 0.0, 0.0)

    @property
    def is_empty(self) -> bool:
        return self.name == ""


EMPTY = ItemSlot()


@dataclass(frozen=True)
class Recipe:
    """Items consumed to craft an output item."""

    name: str
    inputs: tuple[ItemSlot, ...]
    output: ItemSlot


class EquipmentSlot(str, Enum):
    HEAD = "Head"
    BODY = "Body"
    LEGS = "Legs"
    WEAPON = "Weapon"
    SHIELD = "Shield"


def slot_for_item_type(item_type: str) -> EquipmentSlot | None:
    """The slot an item type is worn in, or None if it cannot be worn."""
    try:
        return EquipmentSlot(item_type)
    except ValueError:
        return None


_ITEM_TYPES = {"Logs": "Material", "Ore": "Material", "Fish": "Food"}


def infer_item_type(name: str) -> str:
    return _ITEM_TYPES.get(name, "Misc")


class Inventory:
    """A fixed-size backpack of item stacks."""

    def __init__(self, texture: object = None) -> None:
        self.texture = texture
        self._slots: list[ItemSlot] = [EMPTY] * INVENTORY_SIZE

    @property
    def slots(self) -> tuple[ItemSlot, ...]:
        return tuple(self._slots)

    def add(self, slot: ItemSlot) -> bool:
        """Stack onto the first matching or empty slot; False if there is no room."""
        for i, current in enumerate(self._slots):
            if current.is_empty:
                self._slots[i] = slot
                return True
            if current.name == slot.name:
                self._slots[i] = replace(current, count=current.count + slot.count)
                return True
        return False

    def add_by_name(self, name: str, count: int, item_type: str) -> bool:
        return self.add(ItemSlot(name=name, count=count, item_type=item_type))

    def get(self, index: int) -> ItemSlot:
        """The slot at index; an empty slot when out of range."""
        return self._slots[index] if 0 <= index < INVENTORY_SIZE else EMPTY

    def set(self, index: int, slot: ItemSlot) -> None:
        """Replace the slot at index; out-of-range indexes are ignored."""
        if 0 <= index < INVENTORY_SIZE:
            self._slots[index] = slot

    def has_items(self, requirements: Iterable[ItemSlot]) -> bool:
        return all(
            sum(s.count for s in self._slots if s.name == req.name) >= req.count
            for req in requirements
        )

    def consume_items(self, requirements: Iterable[ItemSlot]) -> None:
        """Remove the required amounts, emptying stacks front to back."""
        for req in requirements:
            remaining = req.count
            for i, current in enumerate(self._slots):
                if current.name != req.name:
                    continue
                if current.count > remaining:
                    self._slots[i] = replace(current, count=current.count - remaining)
                    break
                remaining -= current.count
                self._slots[i] = replace(current, name="", count=0)


@dataclass
class Equipment:
    """The items currently worn, one per slot."""

    slots: dict[EquipmentSlot, ItemSlot] = field(
        default_factory=lambda: {slot: EMPTY for slot in EquipmentSlot}
    )

    def equip(self, slot: EquipmentSlot, item: ItemSlot) -> ItemSlot:
        """Wear one item of the stack and return what is left of it."""
        self.slots[slot] = replace(item, count=1)
        return replace(item, count=item.count - 1) if item.count > 1 else EMPTY

    def unequip(self, slot: EquipmentSlot) -> ItemSlot:
        item = self.slots.get(slot, EMPTY)
        self.slots[slot] = EMPTY
        return item