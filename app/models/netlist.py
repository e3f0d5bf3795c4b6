"""
NetlistModel - Central data store for the netlist being edited.

This module contains no UI dependencies. It holds the ordered component
list and the id counter; insertion order is significant because it becomes
the order of records submitted to the solver.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .component import ComponentData


@dataclass
class NetlistModel:
    """
    Ordered collection of components plus the id counter.

    Ids are handed out by allocate_id() and are never reused until clear()
    resets the counter to 1.
    """

    components: list[ComponentData] = field(default_factory=list)
    next_id: int = 1

    def allocate_id(self) -> int:
        """Return the next component id and advance the counter."""
        component_id = self.next_id
        self.next_id += 1
        return component_id

    # --- Component operations ---

    def add_component(self, component: ComponentData) -> None:
        """Append a component to the end of the netlist."""
        self.components.append(component)
        if component.component_id >= self.next_id:
            self.next_id = component.component_id + 1

    def remove_component(self, component_id: int) -> Optional[ComponentData]:
        """Remove a component by id. Returns the removed component, or None."""
        for i, comp in enumerate(self.components):
            if comp.component_id == component_id:
                return self.components.pop(i)
        return None

    def get_component(self, component_id: int) -> Optional[ComponentData]:
        for comp in self.components:
            if comp.component_id == component_id:
                return comp
        return None

    def find_by_name(self, name: str) -> list[ComponentData]:
        """Return every component carrying the given name (names may repeat)."""
        return [c for c in self.components if c.name == name]

    def clear(self) -> None:
        """Remove every component and reset the id counter."""
        self.components.clear()
        self.next_id = 1

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[ComponentData]:
        return iter(self.components)

    # --- Serialization ---

    def to_dict(self) -> dict:
        """Serialize the netlist to a dictionary (netlist file format)."""
        return {
            "components": [c.to_dict() for c in self.components],
            "next_id": self.next_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "NetlistModel":
        """Deserialize a netlist, keeping component order and ids."""
        model = cls()
        for comp_data in data.get("components", []):
            model.add_component(ComponentData.from_dict(comp_data))
        model.next_id = max(model.next_id, int(data.get("next_id", 1)))
        return model
