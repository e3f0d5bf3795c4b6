"""
ComponentData - Pure Python data model for netlist components.

This module contains no UI dependencies. Every component type is described
by a single ComponentTypeDescriptor entry; construction, validation and
serialization all consult the same table instead of branching on the type.

Component types use the solver's type tags as canonical identifiers:
'Resistor', 'Capacitor', 'Inductor', 'VoltageSource', 'CurrentSource', 'VCVS'
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ComponentTypeDescriptor:
    """Static metadata for one component type."""

    type_tag: str
    badge_label: str
    name_prefix: str
    default_value: str
    node_arity: int = 2
    allows_negative_value: bool = True
    value_label: str = "Value"
    node_labels: tuple[str, ...] = ("node+", "node-")

    def default_name(self, component_id: int) -> str:
        return f"{self.name_prefix}{component_id}"


class UnknownComponentTypeError(ValueError):
    """Raised when a type tag is not one of COMPONENT_TYPES."""


_TWO_TERMINAL = ("node+", "node-")

# Palette order
COMPONENT_DESCRIPTORS = {
    "Resistor": ComponentTypeDescriptor(
        "Resistor", "Ω", "R", "1k", allows_negative_value=False, node_labels=_TWO_TERMINAL
    ),
    "Capacitor": ComponentTypeDescriptor(
        "Capacitor", "C", "C", "100u", allows_negative_value=False, node_labels=_TWO_TERMINAL
    ),
    "Inductor": ComponentTypeDescriptor("Inductor", "L", "L", "1m", node_labels=_TWO_TERMINAL),
    "VoltageSource": ComponentTypeDescriptor("VoltageSource", "V", "V", "1k", node_labels=_TWO_TERMINAL),
    "CurrentSource": ComponentTypeDescriptor("CurrentSource", "A", "I", "1k", node_labels=_TWO_TERMINAL),
    "VCVS": ComponentTypeDescriptor(
        "VCVS",
        "G",
        "E",
        "2",
        node_arity=4,
        value_label="Gain",
        node_labels=("out+", "out-", "in+", "in-"),
    ),
}

COMPONENT_TYPES = list(COMPONENT_DESCRIPTORS)

# Independent sources, used by the validator's "no source" warning
SOURCE_TYPES = ("VoltageSource", "CurrentSource")

# Fallback node numbers: node+ = 1, node- = 0 (ground), and the same pair
# again for the controlling input of a VCVS
DEFAULT_NODES = (1, 0, 1, 0)


def describe(component_type: str) -> ComponentTypeDescriptor:
    """Return the descriptor for a type tag.

    Raises:
        UnknownComponentTypeError: If the tag is not a known component type.
    """
    try:
        return COMPONENT_DESCRIPTORS[component_type]
    except (KeyError, TypeError):
        raise UnknownComponentTypeError(
            f"Unknown component type '{component_type}'. Valid types: {', '.join(COMPONENT_TYPES)}"
        ) from None


def _as_text(value) -> str:
    """Stored names and values are always text; a number 100 becomes "100"."""
    return "" if value is None else str(value)


@dataclass
class ComponentData:
    """
    Pure Python data class representing one netlist component.

    ``value`` holds the raw text the user typed (it may carry an
    engineering suffix such as "4.7k" or be blank); suffix expansion
    happens only when the netlist is serialized for the solver.
    """

    component_id: int
    component_type: str
    name: str
    nodes: list[int] = field(default_factory=list)
    value: str = ""

    @property
    def descriptor(self) -> ComponentTypeDescriptor:
        return describe(self.component_type)

    def get_node_count(self) -> int:
        """Return the number of nodes this component type connects to."""
        return self.descriptor.node_arity

    def display_name(self) -> str:
        """Name used in messages; blank names are reported as unnamed."""
        return self.name or "Unnamed component"

    def to_dict(self) -> dict:
        """Serialize component to the netlist file format."""
        return {
            "id": self.component_id,
            "type": self.component_type,
            "name": self.name,
            "nodes": list(self.nodes),
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ComponentData":
        """Deserialize component from the netlist file format."""
        return cls(
            component_id=int(data["id"]),
            component_type=data["type"],
            name=_as_text(data.get("name")),
            nodes=[int(n) for n in data.get("nodes", [])],
            value=_as_text(data.get("value")),
        )

    def __repr__(self) -> str:
        return (
            f"ComponentData(id={self.component_id!r}, type={self.component_type!r}, "
            f"name={self.name!r}, nodes={self.nodes}, value={self.value!r})"
        )
