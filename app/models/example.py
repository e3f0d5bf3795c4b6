"""Data class for example netlists (built-in and user-defined)."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExamplePreset:
    """A named netlist used to populate the working document.

    Components are stored as solver-style records with raw values::

        {"Componente": "R1", "Tipo": "Resistor", "Valor": "1k", "Nos": [1, 2]}
    """

    key: str
    title: str = ""
    description: str = ""
    components: tuple[dict, ...] = field(default_factory=tuple)
    builtin: bool = False

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "title": self.title,
            "description": self.description,
            "components": [dict(c, Nos=list(c["Nos"])) for c in self.components],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExamplePreset":
        return cls(
            key=data["key"],
            title=data.get("title", ""),
            description=data.get("description", ""),
            components=tuple(dict(c) for c in data.get("components", [])),
            builtin=False,
        )
