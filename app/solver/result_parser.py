"""
solver/result_parser.py

Maps the solver's JSON response onto plain data classes.
"""

from dataclasses import dataclass, field
from typing import Optional

# Fields a complete answer must carry
REQUIRED_FIELDS = ("Resultados", "Equacoes")


@dataclass
class NodeResult:
    """One final value, e.g. the voltage at a node or a branch current."""

    location: str
    numeric_value: str
    unit: str = ""

    def to_dict(self) -> dict:
        return {"Local": self.location, "ValorNumerico": self.numeric_value, "Unidade": self.unit}


@dataclass
class SuperpositionStep:
    """Partial node values with a single independent source active."""

    active_source: str
    partial_results: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"FonteAtiva": self.active_source, "ResultadosParciais": list(self.partial_results)}


@dataclass
class MeshEquation:
    description: str
    equation: str

    def to_dict(self) -> dict:
        return {"Descricao": self.description, "Equacao": self.equation}


@dataclass
class SolverResponse:
    """
    Structured solver answer.

    ``superposition`` and ``meshes`` are None when the solver omitted the
    field, which is distinct from an empty list.
    """

    equations: list[str] = field(default_factory=list)
    superposition: Optional[list[SuperpositionStep]] = None
    results: list[NodeResult] = field(default_factory=list)
    meshes: Optional[list[MeshEquation]] = None
    node_labels: list = field(default_factory=list)
    raw: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> "SolverResponse":
        superposition = None
        if data.get("Superposicao") is not None:
            superposition = [
                SuperpositionStep(
                    active_source=str(step.get("FonteAtiva", "")),
                    partial_results=list(step.get("ResultadosParciais", [])),
                )
                for step in data["Superposicao"]
            ]

        meshes = None
        if data.get("Malhas") is not None:
            meshes = [
                MeshEquation(description=str(m.get("Descricao", "")), equation=str(m.get("Equacao", "")))
                for m in data["Malhas"]
            ]

        results = [
            NodeResult(
                location=str(r.get("Local", "")),
                numeric_value=str(r.get("ValorNumerico", "")),
                unit=str(r.get("Unidade", "")),
            )
            for r in data.get("Resultados") or []
        ]

        return cls(
            equations=[str(eq) for eq in data.get("Equacoes") or []],
            superposition=superposition,
            results=results,
            meshes=meshes,
            node_labels=list(data.get("NosLista") or []),
            raw=dict(data),
        )

    @property
    def superposition_hidden(self) -> bool:
        """True when the solver skipped superposition (dependent sources present)."""
        return self.superposition is not None and len(self.superposition) == 0

    def superposition_by_node(self) -> list[tuple[str, list[tuple[str, object]]]]:
        """Pair each step's partial results with the node labels in NosLista.

        Returns:
            list of (active_source, [(node_label, value), ...])
        """
        paired = []
        for step in self.superposition or []:
            values = [(str(label), value) for label, value in zip(self.node_labels, step.partial_results)]
            paired.append((step.active_source, values))
        return paired

    def missing_fields(self) -> list[str]:
        """Names of required fields absent from the raw response."""
        return [name for name in REQUIRED_FIELDS if self.raw.get(name) is None]

    def to_dict(self) -> dict:
        data = {
            "Equacoes": list(self.equations),
            "Resultados": [r.to_dict() for r in self.results],
            "NosLista": list(self.node_labels),
        }
        if self.superposition is not None:
            data["Superposicao"] = [s.to_dict() for s in self.superposition]
        if self.meshes is not None:
            data["Malhas"] = [m.to_dict() for m in self.meshes]
        return data
