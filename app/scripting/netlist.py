"""
Netlist: high-level scripting API for programmatic netlist manipulation.

No UI dependency. Wraps the existing model/controller/solver layers
behind a user-friendly interface.
"""

import json
from pathlib import Path
from typing import Optional, Sequence, Union

from controllers.example_manager import ExampleManager
from controllers.file_controller import netlist_from_data, validate_netlist_data
from controllers.netlist_controller import NetlistController
from controllers.solve_controller import SolveController, SolveResult
from models.component import COMPONENT_TYPES, ComponentData
from models.netlist import NetlistModel
from solver.csv_exporter import export_solver_results


class Netlist:
    """A scriptable netlist that can be built, validated, solved and saved.

    Wraps NetlistModel, NetlistController and SolveController to provide
    a clean API for headless workflows.

    Args:
        model: An existing NetlistModel to wrap. If None, creates an empty netlist.
        client: Solver client to submit with. If None, a SolverClient is
            created on first use from the environment settings.
    """

    def __init__(self, model: Optional[NetlistModel] = None, client=None):
        self._model = model if model is not None else NetlistModel()
        self._controller = NetlistController(self._model)
        self._solver = SolveController(self._model, self._controller, client=client)

    # --- Factory methods ---

    @classmethod
    def load(cls, path: Union[str, Path], client=None) -> "Netlist":
        """Load a netlist from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
            ValueError: If the JSON structure is invalid.
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        validate_netlist_data(data)
        return cls(netlist_from_data(data), client=client)

    @classmethod
    def from_example(cls, key: str, manager: Optional[ExampleManager] = None, client=None) -> "Netlist":
        """Create a netlist populated from a built-in or user example.

        Raises:
            KeyError: If no example has that key.
        """
        netlist = cls(client=client)
        manager = manager or ExampleManager()
        if not manager.load_example(key, netlist._controller):
            raise KeyError(f"Unknown example '{key}'")
        return netlist

    # --- Component operations ---

    def add_component(
        self,
        component_type: str,
        value: Optional[str] = None,
        nodes: Optional[Sequence[int]] = None,
        name: Optional[str] = None,
    ) -> int:
        """Add a component to the netlist.

        Args:
            component_type: One of the supported types (e.g. "Resistor",
                "VoltageSource", "VCVS"). See ``Netlist.component_types``.
            value: Raw value (e.g. "1k", "4.7n"). If None, uses the
                default value for the component type.
            nodes: Node numbers. VCVS takes (out+, out-, in+, in-).
            name: Component name. If None, uses the type prefix plus the id.

        Returns:
            The new component's id.

        Raises:
            ValueError: If the component_type is not recognized.
        """
        comp = self._controller.add_component(component_type, name=name, nodes=nodes, value=value)
        return comp.component_id

    def remove_component(self, component_id: int) -> None:
        self._controller.remove_component(component_id)

    def update_value(self, component_id: int, value: str) -> None:
        """Update a component's raw value (e.g. "2.2k")."""
        self._controller.update_component_value(component_id, value)

    def update_nodes(self, component_id: int, nodes: Sequence[int]) -> None:
        self._controller.update_component_nodes(component_id, nodes)

    def rename(self, component_id: int, name: str) -> None:
        self._controller.rename_component(component_id, name)

    def clear(self) -> None:
        """Remove every component; ids restart at 1."""
        self._controller.clear_netlist()

    # --- Submission ---

    def validate(self) -> SolveResult:
        """Validate the netlist without contacting the solver."""
        return self._solver.validate_netlist()

    def solve(self) -> SolveResult:
        """Validate, serialize and submit the netlist.

        Returns:
            A SolveResult. On success, result.data is a SolverResponse.

        Raises:
            No exceptions; errors are reported via SolveResult.success and
            SolveResult.error. Call result.raise_for_error() to get one.
        """
        return self._solver.solve()

    def to_payload(self) -> list:
        """The records that solve() would send, in netlist order."""
        return self._solver.generate_payload()

    def to_json(self) -> str:
        return self._solver.generate_payload_json()

    # --- Persistence ---

    def save(self, path: Union[str, Path]) -> None:
        """Save the netlist to a JSON file."""
        path = Path(path)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self._model.to_dict(), f, indent=2, ensure_ascii=False)

    @staticmethod
    def result_to_csv(result: SolveResult, path: Union[str, Path]) -> None:
        """Write a successful result's final values to a CSV file.

        Raises:
            ValueError: If the result is a failure.
        """
        if not result.success or result.data is None:
            raise ValueError(f"Cannot export failed or empty result: {result.error}")
        Path(path).write_text(export_solver_results(result.data))

    # --- Properties ---

    @property
    def components(self) -> list[ComponentData]:
        """All components, in netlist order."""
        return list(self._model.components)

    @property
    def model(self) -> NetlistModel:
        """Direct access to the underlying NetlistModel."""
        return self._model

    @property
    def component_types(self) -> list[str]:
        return list(COMPONENT_TYPES)

    def __len__(self) -> int:
        return len(self._model)

    def __repr__(self) -> str:
        names = ", ".join(c.name for c in self._model.components)
        return f"Netlist([{names}])"
