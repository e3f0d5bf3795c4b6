"""
NetlistController - Orchestrates component add/remove/edit operations.

This module contains no UI dependencies. It manages the NetlistModel
and notifies views of changes through an observer pattern.
"""

import logging
from collections.abc import Sequence
from typing import Any, Callable, Optional

from models.component import DEFAULT_NODES, ComponentData, describe
from models.netlist import NetlistModel

logger = logging.getLogger(__name__)


def resolve_nodes(node_arity: int, nodes: Optional[Sequence] = None) -> list[int]:
    """
    Work out the node list for a new component.

    The first two entries of ``nodes`` give node+ and node-. The controlling
    pair of a four-terminal element is taken from the sequence only when it
    has more than two entries; otherwise it falls back to 1 and 0. Entries
    beyond the type's arity are dropped.
    """
    if nodes is None:
        return list(DEFAULT_NODES[:node_arity])
    if isinstance(nodes, (str, bytes)) or not isinstance(nodes, Sequence):
        raise TypeError(f"nodes must be a sequence of integers, not {type(nodes).__name__}")

    resolved = list(DEFAULT_NODES)
    resolved[0] = nodes[0] if len(nodes) > 0 else resolved[0]
    resolved[1] = nodes[1] if len(nodes) > 1 else resolved[1]
    if len(nodes) > 2:
        resolved[2] = nodes[2]
        resolved[3] = nodes[3] if len(nodes) > 3 else resolved[3]
    return [int(n) for n in resolved[:node_arity]]


class NetlistController:
    """
    Controller for netlist component operations.

    Manages the NetlistModel and notifies registered observers when
    the model changes. Views register callbacks to stay in sync.

    Observer events:
        component_added (ComponentData) - A new component was added
        component_removed (int) - A component was removed (by ID)
        component_updated (ComponentData) - Name, value or nodes changed
        netlist_cleared (None) - The whole netlist was cleared
        example_loaded (str) - An example replaced the netlist
        model_loaded (None) - Netlist loaded from file
        model_saved (None) - Netlist saved to file
        solve_started (None) - Submission to the solver began
        solve_completed (SolveResult) - Submission finished
    """

    def __init__(self, model: Optional[NetlistModel] = None):
        self.model = model if model is not None else NetlistModel()
        self._observers: list[Callable[[str, Any], None]] = []

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in self._observers:
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    # --- Component operations ---

    def add_component(
        self,
        component_type: str,
        name: Optional[str] = None,
        nodes: Optional[Sequence] = None,
        value: Optional[str] = None,
    ) -> ComponentData:
        """
        Create and append a new component.

        Args:
            component_type: one of COMPONENT_TYPES
            name: explicit name; defaults to the type prefix plus the id (R1, E4, ...)
            nodes: explicit node numbers; defaults to [1, 0] (or [1, 0, 1, 0] for VCVS)
            value: explicit raw value; defaults to the type's default value

        Returns:
            The newly created ComponentData.

        Raises:
            UnknownComponentTypeError: If component_type is not recognized.
            TypeError: If nodes is not a sequence.
        """
        descriptor = describe(component_type)
        resolved_nodes = resolve_nodes(descriptor.node_arity, nodes)

        component_id = self.model.allocate_id()
        component = ComponentData(
            component_id=component_id,
            component_type=component_type,
            name=str(name) if name not in (None, "") else descriptor.default_name(component_id),
            nodes=resolved_nodes,
            value=str(value) if value not in (None, "") else descriptor.default_value,
        )
        self.model.add_component(component)
        self._notify("component_added", component)
        return component

    def remove_component(self, component_id: int) -> None:
        """Remove a component by id. Unknown ids are ignored."""
        removed = self.model.remove_component(component_id)
        if removed is not None:
            self._notify("component_removed", component_id)

    def rename_component(self, component_id: int, name: str) -> None:
        component = self.model.get_component(component_id)
        if component is None:
            return
        component.name = str(name)
        self._notify("component_updated", component)

    def update_component_value(self, component_id: int, value: str) -> None:
        """Update a component's raw value."""
        component = self.model.get_component(component_id)
        if component is None:
            return
        component.value = str(value)
        self._notify("component_updated", component)

    def update_component_nodes(self, component_id: int, nodes: Sequence) -> None:
        """
        Replace a component's node numbers.

        Raises:
            ValueError: If the number of nodes does not match the component type,
                or a node is not an integer.
        """
        component = self.model.get_component(component_id)
        if component is None:
            return
        expected = component.get_node_count()
        if len(nodes) != expected:
            raise ValueError(
                f"{component.component_type} needs {expected} nodes, got {len(nodes)}."
            )
        component.nodes = [int(n) for n in nodes]
        self._notify("component_updated", component)

    # --- Netlist operations ---

    def clear_netlist(self) -> None:
        """Clear every component and restart ids at 1."""
        self.model.clear()
        self._notify("netlist_cleared", None)

    def add_records(self, records) -> list[ComponentData]:
        """
        Append solver-style records ({"Componente", "Tipo", "Valor", "Nos"}),
        keeping their explicit names, nodes and raw values.
        """
        added = []
        for record in records:
            added.append(
                self.add_component(
                    record["Tipo"],
                    name=record.get("Componente"),
                    nodes=record.get("Nos"),
                    value=record.get("Valor"),
                )
            )
        return added
