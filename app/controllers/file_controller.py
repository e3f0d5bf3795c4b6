"""
FileController - Handles netlist file I/O.

Two layouts are accepted when loading:

* the native document ``{"components": [...], "next_id": n}`` written by
  save_netlist(), where each component has id, type, name, nodes and value;
* a bare JSON array of solver-style records
  ``[{"Componente": "R1", "Tipo": "Resistor", "Valor": "1k", "Nos": [1, 2]}, ...]``
  holding raw (unexpanded) values. Ids are assigned in file order.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from models.component import COMPONENT_DESCRIPTORS, COMPONENT_TYPES
from models.netlist import NetlistModel

logger = logging.getLogger(__name__)


def _check_type_and_nodes(label, comp_type, nodes):
    if comp_type not in COMPONENT_DESCRIPTORS:
        raise ValueError(f"{label} has unknown type '{comp_type}'. Valid types: {', '.join(COMPONENT_TYPES)}.")
    if not isinstance(nodes, list) or not all(isinstance(n, int) and not isinstance(n, bool) for n in nodes):
        raise ValueError(f"{label} nodes must be a list of integers.")
    expected = COMPONENT_DESCRIPTORS[comp_type].node_arity
    if len(nodes) != expected:
        raise ValueError(f"{label} ({comp_type}) needs {expected} nodes, found {len(nodes)}.")


def _check_text(label, field_name, value):
    # Numbers are accepted and stored as text; null means "use the default"
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError(f"{label} field '{field_name}' must be text or a number.")


def validate_records(records) -> None:
    """
    Validate a list of solver-style records ({"Componente", "Tipo", "Valor", "Nos"}).

    Raises ValueError with a descriptive message if anything is wrong.
    """
    if not isinstance(records, list):
        raise ValueError("Records must be a list.")
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"Record #{i + 1} is not an object.")
        for key in ("Componente", "Tipo", "Nos"):
            if key not in record:
                raise ValueError(f"Record #{i + 1} is missing required field '{key}'.")
        label = f"Record '{record['Componente']}'"
        _check_text(label, "Componente", record["Componente"])
        _check_text(label, "Valor", record.get("Valor"))
        _check_type_and_nodes(label, record["Tipo"], record["Nos"])


def validate_netlist_data(data) -> None:
    """
    Validate JSON structure before loading.

    Raises ValueError with a descriptive message if anything is wrong.
    """
    if isinstance(data, list):
        validate_records(data)
        return

    if not isinstance(data, dict):
        raise ValueError("File does not contain a valid netlist.")

    if "components" not in data or not isinstance(data["components"], list):
        raise ValueError("Missing or invalid 'components' list.")

    comp_ids = set()
    for i, comp in enumerate(data["components"]):
        if not isinstance(comp, dict):
            raise ValueError(f"Component #{i + 1} is not an object.")
        for key in ("id", "type", "nodes"):
            if key not in comp:
                raise ValueError(f"Component #{i + 1} is missing required field '{key}'.")
        if not isinstance(comp["id"], int) or comp["id"] < 1:
            raise ValueError(f"Component #{i + 1} id must be a positive integer.")
        if comp["id"] in comp_ids:
            raise ValueError(f"Component id {comp['id']} is used more than once.")
        comp_ids.add(comp["id"])
        label = f"Component '{comp.get('name', comp['id'])}'"
        _check_text(label, "name", comp.get("name"))
        _check_text(label, "value", comp.get("value"))
        _check_type_and_nodes(label, comp["type"], comp["nodes"])

    next_id = data.get("next_id", 1)
    if not isinstance(next_id, int) or next_id < 1:
        raise ValueError("'next_id' must be a positive integer.")


def netlist_from_data(data) -> NetlistModel:
    """Build a NetlistModel from already validated file data."""
    if isinstance(data, list):
        from controllers.netlist_controller import NetlistController

        controller = NetlistController()
        controller.add_records(data)
        return controller.model
    return NetlistModel.from_dict(data)


class FileController:
    """
    Manages netlist file I/O.

    Handles saving/loading netlist data as JSON and tracking the current
    file path for quick-save.
    """

    def __init__(self, model: Optional[NetlistModel] = None, netlist_ctrl=None):
        self.model = model if model is not None else NetlistModel()
        self.netlist_ctrl = netlist_ctrl  # For observer notifications
        self.current_file: Optional[Path] = None

    def new_netlist(self) -> None:
        """Clear the netlist and reset file state."""
        self.model.clear()
        self.current_file = None

    def save_netlist(self, filepath) -> None:
        """
        Save netlist to JSON file.

        Raises:
            OSError: If the file cannot be written.
        """
        filepath = Path(filepath)
        data = self.model.to_dict()
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        self.current_file = filepath
        logger.debug("Saved %d component(s) to %s", len(self.model), filepath)

        if self.netlist_ctrl:
            self.netlist_ctrl._notify("model_saved", None)

    def load_netlist(self, filepath) -> None:
        """
        Load netlist from JSON file.

        Validates JSON structure before loading. Updates the model
        in place (preserving the reference so views stay connected).

        Raises:
            json.JSONDecodeError: If file is not valid JSON.
            ValueError: If file structure is invalid.
            OSError: If the file cannot be read.
        """
        filepath = Path(filepath)
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)

        validate_netlist_data(data)
        loaded = netlist_from_data(data)

        self.model.clear()
        for comp in loaded.components:
            self.model.add_component(comp)
        self.model.next_id = loaded.next_id
        self.current_file = filepath

        if self.netlist_ctrl:
            self.netlist_ctrl._notify("model_loaded", None)

    def has_file(self) -> bool:
        return self.current_file is not None
