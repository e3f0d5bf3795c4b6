"""
ExampleManager - Built-in and user-defined example netlists.

Built-in examples ship with the application and cannot be changed.
User examples are stored as JSON in ~/.netsolve/examples.json.
Loading an example always clears the current netlist first.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from controllers.file_controller import validate_records
from models.example import ExamplePreset
from solver.config import USER_DATA_DIR

logger = logging.getLogger(__name__)


def _builtin(key, title, description, components):
    return ExamplePreset(
        key=key,
        title=title,
        description=description,
        components=tuple(components),
        builtin=True,
    )


BUILTIN_EXAMPLES = {
    "divisor": _builtin(
        "divisor",
        "Voltage Divider",
        "10 V source across two equal 100 Ω resistors.",
        [
            {"Componente": "V1", "Tipo": "VoltageSource", "Valor": "10", "Nos": (1, 0)},
            {"Componente": "R1", "Tipo": "Resistor", "Valor": "100", "Nos": (1, 2)},
            {"Componente": "R2", "Tipo": "Resistor", "Valor": "100", "Nos": (2, 0)},
        ],
    ),
    "ponte": _builtin(
        "ponte",
        "Wheatstone Bridge",
        "Four 1 kΩ arms bridged by a 500 Ω resistor.",
        [
            {"Componente": "V1", "Tipo": "VoltageSource", "Valor": "12", "Nos": (1, 0)},
            {"Componente": "R1", "Tipo": "Resistor", "Valor": "1k", "Nos": (1, 2)},
            {"Componente": "R2", "Tipo": "Resistor", "Valor": "1k", "Nos": (2, 0)},
            {"Componente": "R3", "Tipo": "Resistor", "Valor": "1k", "Nos": (1, 3)},
            {"Componente": "R4", "Tipo": "Resistor", "Valor": "1k", "Nos": (3, 0)},
            {"Componente": "R_Ponte", "Tipo": "Resistor", "Valor": "500", "Nos": (2, 3)},
        ],
    ),
    "amp": _builtin(
        "amp",
        "VCVS Amplifier",
        "Voltage-controlled source with gain 3 driving a 10 kΩ load.",
        [
            {"Componente": "V_In", "Tipo": "VoltageSource", "Valor": "5", "Nos": (1, 0)},
            {"Componente": "R1", "Tipo": "Resistor", "Valor": "1k", "Nos": (1, 0)},
            {"Componente": "E_Amp", "Tipo": "VCVS", "Valor": "3", "Nos": (2, 0, 1, 0)},
            {"Componente": "R_Carga", "Tipo": "Resistor", "Valor": "10k", "Nos": (2, 0)},
        ],
    ),
    "misto": _builtin(
        "misto",
        "Two-Source Network",
        "Resistive network fed by a 20 V and a 10 V source.",
        [
            {"Componente": "V1", "Tipo": "VoltageSource", "Valor": "20", "Nos": (1, 0)},
            {"Componente": "R1", "Tipo": "Resistor", "Valor": "2", "Nos": (1, 2)},
            {"Componente": "R2", "Tipo": "Resistor", "Valor": "2", "Nos": (2, 0)},
            {"Componente": "R3", "Tipo": "Resistor", "Valor": "2", "Nos": (2, 3)},
            {"Componente": "V2", "Tipo": "VoltageSource", "Valor": "10", "Nos": (3, 0)},
        ],
    ),
}


class ExampleManager:
    """Manages example netlists (built-in + user-defined).

    Examples are looked up by key. Built-in keys always win and cannot be
    overwritten or deleted.
    """

    def __init__(self, example_file: Optional[Path] = None):
        self._example_file = example_file or USER_DATA_DIR / "examples.json"
        self._user_examples: dict[str, ExamplePreset] = {}
        self._load()

    # --- Public API ---

    def list_examples(self) -> list[ExamplePreset]:
        """Return built-in examples in declaration order, then user examples by key."""
        user = [self._user_examples[k] for k in sorted(self._user_examples)]
        return list(BUILTIN_EXAMPLES.values()) + user

    def get_example(self, key: Optional[str]) -> Optional[ExamplePreset]:
        if not key:
            return None
        return BUILTIN_EXAMPLES.get(key) or self._user_examples.get(key)

    def load_example(self, key: Optional[str], controller) -> bool:
        """
        Replace the controller's netlist with an example.

        The netlist is cleared (and ids restart at 1) even when the key is
        empty or unknown; in that case nothing else happens.

        Returns:
            True if an example was loaded.
        """
        controller.clear_netlist()
        example = self.get_example(key)
        if example is None:
            logger.debug("No example named %r; netlist left empty", key)
            return False

        controller.add_records(example.components)
        controller._notify("example_loaded", example.key)
        return True

    def save_example(self, key: str, model, title: str = "", description: str = "") -> ExamplePreset:
        """Save the netlist in ``model`` as a user example. Overwrites a user example with the same key."""
        if not key:
            raise ValueError("Example key must not be empty")
        if key in BUILTIN_EXAMPLES:
            raise ValueError(f"Cannot overwrite built-in example '{key}'")

        records = [
            {"Componente": c.name, "Tipo": c.component_type, "Valor": c.value, "Nos": list(c.nodes)}
            for c in model.components
        ]
        example = ExamplePreset(key=key, title=title or key, description=description, components=tuple(records))
        self._user_examples[key] = example
        self._save()
        return example

    def delete_example(self, key: str) -> bool:
        """Delete a user example. Returns True if deleted, False if not found or built-in."""
        if key in BUILTIN_EXAMPLES or key not in self._user_examples:
            return False
        del self._user_examples[key]
        self._save()
        return True

    # --- Persistence ---

    def _load(self):
        """Load user examples from disk."""
        if not self._example_file.exists():
            self._user_examples = {}
            return
        try:
            data = json.loads(self._example_file.read_text())
            examples = [ExamplePreset.from_dict(e) for e in data.get("examples", [])]
        except (json.JSONDecodeError, OSError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Failed to load examples from %s: %s", self._example_file, e)
            self._user_examples = {}
            return
        self._user_examples = {}
        for example in examples:
            if example.key in BUILTIN_EXAMPLES:
                continue
            try:
                validate_records(list(example.components))
            except ValueError as e:
                logger.warning("Skipping user example %r in %s: %s", example.key, self._example_file, e)
                continue
            self._user_examples[example.key] = example

    def _save(self):
        """Write user examples to disk."""
        try:
            self._example_file.parent.mkdir(parents=True, exist_ok=True)
            data = {"examples": [self._user_examples[k].to_dict() for k in sorted(self._user_examples)]}
            self._example_file.write_text(json.dumps(data, indent=2, ensure_ascii=False))
        except OSError as e:
            logger.error("Failed to save examples to %s: %s", self._example_file, e)
