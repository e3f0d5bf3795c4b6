"""
Shared test fixtures for the netsolve test suite.

All fixtures build pure-Python model objects; no test touches the network.
"""

import sys
from pathlib import Path

# Ensure app/ is on sys.path so bare imports (models, solver, controllers)
# work when running individual test files (e.g., python -m pytest app/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

import json
from unittest.mock import MagicMock

import pytest
from models.component import ComponentData
from models.netlist import NetlistModel


@pytest.fixture(autouse=True)
def _isolate_user_data(tmp_path, monkeypatch):
    """Keep user examples and env overrides out of the real home directory."""
    monkeypatch.setattr("controllers.example_manager.USER_DATA_DIR", tmp_path / "user_data")
    for var in ("NETSOLVE_API_URL", "NETSOLVE_TIMEOUT", "NETSOLVE_UNIQUE_NAMES"):
        monkeypatch.delenv(var, raising=False)


def make_component(component_type, component_id, value, nodes=(1, 0), name=None):
    """Helper to create a ComponentData with minimal boilerplate."""
    prefix = {"Resistor": "R", "Capacitor": "C", "Inductor": "L", "VoltageSource": "V", "CurrentSource": "I"}
    return ComponentData(
        component_id=component_id,
        component_type=component_type,
        name=name if name is not None else f"{prefix.get(component_type, 'E')}{component_id}",
        nodes=list(nodes),
        value=value,
    )


def make_model(*components):
    model = NetlistModel()
    for comp in components:
        model.add_component(comp)
    return model


def make_solver_response(**overrides):
    """A typical successful solver answer for the voltage divider."""
    data = {
        "Equacoes": ["(v1 - v2)/100 == (v2 - 0)/100", "v1 == 10"],
        "Superposicao": [
            {"FonteAtiva": "V1", "ResultadosParciais": ["10", "5"]},
        ],
        "Resultados": [
            {"Local": "v1", "ValorNumerico": "10.", "Unidade": "V"},
            {"Local": "v2", "ValorNumerico": "5.", "Unidade": "V"},
        ],
        "NosLista": [1, 2],
    }
    data.update(overrides)
    return data


def make_client(response=None, side_effect=None):
    """A MagicMock solver client whose solve() returns ``response``."""
    client = MagicMock()
    if side_effect is not None:
        client.solve.side_effect = side_effect
    else:
        client.solve.return_value = response if response is not None else make_solver_response()
    return client


@pytest.fixture
def divider_model():
    """
    V1 (10 V) from node 1 to ground, R1 from 1 to 2, R2 from 2 to ground.
    """
    return make_model(
        make_component("VoltageSource", 1, "10", (1, 0)),
        make_component("Resistor", 2, "100", (1, 2)),
        make_component("Resistor", 3, "100", (2, 0)),
    )


@pytest.fixture
def divider_file(tmp_path, divider_model):
    """The divider netlist saved in the native file format."""
    filepath = tmp_path / "divider.json"
    filepath.write_text(json.dumps(divider_model.to_dict()))
    return str(filepath)


@pytest.fixture
def solver_response_data():
    return make_solver_response()
