"""Tests for pre-submission netlist validation."""

import pytest
from models.component import ComponentData
from solver.errors import NetlistValidationError
from solver.netlist_validator import check_netlist, is_disallowed_negative, validate_netlist
from tests.conftest import make_component


class TestIsDisallowedNegative:
    @pytest.mark.parametrize(
        "component_type,value",
        [
            ("Resistor", "-10"),
            ("Resistor", "-1k"),
            ("Resistor", "  -3"),
            ("Capacitor", "-4.7n"),
            ("Capacitor", "-0"),
        ],
    )
    def test_negative_magnitudes_rejected(self, component_type, value):
        assert is_disallowed_negative(component_type, value)

    @pytest.mark.parametrize(
        "component_type,value",
        [
            ("Inductor", "-1m"),
            ("VoltageSource", "-5"),
            ("CurrentSource", "-2"),
            ("VCVS", "-3"),
        ],
    )
    def test_signed_types_allowed(self, component_type, value):
        assert not is_disallowed_negative(component_type, value)

    @pytest.mark.parametrize("value", ["", "   ", None, "1k", "0", "R_x", "10-2"])
    def test_non_negative_or_blank_values(self, value):
        assert not is_disallowed_negative("Resistor", value)

    def test_numeric_values(self):
        assert is_disallowed_negative("Resistor", -5)
        assert not is_disallowed_negative("Resistor", 100)
        assert not is_disallowed_negative("Resistor", 0)

    def test_unknown_type_is_not_checked(self):
        assert not is_disallowed_negative("Diode", "-1")


class TestValidateNetlist:
    def test_divider_is_clean(self, divider_model):
        is_valid, errors, warnings = validate_netlist(divider_model.components)
        assert is_valid
        assert errors == []
        assert warnings == []

    def test_empty_netlist_only_warns(self):
        is_valid, errors, warnings = validate_netlist([])
        assert is_valid
        assert errors == []
        assert len(warnings) == 1
        assert "no components" in warnings[0]

    def test_negative_resistor_blocks(self, divider_model):
        divider_model.components[2].value = "-10"
        is_valid, errors, _ = validate_netlist(divider_model.components)
        assert not is_valid
        assert errors == ["R3 (Resistor): value cannot be negative"]

    def test_every_negative_value_reported(self):
        comps = [
            make_component("VoltageSource", 1, "5"),
            make_component("Resistor", 2, "-1"),
            make_component("Capacitor", 3, "-2u"),
        ]
        _, errors, _ = validate_netlist(comps)
        assert len(errors) == 2
        assert errors[1] == "C3 (Capacitor): value cannot be negative"

    def test_blank_name_reported_as_unnamed(self):
        comps = [make_component("VoltageSource", 1, "5"), make_component("Resistor", 2, "-5", name="")]
        _, errors, _ = validate_netlist(comps)
        assert errors == ["Unnamed component (Resistor): value cannot be negative"]

    def test_negative_source_is_fine(self):
        comps = [make_component("VoltageSource", 1, "-12"), make_component("Resistor", 2, "1k")]
        is_valid, errors, _ = validate_netlist(comps)
        assert is_valid
        assert errors == []

    def test_wrong_node_count(self):
        comps = [
            make_component("VoltageSource", 1, "5"),
            ComponentData(2, "VCVS", "E2", [1, 0], "2"),
        ]
        is_valid, errors, _ = validate_netlist(comps)
        assert not is_valid
        assert "expected 4" in errors[0]

    def test_negative_node_number(self):
        comps = [make_component("VoltageSource", 1, "5"), make_component("Resistor", 2, "1k", nodes=(1, -2))]
        is_valid, errors, _ = validate_netlist(comps)
        assert not is_valid
        assert "[-2]" in errors[0]

    def test_duplicate_names_warn_by_default(self):
        comps = [
            make_component("VoltageSource", 1, "5"),
            make_component("Resistor", 2, "1k", name="R"),
            make_component("Resistor", 3, "1k", name="R"),
        ]
        is_valid, errors, warnings = validate_netlist(comps)
        assert is_valid
        assert errors == []
        assert any("'R' is used 2 times" in w for w in warnings)

    def test_duplicate_names_error_when_required_unique(self):
        comps = [
            make_component("VoltageSource", 1, "5"),
            make_component("Resistor", 2, "1k", name="R"),
            make_component("Resistor", 3, "1k", name="R"),
        ]
        is_valid, errors, _ = validate_netlist(comps, require_unique_names=True)
        assert not is_valid
        assert errors == ["Component name 'R' is used 2 times."]

    def test_no_ground_warning(self):
        comps = [make_component("VoltageSource", 1, "5", nodes=(1, 2)), make_component("Resistor", 2, "1k", nodes=(1, 2))]
        _, _, warnings = validate_netlist(comps)
        assert any("node 0" in w for w in warnings)

    def test_no_source_warning(self):
        comps = [make_component("Resistor", 1, "1k"), make_component("Capacitor", 2, "1u")]
        is_valid, _, warnings = validate_netlist(comps)
        assert is_valid
        assert any("no voltage or current sources" in w for w in warnings)

    def test_accepts_any_iterable(self, divider_model):
        is_valid, _, _ = validate_netlist(iter(divider_model))
        assert is_valid


class TestCheckNetlist:
    def test_returns_warnings_when_valid(self):
        warnings = check_netlist([make_component("Resistor", 1, "1k")])
        assert len(warnings) == 1

    def test_raises_with_all_errors(self):
        comps = [make_component("Resistor", 1, "-1"), make_component("Resistor", 2, "-2")]
        with pytest.raises(NetlistValidationError) as exc_info:
            check_netlist(comps)
        assert len(exc_info.value.errors) == 2
        assert "R1 (Resistor): value cannot be negative" in str(exc_info.value)
