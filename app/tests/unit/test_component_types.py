"""Tests for the component type table and ComponentData."""

import pytest
from models.component import (
    COMPONENT_DESCRIPTORS,
    COMPONENT_TYPES,
    DEFAULT_NODES,
    ComponentData,
    UnknownComponentTypeError,
    describe,
)


class TestComponentTypeTable:
    def test_palette_order(self):
        assert COMPONENT_TYPES == ["Resistor", "Capacitor", "Inductor", "VoltageSource", "CurrentSource", "VCVS"]

    @pytest.mark.parametrize(
        "type_tag,badge,prefix,default",
        [
            ("Resistor", "Ω", "R", "1k"),
            ("Capacitor", "C", "C", "100u"),
            ("Inductor", "L", "L", "1m"),
            ("VoltageSource", "V", "V", "1k"),
            ("CurrentSource", "A", "I", "1k"),
            ("VCVS", "G", "E", "2"),
        ],
    )
    def test_descriptor_fields(self, type_tag, badge, prefix, default):
        descriptor = describe(type_tag)
        assert descriptor.type_tag == type_tag
        assert descriptor.badge_label == badge
        assert descriptor.name_prefix == prefix
        assert descriptor.default_value == default

    def test_only_vcvs_has_four_nodes(self):
        arities = {tag: d.node_arity for tag, d in COMPONENT_DESCRIPTORS.items()}
        assert arities.pop("VCVS") == 4
        assert set(arities.values()) == {2}

    def test_vcvs_labels(self):
        descriptor = describe("VCVS")
        assert descriptor.value_label == "Gain"
        assert descriptor.node_labels == ("out+", "out-", "in+", "in-")

    def test_negative_values_forbidden_for_resistor_and_capacitor_only(self):
        forbidden = {tag for tag, d in COMPONENT_DESCRIPTORS.items() if not d.allows_negative_value}
        assert forbidden == {"Resistor", "Capacitor"}

    def test_default_name_uses_prefix_and_id(self):
        assert describe("CurrentSource").default_name(7) == "I7"
        assert describe("VCVS").default_name(4) == "E4"

    def test_default_nodes(self):
        assert DEFAULT_NODES == (1, 0, 1, 0)

    @pytest.mark.parametrize("bad", ["Diode", "resistor", "", None])
    def test_unknown_type_raises(self, bad):
        with pytest.raises(UnknownComponentTypeError):
            describe(bad)

    def test_unknown_type_error_is_value_error(self):
        assert issubclass(UnknownComponentTypeError, ValueError)


class TestComponentData:
    def test_node_count_follows_type(self):
        comp = ComponentData(1, "VCVS", "E1", [2, 0, 1, 0], "3")
        assert comp.get_node_count() == 4

    def test_display_name_blank(self):
        comp = ComponentData(1, "Resistor", "", [1, 0], "1k")
        assert comp.display_name() == "Unnamed component"

    def test_display_name(self):
        comp = ComponentData(1, "Resistor", "R_Load", [1, 0], "1k")
        assert comp.display_name() == "R_Load"

    def test_to_dict(self):
        comp = ComponentData(3, "Capacitor", "C3", [2, 0], "4.7n")
        assert comp.to_dict() == {"id": 3, "type": "Capacitor", "name": "C3", "nodes": [2, 0], "value": "4.7n"}

    def test_from_dict_missing_optional_fields(self):
        comp = ComponentData.from_dict({"id": 5, "type": "Inductor"})
        assert comp.component_id == 5
        assert comp.name == ""
        assert comp.nodes == []
        assert comp.value == ""

    def test_from_dict_stores_numbers_as_text(self):
        comp = ComponentData.from_dict({"id": 1, "type": "Resistor", "name": 7, "nodes": [1, 0], "value": 0})
        assert comp.name == "7"
        assert comp.value == "0"

    def test_to_dict_copies_nodes(self):
        comp = ComponentData(1, "Resistor", "R1", [1, 0], "1k")
        data = comp.to_dict()
        data["nodes"].append(9)
        assert comp.nodes == [1, 0]
