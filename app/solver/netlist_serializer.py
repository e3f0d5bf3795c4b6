"""
solver/netlist_serializer.py

Builds the solver request payload from netlist components.
"""

import json

from models.component import describe

from .value_parser import expand_value, is_blank


def serialize_component(comp):
    """
    Convert one component to a solver record.

    A blank value is replaced by the component name (the solver then treats
    the element symbolically); otherwise suffixes are expanded.
    """
    arity = describe(comp.component_type).node_arity
    if is_blank(comp.value):
        value = comp.name
    else:
        value = expand_value(comp.value)

    return {
        "Componente": comp.name,
        "Tipo": comp.component_type,
        "Valor": value,
        "Nos": [int(n) for n in comp.nodes[:arity]],
    }


def serialize_netlist(components):
    """
    Serialize components, in order, to the list of records the solver expects.

    Returns:
        list of dicts with keys Componente, Tipo, Valor, Nos
    """
    return [serialize_component(comp) for comp in components]


def payload_json(records):
    """Encode serialized records as the JSON text sent in the 'netlist' field."""
    return json.dumps(records, ensure_ascii=False)
