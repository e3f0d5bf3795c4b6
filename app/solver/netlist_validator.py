"""
solver/netlist_validator.py

Pre-submission netlist validation with no UI dependencies.
"""

import re
from collections import Counter

from models.component import COMPONENT_DESCRIPTORS, SOURCE_TYPES

from .errors import NetlistValidationError
from .value_parser import is_blank

_LEADING_NUMBER = re.compile(r"^-?\d+\.?\d*")


def is_disallowed_negative(component_type, value_text):
    """
    Return True if a raw value is negative for a type that must not be.

    Only types whose descriptor forbids negative values (Resistor and
    Capacitor) are checked. The raw text is inspected before any suffix
    expansion, so "-1k" is caught just like "-100".
    """
    descriptor = COMPONENT_DESCRIPTORS.get(component_type)
    if descriptor is None or descriptor.allows_negative_value:
        return False

    if is_blank(value_text):
        return False

    cleaned = str(value_text).strip()
    if cleaned.startswith("-"):
        return True

    match = _LEADING_NUMBER.match(cleaned)
    if match and float(match.group(0)) < 0:
        return True

    return False


def validate_netlist(components, require_unique_names=False):
    """
    Validate a netlist before it is sent to the solver.

    Args:
        components: iterable of ComponentData, in netlist order
        require_unique_names: treat repeated component names as errors
            instead of warnings

    Returns:
        (is_valid, errors, warnings) where:
            is_valid: bool, False if any errors found
            errors: list[str], problems that block submission
            warnings: list[str], non-blocking issues
    """
    components = list(components)
    errors = []
    warnings = []

    if not components:
        warnings.append("Netlist has no components. The solver will have nothing to analyse.")
        return True, errors, warnings

    # 1. Negative magnitudes and node shape
    for comp in components:
        if is_disallowed_negative(comp.component_type, comp.value):
            errors.append(f"{comp.display_name()} ({comp.component_type}): value cannot be negative")

        expected = COMPONENT_DESCRIPTORS[comp.component_type].node_arity
        if len(comp.nodes) != expected:
            errors.append(
                f"{comp.display_name()} ({comp.component_type}) has {len(comp.nodes)} node(s); "
                f"expected {expected}."
            )
        negative_nodes = [n for n in comp.nodes if n < 0]
        if negative_nodes:
            errors.append(
                f"{comp.display_name()} ({comp.component_type}) uses negative node number(s) "
                f"{negative_nodes}. Node numbers must be 0 or greater."
            )

    # 2. Name uniqueness
    counts = Counter(c.name for c in components)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    for name in duplicates:
        message = f"Component name '{name}' is used {counts[name]} times."
        if require_unique_names:
            errors.append(message)
        else:
            warnings.append(message + " Solver results may be ambiguous.")

    # 3. Topology hints
    if not any(0 in c.nodes for c in components):
        warnings.append("No component is connected to node 0 (ground).")

    if not any(c.component_type in SOURCE_TYPES for c in components):
        warnings.append(
            "Netlist has no voltage or current sources. "
            "The solver may not produce meaningful results."
        )

    is_valid = len(errors) == 0
    return is_valid, errors, warnings


def check_netlist(components, require_unique_names=False):
    """
    Validate a netlist and raise if submission must be blocked.

    Returns:
        list[str] of warnings when the netlist is valid.

    Raises:
        NetlistValidationError: carrying every blocking error message.
    """
    is_valid, errors, warnings = validate_netlist(components, require_unique_names)
    if not is_valid:
        raise NetlistValidationError(errors)
    return warnings
