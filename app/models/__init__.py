"""
Pure Python data models for netsolve.

This package contains UI-free data classes that represent netlist elements.
All models use only Python standard library types.
"""

from .component import (
    COMPONENT_DESCRIPTORS,
    COMPONENT_TYPES,
    DEFAULT_NODES,
    SOURCE_TYPES,
    ComponentData,
    ComponentTypeDescriptor,
    UnknownComponentTypeError,
    describe,
)
from .example import ExamplePreset
from .netlist import NetlistModel

__all__ = [
    "NetlistModel",
    "ComponentData",
    "ComponentTypeDescriptor",
    "COMPONENT_DESCRIPTORS",
    "COMPONENT_TYPES",
    "DEFAULT_NODES",
    "SOURCE_TYPES",
    "ExamplePreset",
    "UnknownComponentTypeError",
    "describe",
]
