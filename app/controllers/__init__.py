"""
Controllers for netsolve.

This package contains UI-free controller classes that orchestrate
operations between models and views using an observer pattern.
"""

from .example_manager import BUILTIN_EXAMPLES, ExampleManager
from .file_controller import FileController, validate_netlist_data, validate_records
from .netlist_controller import NetlistController
from .solve_controller import SolveController, SolveResult

__all__ = [
    "NetlistController",
    "SolveController",
    "SolveResult",
    "FileController",
    "ExampleManager",
    "BUILTIN_EXAMPLES",
    "validate_netlist_data",
    "validate_records",
]
