"""
netsolve Scripting API: programmatic netlist creation and submission.

This package provides a headless Python API for building netlists and
sending them to the solver.

Usage::

    from scripting import Netlist

    netlist = Netlist()
    netlist.add_component("VoltageSource", "10", nodes=(1, 0))
    netlist.add_component("Resistor", "1k", nodes=(1, 2))
    netlist.add_component("Resistor", "2.2k", nodes=(2, 0))

    result = netlist.solve()
    if result.success:
        for r in result.data.results:
            print(r.location, r.numeric_value, r.unit)

    netlist.save("divider.json")
"""

# Re-export SolveResult for convenience
from controllers.solve_controller import SolveResult
from scripting.netlist import Netlist

__all__ = ["Netlist", "SolveResult"]
