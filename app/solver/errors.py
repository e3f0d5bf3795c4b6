"""
solver/errors.py

Exceptions raised on the way from a netlist to a solver result.
"""


class NetlistValidationError(ValueError):
    """Raised when a netlist holds values that block submission."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Netlist is invalid.")


class TransportError(RuntimeError):
    """Raised when the solver exchange fails at the network layer."""


class SolverError(RuntimeError):
    """Raised when the solver answers with an 'Erro' field."""
