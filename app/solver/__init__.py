from .errors import NetlistValidationError, SolverError, TransportError
from .netlist_serializer import payload_json, serialize_netlist
from .netlist_validator import check_netlist, is_disallowed_negative, validate_netlist
from .result_parser import SolverResponse
from .solver_client import SolverClient
from .value_parser import expand_value

__all__ = [
    "NetlistValidationError",
    "SolverClient",
    "SolverError",
    "SolverResponse",
    "TransportError",
    "check_netlist",
    "expand_value",
    "is_disallowed_negative",
    "payload_json",
    "serialize_netlist",
    "validate_netlist",
]
