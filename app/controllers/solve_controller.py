"""
SolveController - Orchestrates the submission pipeline.

This module contains no UI dependencies. It coordinates validation,
serialization, the solver exchange and response parsing.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from models.netlist import NetlistModel
from solver.config import SolverSettings
from solver.errors import NetlistValidationError, SolverError, TransportError
from solver.netlist_serializer import payload_json, serialize_netlist
from solver.netlist_validator import validate_netlist
from solver.result_parser import SolverResponse

logger = logging.getLogger(__name__)

# Generic message for network-level failures; details go to the log
TRANSPORT_FAILURE_MESSAGE = "Could not communicate with the solver. Check your connection and try again."


@dataclass
class SolveResult:
    """Result of a submission attempt."""

    success: bool
    data: Optional[SolverResponse] = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: str = ""
    error_kind: str = ""  # "", "validation", "transport" or "solver"
    payload: list = field(default_factory=list)

    def raise_for_error(self) -> None:
        """Re-raise the failure as the matching exception. No-op on success."""
        if self.success:
            return
        if self.error_kind == "validation":
            raise NetlistValidationError(self.errors)
        if self.error_kind == "solver":
            raise SolverError(self.error)
        raise TransportError(self.error)


class SolveController:
    """
    Controller for the submission pipeline.

    Coordinates: validate -> serialize -> post to solver -> parse response
    """

    def __init__(
        self,
        model: Optional[NetlistModel] = None,
        netlist_ctrl=None,
        client=None,
        require_unique_names: Optional[bool] = None,
    ):
        self.model = model if model is not None else NetlistModel()
        self.netlist_ctrl = netlist_ctrl  # For observer notifications
        self._client = client
        self._require_unique_names = require_unique_names

    @property
    def client(self):
        """Lazy initialization of SolverClient."""
        if self._client is None:
            from solver.solver_client import SolverClient

            self._client = SolverClient()
        return self._client

    @property
    def require_unique_names(self) -> bool:
        if self._require_unique_names is None:
            settings = getattr(self.client, "settings", None)
            return isinstance(settings, SolverSettings) and settings.require_unique_names
        return self._require_unique_names

    def validate_netlist(self) -> SolveResult:
        """
        Validate the netlist before submission.

        Returns a SolveResult with success=False and errors if invalid.
        """
        is_valid, errors, warnings = validate_netlist(
            self.model.components,
            require_unique_names=self.require_unique_names,
        )
        return SolveResult(
            success=is_valid,
            errors=errors,
            warnings=warnings,
            error="; ".join(errors) if errors else "",
            error_kind="" if is_valid else "validation",
        )

    def generate_payload(self) -> list:
        """Serialize the current netlist into solver records."""
        return serialize_netlist(self.model.components)

    def generate_payload_json(self) -> str:
        return payload_json(self.generate_payload())

    def _finish(self, result: SolveResult) -> SolveResult:
        if self.netlist_ctrl:
            self.netlist_ctrl._notify("solve_completed", result)
        return result

    def solve(self) -> SolveResult:
        """
        Run the full submission pipeline.

        Steps: validate -> serialize -> post -> parse. Any failure ends the
        attempt; nothing is retried.
        """
        if self.netlist_ctrl:
            self.netlist_ctrl._notify("solve_started", None)

        # 1. Validate; a blocked netlist never reaches the serializer
        validation = self.validate_netlist()
        if not validation.success:
            return self._finish(validation)

        # 2. Serialize
        payload = self.generate_payload()

        # 3. Exchange
        try:
            data = self.client.solve(payload)
        except SolverError as e:
            return self._finish(
                SolveResult(
                    success=False,
                    error=str(e),
                    error_kind="solver",
                    warnings=validation.warnings,
                    payload=payload,
                )
            )
        except TransportError as e:
            logger.warning("Solver exchange failed: %s", e)
            return self._finish(
                SolveResult(
                    success=False,
                    error=TRANSPORT_FAILURE_MESSAGE,
                    errors=[str(e)],
                    error_kind="transport",
                    warnings=validation.warnings,
                    payload=payload,
                )
            )

        # 4. Parse
        response = SolverResponse.from_dict(data)
        warnings = list(validation.warnings)
        missing = response.missing_fields()
        if missing:
            warnings.append(f"Solver response is missing field(s): {', '.join(missing)}")

        return self._finish(
            SolveResult(
                success=True,
                data=response,
                warnings=warnings,
                payload=payload,
            )
        )
