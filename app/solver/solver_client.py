"""
solver/solver_client.py

Handles the HTTP exchange with the external solver.
"""

import logging
from typing import Optional

import requests

from .config import NETLIST_FIELD, SolverSettings
from .errors import SolverError, TransportError
from .netlist_serializer import payload_json

logger = logging.getLogger(__name__)


class SolverClient:
    """Posts serialized netlists to the solver and returns its JSON answer.

    One request at a time: no retry, no queuing. Each failure is terminal
    for that submission.
    """

    def __init__(self, settings: Optional[SolverSettings] = None, session=None):
        self.settings = settings or SolverSettings()
        self._session = session

    @property
    def api_url(self) -> str:
        return self.settings.api_url

    def _post(self, url, **kwargs):
        if self._session is not None:
            return self._session.post(url, **kwargs)
        return requests.post(url, **kwargs)

    def solve(self, records) -> dict:
        """
        Submit serialized records and return the decoded response.

        Args:
            records: list of solver records from serialize_netlist()

        Returns:
            dict: the solver response (no 'Erro' key present)

        Raises:
            TransportError: network failure, timeout, HTTP error status,
                or a body that is not a JSON object.
            SolverError: the solver reported an error in 'Erro'.
        """
        body = payload_json(records)
        # (None, value) makes requests send a plain multipart form field
        files = {NETLIST_FIELD: (None, body)}
        logger.debug("POST %s with %d component(s)", self.api_url, len(records))

        try:
            response = self._post(self.api_url, files=files, timeout=self.settings.timeout)
        except requests.Timeout as e:
            raise TransportError(f"Solver request timed out after {self.settings.timeout:g} seconds") from e
        except requests.RequestException as e:
            raise TransportError(f"Could not reach the solver: {e}") from e

        # 'Erro' may arrive with a non-2xx status
        try:
            data = response.json()
        except ValueError as e:
            if not response.ok:
                raise TransportError(f"HTTP {response.status_code}: {response.reason}") from e
            raise TransportError("Solver returned a response that is not valid JSON") from e

        if isinstance(data, dict) and data.get("Erro"):
            logger.debug("Solver reported an error (HTTP %s): %s", response.status_code, data["Erro"])
            raise SolverError(str(data["Erro"]))

        if not response.ok:
            raise TransportError(f"HTTP {response.status_code}: {response.reason}")

        if not isinstance(data, dict):
            raise TransportError("Solver returned an unexpected response shape")

        return data
