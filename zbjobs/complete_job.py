"""Command that completes an activated job through a gateway."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any

from zbjobs.variables import JSONStringSerializer


@dataclasses.dataclass
class CompleteJobRequest:
    job_key: int = 0
    variables: str = ""


@dataclasses.dataclass
class CompleteJobResponse:
    pass


class CompleteJobCommand:
    """Builds and sends a job completion request."""

    def __init__(self, gateway: Any, should_retry: Callable[[Exception], bool]) -> None:
        self._gateway = gateway
        self._should_retry = should_retry
        self._serializer = JSONStringSerializer()
        self.request = CompleteJobRequest()

    def job_key(self, job_key: int) -> CompleteJobCommand:
        self.request.job_key = job_key
        return self

    def variables_from_string(self, variables: str) -> CompleteJobCommand:
        self._serializer.validate("variables", variables)
        self.request.variables = variables
        return self

    def variables_from_stringer(self, variables: Any) -> CompleteJobCommand:
        return self.variables_from_string(str(variables))

    def variables_from_map(self, variables: Any) -> CompleteJobCommand:
        return self.variables_from_object(variables)

    def variables_from_object(self, variables: Any) -> CompleteJobCommand:
        self.request.variables = self._serializer.as_json("variables", variables, False)
        return self

    def variables_from_object_ignore_omitempty(self, variables: Any) -> CompleteJobCommand:
        self.request.variables = self._serializer.as_json("variables", variables, True)
        return self

    def send(self) -> Any:
        """Send the request, retrying while the predicate allows."""
        while True:
            try:
                return self._gateway.complete_job(self.request)
            except Exception as err:
                if not self._should_retry(err):
                    raise


def new_complete_job_command(gateway: Any, should_retry: Callable[[Exception], bool]) -> CompleteJobCommand:
    return CompleteJobCommand(gateway, should_retry)