"""JSON serialisation and validation of job variables."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any


class InvalidVariablesError(ValueError):
    """Raised when variables are not a valid JSON object document."""


def omitempty(default: Any = None) -> Any:
    """Declare a dataclass field that is left out of JSON output when empty."""
    return dataclasses.field(default=default, metadata={"omitempty": True})


def _to_plain(value: Any, ignore_omitempty: bool) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _to_plain(getattr(value, f.name), ignore_omitempty)
            for f in dataclasses.fields(value)
            if ignore_omitempty
            or not f.metadata.get("omitempty")
            or getattr(value, f.name)
        }
    if isinstance(value, Mapping):
        return {str(k): _to_plain(v, ignore_omitempty) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v, ignore_omitempty) for v in value]
    return value


class JSONStringSerializer:
    """Turns values into JSON object strings and checks given JSON strings."""

    def validate(self, name: str, value: str) -> dict:
        """Check that ``value`` is a JSON object and return it decoded."""
        try:
            decoded = json.loads(value)
        except (TypeError, ValueError) as err:
            raise InvalidVariablesError(f"invalid JSON for {name}: {value!r}") from err
        if not isinstance(decoded, dict):
            raise InvalidVariablesError(f"{name} must be a JSON object: {value!r}")
        return decoded

    def as_json(self, name: str, value: Any, ignore_omitempty: bool) -> str:
        """Serialise ``value`` to a compact JSON object string."""
        try:
            document = json.dumps(
                _to_plain(value, ignore_omitempty),
                separators=(",", ":"),
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as err:
            raise InvalidVariablesError(f"cannot serialise {name}: {err}") from err
        self.validate(name, document)
        return document