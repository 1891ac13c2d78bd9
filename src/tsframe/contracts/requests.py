"""Pydantic request specs.

JSON-serializable requests used by agents and the command line. They carry
structure only: argument values (stride, unit names) are validated by the
endpoints engine so the error types match the Python API.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Literal

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator

IndexKindName = Literal["datetime", "date", "time", "plain"]


class BaseSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class EndpointRequest(BaseSpec):
    """Endpoints over an index given as JSON values.

    ``index`` holds integers or ISO-8601 strings. ``kind`` says how strings
    are parsed; when omitted, strings are datetimes and numbers are plain.
    """

    index: list[int] | list[float] | list[str] = Field(default_factory=list)
    on: str
    k: int = 1
    kind: IndexKindName | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_inputs(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        payload = dict(data)
        # "unit" reads more naturally for named frequencies
        if "unit" in payload and "on" not in payload:
            payload["on"] = payload.pop("unit")
        return payload

    @model_validator(mode="after")
    def _check_index_parses(self) -> EndpointRequest:
        # malformed dates and times surface as ValueError, reported as a validation error
        self.index_values()
        return self

    def index_values(self) -> pd.Index:
        """Parse ``index`` into values of the requested kind."""
        kind = self.kind
        if kind is None:
            kind = "datetime" if self.index and isinstance(self.index[0], str) else "plain"

        if kind == "plain":
            return pd.Index(self.index)
        if kind == "datetime":
            return pd.DatetimeIndex(pd.to_datetime(self.index))
        if kind == "date":
            return pd.Index([dt.date.fromisoformat(str(v)) for v in self.index], dtype=object)
        return pd.Index([dt.time.fromisoformat(str(v)) for v in self.index], dtype=object)


__all__ = ["BaseSpec", "EndpointRequest", "IndexKindName"]
