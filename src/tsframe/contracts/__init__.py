"""Serializable request contracts."""

from .requests import BaseSpec, EndpointRequest, IndexKindName

__all__ = ["BaseSpec", "EndpointRequest", "IndexKindName"]
