"""Utility helpers shared across the package."""

from .env import get_env, get_flag, get_node_env
from .json_serialization import encode_json

__all__ = [
    "encode_json",
    "get_env",
    "get_flag",
    "get_node_env",
]
