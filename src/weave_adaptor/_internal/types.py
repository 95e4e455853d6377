"""Shared type aliases used across weave_adaptor modules."""

from typing import Any, TypeAlias

# Request and response objects belong to whatever HTTP message library the
# surrounding pipeline uses. They are passed through untouched.
Request: TypeAlias = Any
Response: TypeAlias = Any
