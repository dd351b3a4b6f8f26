"""Helpers shared by the API routers."""

from api.src.utils.ids import next_object_id
from api.src.utils.params import ParsedInt, parse_integer_param

__all__ = ["ParsedInt", "next_object_id", "parse_integer_param"]
