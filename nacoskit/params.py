"""Turning tagged dataclass fields into request parameters."""

from __future__ import annotations

import dataclasses
import logging
import math
from decimal import Decimal
from typing import Any, Mapping

from nacoskit.common import _marshal

logger = logging.getLogger(__name__)


def param(name: str, **kwargs: Any) -> Any:
    """Declare a dataclass field that is sent as the request parameter ``name``.

    Other keyword arguments go to dataclasses.field.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata["param"] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(float(value))).normalize(), "f")


def _format_value(value: Any) -> str | None:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value or None
    if isinstance(value, Mapping):
        try:
            return _marshal(value)
        except (TypeError, ValueError) as exc:
            logger.error("[transform_object_to_param] json marshal err:%s", exc)
            return None
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return ",".join(value) or None
    return None


def transform_object_to_param(obj: Any) -> dict[str, str]:
    """Return the parameter map of a dataclass whose fields were declared with param.

    Numbers and booleans are always included; empty strings, None maps and
    empty string lists are left out. Fields without a name, or named "-",
    are skipped.
    """
    params: dict[str, str] = {}
    if obj is None:
        return params
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"expected a dataclass instance, got {type(obj).__name__}")
    for f in dataclasses.fields(obj):
        tag = f.metadata.get("param")
        if not tag or tag == "-":
            continue
        text = _format_value(getattr(obj, f.name))
        if text is not None:
            params[tag] = text
    return params