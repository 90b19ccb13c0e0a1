"""Small helpers shared by the clients: time, JSON, addresses, maps."""

from __future__ import annotations

import dataclasses
import ipaddress
import json
import logging
import re
import socket
import time
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from nacoskit.model import Service

logger = logging.getLogger(__name__)

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_JSON_ESCAPE_RE = re.compile("[<>&\u2028\u2029]")
# Documentation-only address: connecting a UDP socket to it sends nothing.
_PROBE_ADDRESS = ("192.0.2.1", 80)

_local_ip = ""


def current_millis() -> int:
    """Return the current time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def json_to_service(result: str) -> Optional[Service]:
    """Decode a service from its JSON text; return None if it cannot be decoded."""
    try:
        data = json.loads(result)
        service = Service() if data is None else Service.from_dict(data)
    except ValueError as exc:
        logger.error("failed to unmarshal json string:%s err:%s", result, exc)
        return None
    if not service.hosts:
        logger.warning("instance list is empty,json string:%s", result)
    return service


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        out: dict[str, Any] = {}
        for f in dataclasses.fields(value):
            if "json" in f.metadata:
                key = f.metadata["json"]
                if key is None:
                    continue
            else:
                key = f.name
            out[key] = _jsonable(getattr(value, f.name))
        return out
    if isinstance(value, Mapping):
        items = []
        for k, v in value.items():
            if isinstance(k, bool) or not isinstance(k, (str, int)):
                raise TypeError(f"unsupported map key type {type(k).__name__}")
            items.append((str(k), _jsonable(v)))
        return dict(sorted(items))
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if value is None or isinstance(value, (str, int, float)):
        return value
    raise TypeError(f"unsupported type {type(value).__name__}")


def _marshal(obj: Any) -> str:
    text = json.dumps(
        _jsonable(obj), separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )
    return _JSON_ESCAPE_RE.sub(lambda m: _JSON_ESCAPES[m.group(0)], text)


def to_json_string(obj: Any) -> str:
    """Return compact JSON for the object, or "" if it cannot be encoded.

    Map keys are sorted, model fields keep their declared order and JSON names.
    """
    try:
        return _marshal(obj)
    except (TypeError, ValueError):
        return ""


def _discover_ipv4() -> str:
    candidates: list[str] = []
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(_PROBE_ADDRESS)
            candidates.append(sock.getsockname()[0])
    except OSError as exc:
        logger.error("get Interfaces failed,err:%s", exc)
    try:
        candidates.extend(socket.gethostbyname_ex(socket.gethostname())[2])
    except OSError as exc:
        logger.error("get InterfaceAddress failed,err:%s", exc)
    for candidate in candidates:
        try:
            address = ipaddress.ip_address(candidate)
        except ValueError:
            continue
        if address.version == 4 and not (address.is_loopback or address.is_unspecified):
            return candidate
    return ""


def local_ip() -> str:
    """Return a non-loopback IPv4 address of this host, or "" if none is found."""
    global _local_ip
    if not _local_ip:
        _local_ip = _discover_ipv4()
        if _local_ip:
            logger.info("Local IP:%s", _local_ip)
    return _local_ip


def get_duration_with_default(
    metadata: Mapping[str, str], key: str, default: int
) -> int:
    """Return the duration in nanoseconds stored under key, or the default.

    The default is also returned when the stored text is not a 64-bit integer.
    """
    if key not in metadata:
        return default
    data = metadata[key]
    if not _DECIMAL_RE.fullmatch(data):
        logger.error("key:%s is not a number", key)
        return default
    value = int(data)
    if not _INT64_MIN <= value <= _INT64_MAX:
        logger.error("key:%s is not a number", key)
        return default
    return value


def get_url_formed_map(source: Mapping[str, str]) -> str:
    """Return the map as a URL query string, sorted by key."""
    return urlencode(sorted(source.items()))


def get_status_code(response: Any) -> str:
    """Return the HTTP status code of a response as text, or "NA" without one."""
    if response is None:
        return "NA"
    code = getattr(response, "status_code", None)
    if code is None:
        code = getattr(response, "status", None)
    return "NA" if code is None else str(code)


def deep_copy_map(params: Mapping[str, str]) -> dict[str, str]:
    """Return an independent copy of a string map."""
    return dict(params)