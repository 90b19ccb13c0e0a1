"""Data models for configuration items and naming-service records."""

import dataclasses
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, get_args, get_origin


class State(IntEnum):
    """Heartbeat task state."""

    RUNNING = 0
    SHUTDOWN = 1


def _field(
    key: Optional[str],
    default: Any = dataclasses.MISSING,
    *,
    factory: Any = dataclasses.MISSING,
    param: Optional[str] = None,
    number: bool = False,
) -> Any:
    meta: Dict[str, Any] = {"json": key}
    if param is not None:
        meta["param"] = param
    if number:
        meta["number"] = True
    return field(default=default, default_factory=factory, metadata=meta)


def _zero(tp: Any) -> Any:
    origin = get_origin(tp)
    if origin is list:
        return []
    if origin is dict:
        return {}
    return tp()


def _decode(tp: Any, value: Any, key: str) -> Any:
    origin = get_origin(tp)
    if origin is list:
        if not isinstance(value, list):
            raise ValueError(f"field {key!r}: expected a list")
        (item,) = get_args(tp)
        return [_zero(item) if v is None else _decode(item, v, key) for v in value]
    if origin is dict:
        if not isinstance(value, dict):
            raise ValueError(f"field {key!r}: expected an object")
        _, item = get_args(tp)
        return {
            str(k): _zero(item) if v is None else _decode(item, v, key)
            for k, v in value.items()
        }
    if dataclasses.is_dataclass(tp):
        return _from_dict(tp, value)
    if tp is bool:
        ok = isinstance(value, bool)
    elif tp is int or (isinstance(tp, type) and issubclass(tp, int)):
        ok = isinstance(value, int) and not isinstance(value, bool)
        if ok:
            value = tp(value)
    elif tp is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        if ok:
            value = float(value)
    elif tp is str:
        ok = isinstance(value, str)
    else:
        ok = True
    if not ok:
        raise ValueError(
            f"field {key!r}: cannot decode {type(value).__name__} as {tp.__name__}"
        )
    return value


def _decode_number(value: Any, key: str) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"field {key!r}: expected a number")
    return str(value)


def _from_dict(cls: Any, data: Any) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"{cls.__name__}: expected an object")
    lowered = {str(k).lower(): v for k, v in data.items()}
    kwargs: Dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        key = f.metadata.get("json")
        if key is None:
            continue
        if key in data:
            value = data[key]
        elif key.lower() in lowered:
            value = lowered[key.lower()]
        else:
            continue
        if value is None:
            continue
        if f.metadata.get("number"):
            kwargs[f.name] = _decode_number(value, key)
        else:
            kwargs[f.name] = _decode(f.type, value, key)
    return cls(**kwargs)


def _encode(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _to_dict(value)
    if isinstance(value, list):
        return [_encode(v) for v in value]
    if isinstance(value, dict):
        return {k: _encode(v) for k, v in value.items()}
    return value


def _to_dict(obj: Any) -> Dict[str, Any]:
    return {
        f.metadata["json"]: _encode(getattr(obj, f.name))
        for f in dataclasses.fields(obj)
        if f.metadata.get("json") is not None
    }


class _JsonModel:
    """Conversion between dataclass models and JSON-shaped dictionaries."""

    @classmethod
    def from_dict(cls, data: Any) -> Any:
        """Build the model from a decoded JSON object; raise ValueError on bad data."""
        return _from_dict(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        """Return the model as a JSON-shaped dictionary."""
        return _to_dict(self)


@dataclass
class ConfigItem(_JsonModel):
    id: str = _field("id", "", param="id", number=True)
    data_id: str = _field("dataId", "", param="dataId")
    group: str = _field("group", "", param="group")
    content: str = _field("content", "", param="content")
    md5: str = _field("md5", "", param="md5")
    tenant: str = _field("tenant", "", param="tenant")
    appname: str = _field("appname", "", param="appname")


@dataclass
class ConfigPage(_JsonModel):
    total_count: int = _field("totalCount", 0, param="totalCount")
    page_number: int = _field("pageNumber", 0, param="pageNumber")
    pages_available: int = _field("pagesAvailable", 0, param="pagesAvailable")
    page_items: List[ConfigItem] = _field("pageItems", factory=list, param="pageItems")


@dataclass
class ConfigListenContext(_JsonModel):
    group: str = _field("group", "")
    md5: str = _field("md5", "")
    data_id: str = _field("dataId", "")
    tenant: str = _field("tenant", "")


@dataclass
class ConfigContext(_JsonModel):
    group: str = _field("group", "")
    data_id: str = _field("dataId", "")
    tenant: str = _field("tenant", "")


@dataclass
class Instance(_JsonModel):
    instance_id: str = _field("instanceId", "")
    ip: str = _field("ip", "")
    port: int = _field("port", 0)
    weight: float = _field("weight", 0.0)
    healthy: bool = _field("healthy", False)
    enable: bool = _field("enabled", False)
    ephemeral: bool = _field("ephemeral", False)
    cluster_name: str = _field("clusterName", "")
    service_name: str = _field("serviceName", "")
    metadata: Dict[str, str] = _field("metadata", factory=dict)
    instance_heart_beat_interval: int = _field("instanceHeartBeatInterval", 0)
    ip_delete_timeout: int = _field("ipDeleteTimeout", 0)
    instance_heart_beat_time_out: int = _field("instanceHeartBeatTimeOut", 0)

    @classmethod
    def from_dict(cls, data: Any) -> "Instance":
        """Build an instance from a decoded JSON object."""
        return _from_dict(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        """Return the instance as a JSON-shaped dictionary."""
        return _to_dict(self)


@dataclass
class Service(_JsonModel):
    cache_millis: int = _field("cacheMillis", 0)
    hosts: List[Instance] = _field("hosts", factory=list)
    checksum: str = _field("checksum", "")
    last_ref_time: int = _field("lastRefTime", 0)
    clusters: str = _field("clusters", "")
    name: str = _field("name", "")
    group_name: str = _field("groupName", "")
    valid: bool = _field("valid", False)
    all_ips: bool = _field("allIPs", False)
    reach_protection_threshold: bool = _field("reachProtectionThreshold", False)

    @classmethod
    def from_dict(cls, data: Any) -> "Service":
        """Build a service, with its hosts, from a decoded JSON object."""
        return _from_dict(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        """Return the service as a JSON-shaped dictionary."""
        return _to_dict(self)


@dataclass
class ServiceSelector(_JsonModel):
    selector: str = _field("Selector", "")


@dataclass
class ServiceInfo(_JsonModel):
    app: str = _field("app", "")
    group: str = _field("group", "")
    health_check_mode: str = _field("healthCheckMode", "")
    metadata: Dict[str, str] = _field("metadata", factory=dict)
    name: str = _field("name", "")
    protect_threshold: float = _field("protectThreshold", 0.0)
    selector: ServiceSelector = _field("selector", factory=ServiceSelector)


@dataclass
class ClusterHealthChecker(_JsonModel):
    type: str = _field("type", "")


@dataclass
class Cluster(_JsonModel):
    service_name: str = _field("serviceName", "")
    name: str = _field("name", "")
    healthy_checker: ClusterHealthChecker = _field(
        "healthyChecker", factory=ClusterHealthChecker
    )
    default_port: int = _field("defaultPort", 0)
    default_check_port: int = _field("defaultCheckPort", 0)
    use_ip_port4_check: bool = _field("useIpPort4Check", False)
    metadata: Dict[str, str] = _field("metadata", factory=dict)


@dataclass
class ServiceDetail(_JsonModel):
    service: ServiceInfo = _field("service", factory=ServiceInfo)
    clusters: List[Cluster] = _field("clusters", factory=list)


@dataclass
class BeatInfo(_JsonModel):
    ip: str = _field("ip", "")
    port: int = _field("port", 0)
    weight: float = _field("weight", 0.0)
    service_name: str = _field("serviceName", "")
    cluster: str = _field("cluster", "")
    metadata: Dict[str, str] = _field("metadata", factory=dict)
    scheduled: bool = _field("scheduled", False)
    period: float = _field(None, 0.0)
    state: State = _field(None, State.RUNNING)


@dataclass
class ExpressionSelector(_JsonModel):
    type: str = _field("type", "")
    expression: str = _field("expression", "")


@dataclass
class ServiceList(_JsonModel):
    count: int = _field("count", 0)
    doms: List[str] = _field("doms", factory=list)