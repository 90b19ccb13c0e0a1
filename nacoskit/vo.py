"""Request parameter objects for the configuration and naming clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from nacoskit.model import Instance
from nacoskit.params import param

Listener = Callable[[str, str, str, str], None]
"""Called with namespace, group, data id and data when a configuration changes."""

SubscribeCallback = Callable[[list[Instance], Optional[BaseException]], None]


@dataclass
class ConfigParam:
    """A configuration to publish, fetch or listen to."""

    data_id: str = param("dataId", default="")
    group: str = param("group", default="")
    content: str = param("content", default="")
    tag: str = param("tag", default="")
    app_name: str = param("appName", default="")
    beta_ips: str = param("betaIps", default="")
    cas_md5: str = param("casMd5", default="")
    type: str = param("type", default="")
    encrypted_data_key: str = param("encryptedDataKey", default="")
    on_change: Optional[Listener] = None


@dataclass
class SearchConfigParam:
    """A paged configuration search."""

    search: str = param("search", default="")
    data_id: str = param("dataId", default="")
    group: str = param("group", default="")
    tag: str = param("tag", default="")
    app_name: str = param("appName", default="")
    page_no: int = param("pageNo", default=0)
    page_size: int = param("pageSize", default=0)


@dataclass
class RegisterInstanceParam:
    """An instance to register; weight must be greater than 0."""

    ip: str = param("ip", default="")
    port: int = param("port", default=0)
    weight: float = param("weight", default=0.0)
    enable: bool = param("enabled", default=False)
    healthy: bool = param("healthy", default=False)
    metadata: Optional[dict[str, str]] = param("metadata", default=None)
    cluster_name: str = param("clusterName", default="")
    service_name: str = param("serviceName", default="")
    group_name: str = param("groupName", default="")
    ephemeral: bool = param("ephemeral", default=False)


@dataclass
class BatchRegisterInstanceParam:
    """Several instances of one service to register at once."""

    service_name: str = param("serviceName", default="")
    group_name: str = param("groupName", default="")
    instances: list[RegisterInstanceParam] = field(default_factory=list)


@dataclass
class DeregisterInstanceParam:
    """An instance to remove."""

    ip: str = param("ip", default="")
    port: int = param("port", default=0)
    cluster: str = param("cluster", default="")
    service_name: str = param("serviceName", default="")
    group_name: str = param("groupName", default="")
    ephemeral: bool = param("ephemeral", default=False)


@dataclass
class UpdateInstanceParam:
    """New settings for a registered instance; weight must be greater than 0."""

    ip: str = param("ip", default="")
    port: int = param("port", default=0)
    weight: float = param("weight", default=0.0)
    enable: bool = param("enabled", default=False)
    healthy: bool = param("healthy", default=False)
    metadata: Optional[dict[str, str]] = param("metadata", default=None)
    cluster_name: str = param("clusterName", default="")
    service_name: str = param("serviceName", default="")
    group_name: str = param("groupName", default="")
    ephemeral: bool = param("ephemeral", default=False)


@dataclass
class GetServiceParam:
    """A service lookup, optionally limited to clusters."""

    clusters: list[str] = param("clusters", default_factory=list)
    service_name: str = param("serviceName", default="")
    group_name: str = param("groupName", default="")


@dataclass
class GetAllServiceInfoParam:
    """A paged listing of the services in a namespace and group."""

    name_space: str = param("nameSpace", default="")
    group_name: str = param("groupName", default="")
    page_no: int = param("pageNo", default=0)
    page_size: int = param("pageSize", default=0)


@dataclass
class SubscribeParam:
    """A subscription to changes of a service's instances."""

    service_name: str = param("serviceName", default="")
    clusters: list[str] = param("clusters", default_factory=list)
    group_name: str = param("groupName", default="")
    subscribe_callback: Optional[SubscribeCallback] = None


@dataclass
class SelectAllInstancesParam:
    """A query for all instances of a service."""

    clusters: list[str] = param("clusters", default_factory=list)
    service_name: str = param("serviceName", default="")
    group_name: str = param("groupName", default="")


@dataclass
class SelectInstancesParam:
    """A query for only healthy, or only unhealthy, instances of a service."""

    clusters: list[str] = param("clusters", default_factory=list)
    service_name: str = param("serviceName", default="")
    group_name: str = param("groupName", default="")
    healthy_only: bool = param("healthyOnly", default=False)


@dataclass
class SelectOneHealthInstanceParam:
    """A query for one healthy instance of a service."""

    clusters: list[str] = param("clusters", default_factory=list)
    service_name: str = param("serviceName", default="")
    group_name: str = param("groupName", default="")