"""
Pydantic models for the JSON documents served by the frp admin API.

Use them with :func:`frp_client.decoders.model`:

    result = await client.get_server_info(decoder=model(ServerInfo))
    print(result.data.version)

Fields are optional because frp releases add and drop keys freely; unknown
keys are kept on the instance.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, RootModel
from pydantic.config import ConfigDict


class _FrpModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ServerInfo(_FrpModel):
    """GET /api/serverinfo on frps."""

    version: str = ""
    bind_port: Optional[int] = Field(default=None, alias="bindPort")
    vhost_http_port: Optional[int] = Field(default=None, alias="vhostHTTPPort")
    vhost_https_port: Optional[int] = Field(default=None, alias="vhostHTTPSPort")
    kcp_bind_port: Optional[int] = Field(default=None, alias="kcpBindPort")
    quic_bind_port: Optional[int] = Field(default=None, alias="quicBindPort")
    subdomain_host: Optional[str] = Field(default=None, alias="subdomainHost")
    max_pool_count: Optional[int] = Field(default=None, alias="maxPoolCount")
    max_ports_per_client: Optional[int] = Field(default=None, alias="maxPortsPerClient")
    heartbeat_timeout: Optional[int] = Field(default=None, alias="heartbeatTimeout")
    total_traffic_in: int = Field(default=0, alias="totalTrafficIn")
    total_traffic_out: int = Field(default=0, alias="totalTrafficOut")
    cur_conns: int = Field(default=0, alias="curConns")
    client_counts: int = Field(default=0, alias="clientCounts")
    proxy_type_count: Dict[str, int] = Field(default_factory=dict, alias="proxyTypeCount")


class ProxyStats(_FrpModel):
    """One entry of GET /api/proxy/{type} on frps."""

    name: str
    conf: Optional[Dict[str, Any]] = None
    client_version: Optional[str] = Field(default=None, alias="clientVersion")
    today_traffic_in: int = Field(default=0, alias="todayTrafficIn")
    today_traffic_out: int = Field(default=0, alias="todayTrafficOut")
    cur_conns: int = Field(default=0, alias="curConns")
    last_start_time: Optional[str] = Field(default=None, alias="lastStartTime")
    last_close_time: Optional[str] = Field(default=None, alias="lastCloseTime")
    status: str = ""


class ProxyList(_FrpModel):
    proxies: List[ProxyStats] = Field(default_factory=list)


class ProxyTraffic(_FrpModel):
    """GET /api/traffic/{name} on frps: daily byte counts, newest first."""

    name: str
    traffic_in: List[int] = Field(default_factory=list, alias="trafficIn")
    traffic_out: List[int] = Field(default_factory=list, alias="trafficOut")


class ProxyStatus(_FrpModel):
    name: str
    type: str = ""
    status: str = ""
    err: str = ""
    local_addr: str = ""
    plugin: str = ""
    remote_addr: str = ""


class ClientStatus(RootModel[Dict[str, List[ProxyStatus]]]):
    """GET /api/status on frpc: proxy states grouped by proxy type."""

    def proxies(self) -> List[ProxyStatus]:
        return [proxy for group in self.root.values() for proxy in group]
