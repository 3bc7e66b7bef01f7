"""Typed views of responses returned by the OpenSearch REST API."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping

from osgateway.requests import (
    ActionGroup,
    ComponentTemplate,
    IndexTemplate,
    Role,
    RoleMapping,
    Tenant,
    User,
)


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    return 0 if value is None else int(value)


def _float(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    return 0.0 if value is None else float(value)


def _bool(data: Mapping[str, Any], key: str) -> bool:
    return bool(data.get(key) or False)


def _strs(data: Mapping[str, Any], key: str) -> list[str]:
    return [str(item) for item in data.get(key) or []]


def _str_map(data: Mapping[str, Any], key: str) -> dict[str, str]:
    return {
        str(k): "" if v is None else str(v) for k, v in (data.get(key) or {}).items()
    }


def _obj(data: Mapping[str, Any], key: str) -> dict[str, Any]:
    return dict(data.get(key) or {})


@dataclass
class CatHealthResponse:
    """One row of ``_cat/health``."""

    cluster: str = ""
    status: str = ""
    node_total: str = ""
    node_data: str = ""
    shards: str = ""
    primary_shards: str = ""
    relocating_shards: str = ""
    initializing_shards: str = ""
    unassigned_shards: str = ""
    pending_tasks: str = ""
    active_shards_percent: str = ""
    max_task_wait_time: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CatHealthResponse:
        data = data or {}
        return cls(
            cluster=_str(data, "cluster"),
            status=_str(data, "status"),
            node_total=_str(data, "node.total"),
            node_data=_str(data, "node.data"),
            shards=_str(data, "shards"),
            primary_shards=_str(data, "pri"),
            relocating_shards=_str(data, "relo"),
            initializing_shards=_str(data, "init"),
            unassigned_shards=_str(data, "unassign"),
            pending_tasks=_str(data, "pending_tasks"),
            active_shards_percent=_str(data, "active_shards_percent"),
            max_task_wait_time=_str(data, "max_task_wait_time"),
        )


@dataclass
class CatIndicesResponse:
    """One row of ``_cat/indices``."""

    health: str = ""
    status: str = ""
    index: str = ""
    uuid: str = ""
    pri: str = ""
    rep: str = ""
    docs_count: str = ""
    docs_deleted: str = ""
    store_size: str = ""
    pri_store_size: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CatIndicesResponse:
        data = data or {}
        return cls(
            health=_str(data, "health"),
            status=_str(data, "status"),
            index=_str(data, "index"),
            uuid=_str(data, "uuid"),
            pri=_str(data, "pri"),
            rep=_str(data, "rep"),
            docs_count=_str(data, "docs.count"),
            docs_deleted=_str(data, "docs.deleted"),
            store_size=_str(data, "tore.size"),
            pri_store_size=_str(data, "pri.store.size"),
        )


@dataclass
class CatNodesResponse:
    """One row of ``_cat/nodes``."""

    ip: str = ""
    heap_percent: str = ""
    ram_percent: str = ""
    cpu: str = ""
    load_1m: str = ""
    load_5m: str = ""
    load_15m: str = ""
    node_role: str = ""
    master: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CatNodesResponse:
        data = data or {}
        return cls(
            ip=_str(data, "ip"),
            heap_percent=_str(data, "heap.percent"),
            ram_percent=_str(data, "ram.percent"),
            cpu=_str(data, "cpu"),
            load_1m=_str(data, "load_1m"),
            load_5m=_str(data, "load_5m"),
            load_15m=_str(data, "load_15m"),
            node_role=_str(data, "node.role"),
            master=_str(data, "master"),
            name=_str(data, "name"),
        )


@dataclass
class CatShardsResponse:
    """One row of ``_cat/shards``."""

    index: str = ""
    shard: str = ""
    primary_or_replica: str = ""
    state: str = ""
    docs: str = ""
    store: str = ""
    ip: str = ""
    node_name: str = ""
    node_id: str = ""
    unassigned_at: str = ""
    unassigned_details: str = ""
    unassigned_for: str = ""
    unassigned_reason: str = ""
    completion_size: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CatShardsResponse:
        data = data or {}
        return cls(
            index=_str(data, "index"),
            shard=_str(data, "shard"),
            primary_or_replica=_str(data, "prirep"),
            state=_str(data, "state"),
            docs=_str(data, "docs"),
            store=_str(data, "store"),
            ip=_str(data, "ip"),
            node_name=_str(data, "node"),
            node_id=_str(data, "id"),
            unassigned_at=_str(data, "unassigned.at"),
            unassigned_details=_str(data, "ud"),
            unassigned_for=_str(data, "uf"),
            unassigned_reason=_str(data, "ur"),
            completion_size=_str(data, "cs"),
        )


@dataclass
class IndexHealth:
    """Health of a single index within ``_cluster/health``."""

    status: str = ""
    number_of_shards: int = 0
    number_of_replicas: int = 0
    active_primary_shards: int = 0
    active_shards: int = 0
    relocating_shards: int = 0
    initializing_shards: int = 0
    unassigned_shards: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> IndexHealth:
        data = data or {}
        return cls(
            status=_str(data, "status"),
            number_of_shards=_int(data, "number_of_shards"),
            number_of_replicas=_int(data, "number_of_replicas"),
            active_primary_shards=_int(data, "active_primary_shards"),
            active_shards=_int(data, "active_shards"),
            relocating_shards=_int(data, "relocating_shards"),
            initializing_shards=_int(data, "initializing_shards"),
            unassigned_shards=_int(data, "unassigned_shards"),
        )


@dataclass
class ClusterHealthResponse:
    """The body of ``_cluster/health``."""

    status: str = ""
    active_shards: int = 0
    relocating_shards: int = 0
    initializing_shards: int = 0
    unassigned_shards: int = 0
    percent_active: float = 0.0
    indices: dict[str, IndexHealth] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ClusterHealthResponse:
        data = data or {}
        return cls(
            status=_str(data, "status"),
            active_shards=_int(data, "active_shards"),
            relocating_shards=_int(data, "relocating_shards"),
            initializing_shards=_int(data, "initializing_shards"),
            unassigned_shards=_int(data, "unassigned_shards"),
            percent_active=_float(data, "active_shards_percent_as_number"),
            indices={
                str(name): IndexHealth.from_dict(health)
                for name, health in (data.get("indices") or {}).items()
            },
        )


@dataclass
class ShardAllocation:
    """A shard copy as listed in the routing table."""

    index: str = ""
    shard: int = 0
    primary: bool = False
    state: str = ""
    node: str = ""
    relocating_node: str = ""
    allocation_id: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ShardAllocation:
        data = data or {}
        return cls(
            index=_str(data, "index"),
            shard=_int(data, "shard"),
            primary=_bool(data, "primary"),
            state=_str(data, "state"),
            node=_str(data, "node"),
            relocating_node=_str(data, "relocating_node"),
            allocation_id=_str_map(data, "allocation_id"),
        )


@dataclass
class UnassignedShard:
    """A shard copy that is not assigned to any node."""

    index: str = ""
    shard: int = 0
    primary: bool = False
    state: str = ""
    node: str = ""
    relocating_node: str = ""
    recovery_source: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> UnassignedShard:
        data = data or {}
        return cls(
            index=_str(data, "index"),
            shard=_int(data, "shard"),
            primary=_bool(data, "primary"),
            state=_str(data, "state"),
            node=_str(data, "node"),
            relocating_node=_str(data, "relocating_node"),
            recovery_source=_str_map(data, "recovery_source"),
        )


@dataclass
class UnassignedInfo:
    """Why and since when a shard is unassigned."""

    reason: str = ""
    at: str = ""
    failed_attempts: int = 0
    failed_nodes: list[str] = field(default_factory=list)
    delayed: bool = False
    details: str = ""
    allocation_status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> UnassignedInfo:
        data = data or {}
        return cls(
            reason=_str(data, "reason"),
            at=_str(data, "at"),
            failed_attempts=_int(data, "failed_attempts"),
            failed_nodes=_strs(data, "failed_nodes"),
            delayed=_bool(data, "delayed"),
            details=_str(data, "details"),
            allocation_status=_str(data, "allocation_status"),
        )


@dataclass
class RerouteNode:
    """A node as described in the reroute cluster state."""

    name: str = ""
    ephemeral_id: int = 0
    state_uuid: str = ""
    transport_address: str = ""
    attributes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> RerouteNode:
        data = data or {}
        return cls(
            name=_str(data, "name"),
            ephemeral_id=_int(data, "ephemeral_id"),
            state_uuid=_str(data, "state_uuid"),
            transport_address=_str(data, "transport_address"),
            attributes=_str_map(data, "attributes"),
        )


def _shard_lists(data: Mapping[str, Any] | None) -> dict[str, list[ShardAllocation]]:
    return {
        str(key): [ShardAllocation.from_dict(item) for item in items or []]
        for key, items in (data or {}).items()
    }


@dataclass
class RoutingTable:
    """Routing table: index name to shard number to shard copies."""

    indices: dict[str, dict[str, list[ShardAllocation]]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> RoutingTable:
        data = data or {}
        return cls(
            indices={
                str(name): _shard_lists((index or {}).get("shards"))
                for name, index in (data.get("indices") or {}).items()
            }
        )


@dataclass
class RoutingNodes:
    """Shard copies grouped by node, plus the unassigned ones."""

    unassigned: list[UnassignedShard] = field(default_factory=list)
    nodes: dict[str, list[ShardAllocation]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> RoutingNodes:
        data = data or {}
        return cls(
            unassigned=[UnassignedShard.from_dict(item) for item in data.get("unassigned") or []],
            nodes=_shard_lists(data.get("nodes")),
        )


@dataclass
class ClusterRerouteState:
    """Cluster state returned by the reroute API."""

    cluster_uuid: str = ""
    version: int = 0
    state_uuid: str = ""
    master_node: str = ""
    blocks: dict[str, str] = field(default_factory=dict)
    nodes: dict[str, RerouteNode] = field(default_factory=dict)
    routing_table: dict[str, RoutingTable] = field(default_factory=dict)
    routing_nodes: dict[str, list[RoutingNodes]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ClusterRerouteState:
        data = data or {}
        return cls(
            cluster_uuid=_str(data, "cluster_uuid"),
            version=_int(data, "version"),
            state_uuid=_str(data, "state_uuid"),
            master_node=_str(data, "master_node"),
            blocks=_str_map(data, "blocks"),
            nodes={
                str(key): RerouteNode.from_dict(node)
                for key, node in (data.get("nodes") or {}).items()
            },
            routing_table={
                str(key): RoutingTable.from_dict(table)
                for key, table in (data.get("routing_table") or {}).items()
            },
            routing_nodes={
                str(key): [RoutingNodes.from_dict(item) for item in items or []]
                for key, items in (data.get("routing_nodes") or {}).items()
            },
        )


@dataclass
class ClusterRerouteResponse:
    """The body of ``_cluster/reroute``."""

    acknowledged: bool = False
    state: ClusterRerouteState = field(default_factory=ClusterRerouteState)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ClusterRerouteResponse:
        data = data or {}
        return cls(
            acknowledged=_bool(data, "acknowledged"),
            state=ClusterRerouteState.from_dict(data.get("state")),
        )


@dataclass
class ClusterSettingsResponse:
    """Nested persistent and transient cluster settings."""

    persistent: dict[str, Any] = field(default_factory=dict)
    transient: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ClusterSettingsResponse:
        data = data or {}
        return cls(persistent=_obj(data, "persistent"), transient=_obj(data, "transient"))

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.persistent:
            body["persistent"] = self.persistent
        if self.transient:
            body["transient"] = self.transient
        return body


@dataclass
class Settings:
    """The flat-settings keys that the operator cares about."""

    cluster_routing_allocation_enable: str = ""
    cluster_routing_allocation_exclude: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Settings:
        data = data or {}
        return cls(
            cluster_routing_allocation_enable=_str(data, "cluster.routing.allocation.enable"),
            cluster_routing_allocation_exclude=_str(data, "cluster.routing.allocation.exclude._name"),
        )


@dataclass
class FlatClusterSettingsResponse:
    """Cluster settings fetched with ``flat_settings=true``."""

    persistent: Settings = field(default_factory=Settings)
    transient: Settings = field(default_factory=Settings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> FlatClusterSettingsResponse:
        data = data or {}
        return cls(
            persistent=Settings.from_dict(data.get("persistent")),
            transient=Settings.from_dict(data.get("transient")),
        )


class EnableBalanceRoutingMode(IntEnum):
    """Values of ``cluster.routing.rebalance.enable``."""

    ALL = 0
    PRIMARIES = 1
    REPLICAS = 2
    NONE = 3

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class MainResponseVersion:
    """The ``version`` block of the root endpoint."""

    distribution: str = ""
    number: str = ""
    build_type: str = ""
    build_hash: str = ""
    build_date: str = ""
    build_snapshot: bool = False
    lucene_version: str = ""
    minimum_wire_compatibility_version: str = ""
    minimum_index_compatibility_version: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> MainResponseVersion:
        data = data or {}
        return cls(
            distribution=_str(data, "distribution"),
            number=_str(data, "number"),
            build_type=_str(data, "build_type"),
            build_hash=_str(data, "build_hash"),
            build_date=_str(data, "build_date"),
            build_snapshot=_bool(data, "build_snapshot"),
            lucene_version=_str(data, "lucene_version"),
            minimum_wire_compatibility_version=_str(data, "minimum_wire_compatibility_version"),
            minimum_index_compatibility_version=_str(data, "minimum_index_compatibility_version"),
        )


@dataclass
class MainResponse:
    """The body of the root endpoint ``/``."""

    name: str = ""
    cluster_name: str = ""
    cluster_uuid: str = ""
    version: MainResponseVersion = field(default_factory=MainResponseVersion)
    tagline: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> MainResponse:
        data = data or {}
        return cls(
            name=_str(data, "name"),
            cluster_name=_str(data, "cluster_name"),
            cluster_uuid=_str(data, "cluster_uuid"),
            version=MainResponseVersion.from_dict(data.get("version")),
            tagline=_str(data, "tagline"),
        )


@dataclass
class NodesStatsGeneralInfo:
    """The ``_nodes`` summary of a nodes-stats response."""

    total: int = 0
    successful: int = 0
    failed: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> NodesStatsGeneralInfo:
        data = data or {}
        return cls(
            total=_int(data, "total"),
            successful=_int(data, "successful"),
            failed=_int(data, "failed"),
        )


@dataclass
class NodeStatThreadPool:
    """Statistics of one thread pool."""

    threads: int = 0
    queue: int = 0
    active: int = 0
    rejected: int = 0
    largest: int = 0
    completed: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> NodeStatThreadPool:
        data = data or {}
        return cls(
            threads=_int(data, "threads"),
            queue=_int(data, "queue"),
            active=_int(data, "active"),
            rejected=_int(data, "rejected"),
            largest=_int(data, "largest"),
            completed=_int(data, "completed"),
        )


@dataclass
class NodeStatBreakers:
    """Statistics of one circuit breaker."""

    limit_size_in_bytes: int = 0
    estimated_size_in_bytes: int = 0
    overhead: float = 0.0
    tripped: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> NodeStatBreakers:
        data = data or {}
        return cls(
            limit_size_in_bytes=_int(data, "limit_size_in_bytes"),
            estimated_size_in_bytes=_int(data, "estimated_size_in_bytes"),
            overhead=_float(data, "overhead"),
            tripped=_int(data, "tripped"),
        )


@dataclass
class NodeStatAdaptiveSelection:
    """Adaptive replica selection statistics towards one node."""

    outgoing_searches: int = 0
    avg_queue_size: int = 0
    avg_service_time_ns: int = 0
    avg_response_time_ns: int = 0
    rank: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> NodeStatAdaptiveSelection:
        data = data or {}
        return cls(
            outgoing_searches=_int(data, "outgoing_searches"),
            avg_queue_size=_int(data, "avg_queue_size"),
            avg_service_time_ns=_int(data, "avg_service_time_ns"),
            avg_response_time_ns=_int(data, "avg_response_time_ns"),
            rank=_str(data, "rank"),
        )


@dataclass
class NodeStatScriptContext:
    """Script compilation statistics of one context."""

    context: str = ""
    compilations: int = 0
    cache_evictions: int = 0
    compilation_limit_triggered: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> NodeStatScriptContext:
        data = data or {}
        return cls(
            context=_str(data, "context"),
            compilations=_int(data, "compilations"),
            cache_evictions=_int(data, "cache_evictions"),
            compilation_limit_triggered=_int(data, "compilation_limit_triggered"),
        )


@dataclass
class NodeStatScriptCache:
    """Script cache statistics."""

    sum: dict[str, Any] = field(default_factory=dict)
    contexts: list[NodeStatScriptContext] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> NodeStatScriptCache:
        data = data or {}
        return cls(
            sum=_obj(data, "sum"),
            contexts=[NodeStatScriptContext.from_dict(item) for item in data.get("contexts") or []],
        )


@dataclass
class NodeStatResponse:
    """Statistics of a single node."""

    id: str = ""
    name: str = ""
    timestamp: int = 0
    transport_address: str = ""
    host: str = ""
    ip: str = ""
    roles: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    indices: dict[str, Any] = field(default_factory=dict)
    os: dict[str, Any] = field(default_factory=dict)
    process: dict[str, Any] = field(default_factory=dict)
    jvm: dict[str, Any] = field(default_factory=dict)
    thread_pool: dict[str, NodeStatThreadPool] = field(default_factory=dict)
    fs: dict[str, Any] = field(default_factory=dict)
    transport: dict[str, Any] = field(default_factory=dict)
    http: dict[str, Any] = field(default_factory=dict)
    breakers: dict[str, NodeStatBreakers] = field(default_factory=dict)
    script: dict[str, Any] = field(default_factory=dict)
    discovery: dict[str, Any] = field(default_factory=dict)
    ingest: dict[str, Any] = field(default_factory=dict)
    adaptive_selection: dict[str, NodeStatAdaptiveSelection] = field(default_factory=dict)
    script_cache: NodeStatScriptCache = field(default_factory=NodeStatScriptCache)
    indexing_pressure: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> NodeStatResponse:
        data = data or {}
        node_id = data.get("Id", data.get("id"))
        return cls(
            id="" if node_id is None else str(node_id),
            name=_str(data, "name"),
            timestamp=_int(data, "timestamp"),
            transport_address=_str(data, "transport_address"),
            host=_str(data, "host"),
            ip=_str(data, "ip"),
            roles=_strs(data, "roles"),
            attributes=_str_map(data, "attributes"),
            indices=_obj(data, "indices"),
            os=_obj(data, "os"),
            process=_obj(data, "process"),
            jvm=_obj(data, "jvm"),
            thread_pool={
                str(k): NodeStatThreadPool.from_dict(v)
                for k, v in (data.get("thread_pool") or {}).items()
            },
            fs=_obj(data, "fs"),
            transport=_obj(data, "transport"),
            http=_obj(data, "http"),
            breakers={
                str(k): NodeStatBreakers.from_dict(v)
                for k, v in (data.get("breakers") or {}).items()
            },
            script=_obj(data, "script"),
            discovery=_obj(data, "discovery"),
            ingest=_obj(data, "ingest"),
            adaptive_selection={
                str(k): NodeStatAdaptiveSelection.from_dict(v)
                for k, v in (data.get("adaptive_selection") or {}).items()
            },
            script_cache=NodeStatScriptCache.from_dict(data.get("script_cache")),
            indexing_pressure=_obj(data, "indexing_pressure"),
        )


@dataclass
class NodesStatsResponse:
    """The body of ``_nodes/stats``."""

    general_info: NodesStatsGeneralInfo = field(default_factory=NodesStatsGeneralInfo)
    cluster_name: str = ""
    nodes: dict[str, NodeStatResponse] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> NodesStatsResponse:
        data = data or {}
        return cls(
            general_info=NodesStatsGeneralInfo.from_dict(data.get("_nodes")),
            cluster_name=_str(data, "cluster_name"),
            nodes={
                str(k): NodeStatResponse.from_dict(v)
                for k, v in (data.get("nodes") or {}).items()
            },
        )


@dataclass
class NamedIndexTemplate:
    """An index template together with its name."""

    name: str = ""
    index_template: IndexTemplate = field(default_factory=IndexTemplate)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> NamedIndexTemplate:
        data = data or {}
        return cls(
            name=_str(data, "name"),
            index_template=IndexTemplate.from_dict(data.get("index_template")),
        )


@dataclass
class GetIndexTemplatesResponse:
    """The body of ``GET _index_template/<name>``."""

    index_templates: list[NamedIndexTemplate] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> GetIndexTemplatesResponse:
        data = data or {}
        return cls(
            index_templates=[
                NamedIndexTemplate.from_dict(item) for item in data.get("index_templates") or []
            ]
        )


@dataclass
class NamedComponentTemplate:
    """A component template together with its name."""

    name: str = ""
    component_template: ComponentTemplate = field(default_factory=ComponentTemplate)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> NamedComponentTemplate:
        data = data or {}
        return cls(
            name=_str(data, "name"),
            component_template=ComponentTemplate.from_dict(data.get("component_template")),
        )


@dataclass
class GetComponentTemplatesResponse:
    """The body of ``GET _component_template/<name>``."""

    component_templates: list[NamedComponentTemplate] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> GetComponentTemplatesResponse:
        data = data or {}
        return cls(
            component_templates=[
                NamedComponentTemplate.from_dict(item)
                for item in data.get("component_templates") or []
            ]
        )


def parse_role_mappings(data: Mapping[str, Any] | None) -> dict[str, RoleMapping]:
    """Parse a security API response keyed by role-mapping name."""
    return {str(k): RoleMapping.from_dict(v) for k, v in (data or {}).items()}


def parse_roles(data: Mapping[str, Any] | None) -> dict[str, Role]:
    """Parse a security API response keyed by role name."""
    return {str(k): Role.from_dict(v) for k, v in (data or {}).items()}


def parse_users(data: Mapping[str, Any] | None) -> dict[str, User]:
    """Parse a security API response keyed by user name."""
    return {str(k): User.from_dict(v) for k, v in (data or {}).items()}


def parse_action_groups(data: Mapping[str, Any] | None) -> dict[str, ActionGroup]:
    """Parse a security API response keyed by action-group name."""
    return {str(k): ActionGroup.from_dict(v) for k, v in (data or {}).items()}


def parse_tenants(data: Mapping[str, Any] | None) -> dict[str, Tenant]:
    """Parse a security API response keyed by tenant name."""
    return {str(k): Tenant.from_dict(v) for k, v in (data or {}).items()}