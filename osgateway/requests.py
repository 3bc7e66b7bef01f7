"""Request bodies sent to the OpenSearch REST API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _strings(data: Mapping[str, Any], key: str) -> list[str]:
    return [str(item) for item in data.get(key) or []]


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _put_if(body: dict[str, Any], key: str, value: Any) -> None:
    """Set ``key`` only when ``value`` is non-empty, as JSON omitempty does."""
    if value:
        body[key] = value


@dataclass
class ActionGroup:
    """A security plugin action group."""

    allowed_actions: list[str] = field(default_factory=list)
    type: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"allowed_actions": list(self.allowed_actions)}
        _put_if(body, "type", self.type)
        _put_if(body, "description", self.description)
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ActionGroup:
        data = data or {}
        return cls(
            allowed_actions=_strings(data, "allowed_actions"),
            type=_text(data, "type"),
            description=_text(data, "description"),
        )


@dataclass
class ReRouteMoveAction:
    """A ``move`` command for the cluster reroute API."""

    index: str = ""
    shard: str = ""
    from_node: str = ""
    to_node: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "shard": self.shard,
            "from_node": self.from_node,
            "to_node": self.to_node,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ReRouteMoveAction:
        data = data or {}
        return cls(
            index=_text(data, "index"),
            shard=_text(data, "shard"),
            from_node=_text(data, "from_node"),
            to_node=_text(data, "to_node"),
        )


@dataclass
class RoleMapping:
    """Mapping of backend roles, hosts and users onto a security role."""

    backend_roles: list[str] = field(default_factory=list)
    hosts: list[str] = field(default_factory=list)
    users: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        _put_if(body, "backend_roles", list(self.backend_roles))
        _put_if(body, "hosts", list(self.hosts))
        _put_if(body, "users", list(self.users))
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> RoleMapping:
        data = data or {}
        return cls(
            backend_roles=_strings(data, "backend_roles"),
            hosts=_strings(data, "hosts"),
            users=_strings(data, "users"),
        )


@dataclass
class IndexPermissionSpec:
    """Index-level permissions of a role."""

    index_patterns: list[str] = field(default_factory=list)
    document_level_security: str = ""
    field_level_security: list[str] = field(default_factory=list)
    allowed_actions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        _put_if(body, "index_patterns", list(self.index_patterns))
        _put_if(body, "dls", self.document_level_security)
        _put_if(body, "fls", list(self.field_level_security))
        _put_if(body, "allowed_actions", list(self.allowed_actions))
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> IndexPermissionSpec:
        data = data or {}
        return cls(
            index_patterns=_strings(data, "index_patterns"),
            document_level_security=_text(data, "dls"),
            field_level_security=_strings(data, "fls"),
            allowed_actions=_strings(data, "allowed_actions"),
        )


@dataclass
class TenantPermissionsSpec:
    """Tenant-level permissions of a role."""

    tenant_patterns: list[str] = field(default_factory=list)
    allowed_actions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        _put_if(body, "tenant_patterns", list(self.tenant_patterns))
        _put_if(body, "allowed_actions", list(self.allowed_actions))
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> TenantPermissionsSpec:
        data = data or {}
        return cls(
            tenant_patterns=_strings(data, "tenant_patterns"),
            allowed_actions=_strings(data, "allowed_actions"),
        )


@dataclass
class Role:
    """A security plugin role."""

    cluster_permissions: list[str] = field(default_factory=list)
    index_permissions: list[IndexPermissionSpec] = field(default_factory=list)
    tenant_permissions: list[TenantPermissionsSpec] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        _put_if(body, "cluster_permissions", list(self.cluster_permissions))
        _put_if(body, "index_permissions", [p.to_dict() for p in self.index_permissions])
        _put_if(body, "tenant_permissions", [p.to_dict() for p in self.tenant_permissions])
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Role:
        data = data or {}
        return cls(
            cluster_permissions=_strings(data, "cluster_permissions"),
            index_permissions=[
                IndexPermissionSpec.from_dict(item) for item in data.get("index_permissions") or []
            ],
            tenant_permissions=[
                TenantPermissionsSpec.from_dict(item) for item in data.get("tenant_permissions") or []
            ],
        )


@dataclass
class IndexAlias:
    """An alias definition inside an index template."""

    index: str = ""
    alias: str = ""
    filter: Any = None
    routing: str = ""
    is_write_index: bool = False

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        _put_if(body, "index", self.index)
        _put_if(body, "alias", self.alias)
        if self.filter is not None:
            body["filter"] = self.filter
        _put_if(body, "routing", self.routing)
        _put_if(body, "is_write_index", self.is_write_index)
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> IndexAlias:
        data = data or {}
        return cls(
            index=_text(data, "index"),
            alias=_text(data, "alias"),
            filter=data.get("filter"),
            routing=_text(data, "routing"),
            is_write_index=bool(data.get("is_write_index") or False),
        )


@dataclass
class Index:
    """Settings, mappings and aliases applied to an index."""

    settings: Any = None
    mappings: Any = None
    aliases: dict[str, IndexAlias] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.settings is not None:
            body["settings"] = self.settings
        if self.mappings is not None:
            body["mappings"] = self.mappings
        _put_if(body, "aliases", {name: alias.to_dict() for name, alias in self.aliases.items()})
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Index:
        data = data or {}
        return cls(
            settings=data.get("settings"),
            mappings=data.get("mappings"),
            aliases={
                str(name): IndexAlias.from_dict(alias)
                for name, alias in (data.get("aliases") or {}).items()
            },
        )


@dataclass
class IndexTemplate:
    """A composable index template."""

    index_patterns: list[str] = field(default_factory=list)
    template: Index = field(default_factory=Index)
    composed_of: list[str] = field(default_factory=list)
    priority: int = 0
    version: int = 0
    meta: Any = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "index_patterns": list(self.index_patterns),
            "template": self.template.to_dict(),
        }
        _put_if(body, "composed_of", list(self.composed_of))
        _put_if(body, "priority", self.priority)
        _put_if(body, "version", self.version)
        if self.meta is not None:
            body["_meta"] = self.meta
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> IndexTemplate:
        data = data or {}
        return cls(
            index_patterns=_strings(data, "index_patterns"),
            template=Index.from_dict(data.get("template")),
            composed_of=_strings(data, "composed_of"),
            priority=int(data.get("priority") or 0),
            version=int(data.get("version") or 0),
            meta=data.get("_meta"),
        )


@dataclass
class ComponentTemplate:
    """A component template that index templates can be composed of."""

    template: Index = field(default_factory=Index)
    version: int = 0
    allow_auto_create: bool = False
    meta: Any = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"template": self.template.to_dict()}
        _put_if(body, "version", self.version)
        _put_if(body, "allow_auto_create", self.allow_auto_create)
        if self.meta is not None:
            body["_meta"] = self.meta
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ComponentTemplate:
        data = data or {}
        return cls(
            template=Index.from_dict(data.get("template")),
            version=int(data.get("version") or 0),
            allow_auto_create=bool(data.get("allow_auto_create") or False),
            meta=data.get("_meta"),
        )


@dataclass
class Tenant:
    """A security plugin tenant."""

    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Tenant:
        return cls(description=_text(data or {}, "description"))


@dataclass
class User:
    """An internal user of the security plugin."""

    password: str = ""
    opendistro_security_roles: list[str] = field(default_factory=list)
    backend_roles: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        _put_if(body, "password", self.password)
        _put_if(body, "opendistro_security_roles", list(self.opendistro_security_roles))
        _put_if(body, "backend_roles", list(self.backend_roles))
        _put_if(body, "attributes", dict(self.attributes))
        return body

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> User:
        data = data or {}
        return cls(
            password=_text(data, "password"),
            opendistro_security_roles=_strings(data, "opendistro_security_roles"),
            backend_roles=_strings(data, "backend_roles"),
            attributes={
                str(key): "" if value is None else str(value)
                for key, value in (data.get("attributes") or {}).items()
            },
        )