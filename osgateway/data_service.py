"""Cluster maintenance: shard allocation, node draining and templates."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

import requests

from osgateway.client import (
    ADDITIONAL_SYSTEM_INDICES,
    OsClusterClient,
    describe_response,
    is_error,
)
from osgateway.errors import ApiError
from osgateway.helpers import find_by_path
from osgateway.requests import ComponentTemplate, IndexTemplate
from osgateway.responses import (
    ClusterHealthResponse,
    ClusterSettingsResponse,
    GetComponentTemplatesResponse,
    GetIndexTemplatesResponse,
)

logger = logging.getLogger(__name__)

CLUSTER_SETTINGS_EXCLUDE_BROKEN_PATH = ("cluster", "routing", "allocation", "exclude", "_name")
OBSERVABILITY_INDEX = ".opensearch-observability"
BASE_SYSTEM_INDICES = (".kibana_1", ".opendistro_security")


class ClusterSettingsAllocation(str, Enum):
    """Values of ``cluster.routing.allocation.enable``."""

    PRIMARIES = "primaries"
    ALL = "all"
    NONE = "none"


def _status_line(response: requests.Response) -> str:
    return f"{response.status_code} {response.reason}"


def _raise_api_error(response: requests.Response) -> None:
    raise ApiError(f"response from API is {_status_line(response)}", response.status_code)


def has_indices_with_no_replica(service: OsClusterClient) -> bool:
    """Whether any index has no replica configured."""
    return any(index.rep in ("", "0") for index in service.cat_indices())


def has_shards_on_node(service: OsClusterClient, node_name: str) -> bool:
    """Whether any shard is located on ``node_name``."""
    return any(shard.node_name == node_name for shard in service.cat_shards([]))


def has_index_primaries_on_node(
    service: OsClusterClient, node_name: str, indices: Iterable[str]
) -> bool:
    """Whether primaries of ``indices`` are still initializing or sit on ``node_name``."""
    for shard in service.cat_named_indices_shards([], indices):
        if shard.primary_or_replica != "p":
            continue
        if shard.state != "STARTED" or shard.node_name == node_name:
            return True
    return False


def _current_exclude(service: OsClusterClient) -> str:
    settings = service.get_cluster_settings()
    value, found = find_by_path(settings.transient, CLUSTER_SETTINGS_EXCLUDE_BROKEN_PATH)
    if not found or value is None:
        return ""
    return str(value)


def _exclude_name_settings(exclude: str) -> ClusterSettingsResponse:
    return ClusterSettingsResponse(
        transient={
            "cluster": {
                "routing": {"allocation": {"exclude": {"_name": exclude or None}}}
            }
        }
    )


def _allocation_enable_settings(enable: ClusterSettingsAllocation) -> ClusterSettingsResponse:
    return ClusterSettingsResponse(
        transient={"cluster": {"routing": {"allocation": {"enable": enable.value}}}}
    )


def append_exclude_node_host(service: OsClusterClient, node_name: str) -> bool:
    """Add ``node_name`` to the transient allocation exclude list."""
    current = _current_exclude(service)
    exclude = node_name
    if current:
        names = current.split(",")
        if node_name not in names:
            names.append(node_name)
        exclude = ",".join(names)
    service.put_cluster_settings(_exclude_name_settings(exclude))
    return True


def remove_exclude_node_host(service: OsClusterClient, node_name: str) -> bool:
    """Remove ``node_name`` from the transient allocation exclude list."""
    current = _current_exclude(service)
    if not current:
        return True
    exclude = current.replace(node_name, "").replace(",,", ",")
    service.put_cluster_settings(_exclude_name_settings(exclude))
    return True


def set_cluster_shard_allocation(
    service: OsClusterClient, enable_type: ClusterSettingsAllocation | str
) -> None:
    """Set the transient shard allocation mode."""
    service.put_cluster_settings(
        _allocation_enable_settings(ClusterSettingsAllocation(enable_type))
    )


def _continue_restart_with_yellow_health(health: ClusterHealthResponse) -> bool:
    """Allow restarts while only the observability index keeps the cluster yellow."""
    if health.status != "yellow":
        return False
    if (
        health.relocating_shards > 0
        or health.initializing_shards > 0
        or health.unassigned_shards > 1
    ):
        return False
    observability = health.indices.get(OBSERVABILITY_INDEX)
    return observability is not None and observability.status == "yellow"


def check_cluster_status_for_restart(
    service: OsClusterClient, drain_nodes: bool
) -> tuple[bool, str]:
    """Whether a restart may proceed, with the reason when it may not."""
    health = service.get_health()
    if health.status == "green" or _continue_restart_with_yellow_health(health):
        return True, ""
    if drain_nodes:
        return False, "cluster is not green and drain nodes is enabled"
    flat = service.get_flat_cluster_settings()
    if flat.transient.cluster_routing_allocation_enable == ClusterSettingsAllocation.ALL.value:
        return False, "waiting for health to be green"
    set_cluster_shard_allocation(service, ClusterSettingsAllocation.ALL)
    return False, "enabled shard allocation"


def reactivate_shard_allocation(service: OsClusterClient) -> None:
    """Set shard allocation back to ``all`` unless it already is."""
    flat = service.get_flat_cluster_settings()
    if flat.transient.cluster_routing_allocation_enable == ClusterSettingsAllocation.ALL.value:
        return
    set_cluster_shard_allocation(service, ClusterSettingsAllocation.ALL)


def prepare_pod_for_delete(
    service: OsClusterClient, pod_name: str, drain_node: bool, node_count: int
) -> bool:
    """Prepare a node for deletion; True when the pod may be deleted now."""
    if not drain_node:
        set_cluster_shard_allocation(service, ClusterSettingsAllocation.PRIMARIES)
        return True
    append_exclude_node_host(service, pod_name)
    if node_count == 2:
        system_indices = get_existing_system_indices(service)
        return not has_index_primaries_on_node(service, pod_name, system_indices)
    return not has_shards_on_node(service, pod_name)


def get_existing_system_indices(service: OsClusterClient) -> list[str]:
    """The known system indices that exist on the cluster, in a fixed order."""
    candidates = (*BASE_SYSTEM_INDICES, *ADDITIONAL_SYSTEM_INDICES)
    return [name for name in candidates if service.index_exists(name)]


def index_template_path(template_name: str) -> str:
    """Path of an index template."""
    return f"/_index_template/{template_name}"


def component_template_path(template_name: str) -> str:
    """Path of a component template."""
    return f"/_component_template/{template_name}"


def _exists(service: OsClusterClient, path: str) -> bool:
    response = service.head(path)
    if response.status_code == 404:
        return False
    if is_error(response):
        _raise_api_error(response)
    return True


def _delete(service: OsClusterClient, path: str) -> None:
    response = service.delete(path)
    if is_error(response):
        _raise_api_error(response)


def index_template_exists(service: OsClusterClient, template_name: str) -> bool:
    """Whether the index template exists."""
    return _exists(service, index_template_path(template_name))


def should_update_index_template(
    service: OsClusterClient, template_name: str, index_template: IndexTemplate
) -> bool:
    """Whether the stored index template differs from ``index_template``."""
    response = service.get(index_template_path(template_name))
    if response.status_code == 404:
        return True
    if is_error(response):
        _raise_api_error(response)
    parsed = GetIndexTemplatesResponse.from_dict(response.json())
    if len(parsed.index_templates) != 1:
        raise ApiError(
            f"found {len(parsed.index_templates)} index templates which fits the name "
            f"'{template_name}'"
        )
    existing = parsed.index_templates[0]
    if existing.name != template_name:
        raise ApiError(
            f"returned index template named '{existing.name}' does not equal the "
            f"requested name '{template_name}'"
        )
    if existing.index_template == index_template:
        return False
    logger.debug("existing index template: %r", existing.index_template)
    logger.debug("new index template: %r", index_template)
    logger.info("index template requires update")
    return True


def create_or_update_index_template(
    service: OsClusterClient, template_name: str, index_template: IndexTemplate
) -> None:
    """Create the index template or overwrite the existing one."""
    response = service.put(index_template_path(template_name), index_template)
    if is_error(response):
        raise ApiError(
            f"failed to create index template: {describe_response(response)}",
            response.status_code,
        )


def delete_index_template(service: OsClusterClient, template_name: str) -> None:
    """Delete the index template."""
    _delete(service, index_template_path(template_name))


def component_template_exists(service: OsClusterClient, template_name: str) -> bool:
    """Whether the component template exists."""
    return _exists(service, component_template_path(template_name))


def should_update_component_template(
    service: OsClusterClient, template_name: str, component_template: ComponentTemplate
) -> bool:
    """Whether the stored component template differs from ``component_template``."""
    response = service.get(component_template_path(template_name))
    if response.status_code == 404:
        return True
    if is_error(response):
        _raise_api_error(response)
    parsed = GetComponentTemplatesResponse.from_dict(response.json())
    if len(parsed.component_templates) != 1:
        raise ApiError(
            f"found {len(parsed.component_templates)} component templates which fits "
            f"the name '{template_name}'"
        )
    existing = parsed.component_templates[0]
    if existing.name != template_name:
        raise ApiError(
            f"returned component template named '{existing.name}' does not equal the "
            f"requested name '{template_name}'"
        )
    if existing.component_template == component_template:
        return False
    logger.debug("existing component template: %r", existing.component_template)
    logger.debug("new component template: %r", component_template)
    logger.info("component template requires update")
    return True


def create_or_update_component_template(
    service: OsClusterClient, template_name: str, component_template: ComponentTemplate
) -> None:
    """Create the component template or overwrite the existing one."""
    response = service.put(component_template_path(template_name), component_template)
    if is_error(response):
        raise ApiError(
            f"failed to create component template: {describe_response(response)}",
            response.status_code,
        )


def delete_component_template(service: OsClusterClient, template_name: str) -> None:
    """Delete the component template."""
    _delete(service, component_template_path(template_name))