# osgateway

A Python library for operating an OpenSearch cluster over its REST API:
reading health, settings and node statistics, draining nodes before a
restart, managing index and component templates, and keeping security-plugin
resources (internal users, roles, role mappings, action groups, tenants) in
step with a desired state.

## Installation

```
pip install osgateway
```

To run the test suite:

```
pip install "osgateway[test]"
pytest
```

## Modules

- `osgateway.client` – `OsClusterClient`, the HTTP client for one cluster.
- `osgateway.requests` – dataclasses for request bodies (`User`, `Role`,
  `RoleMapping`, `ActionGroup`, `Tenant`, `IndexTemplate`,
  `ComponentTemplate`, `Index`, `IndexAlias`, `ReRouteMoveAction`, ...), each
  with `to_dict()` and `from_dict()`.
- `osgateway.responses` – dataclasses for API responses (`ClusterHealthResponse`,
  `CatNodesResponse`, `CatShardsResponse`, `NodesStatsResponse`,
  `ClusterSettingsResponse`, `MainResponse`, ...), built with `from_dict()`.
- `osgateway.data_service` – shard allocation, node draining and templates.
- `osgateway.security_service` – security-plugin resources.
- `osgateway.helpers` – version, role, environment and command helpers.
- `osgateway.errors` – the exceptions raised by the package.

## Connecting

```python
from osgateway.client import OsClusterClient

password = "password"
client = OsClusterClient("https://localhost:9200", "admin", password=password)

print(client.info.version.number)
for node in client.cat_nodes():
    print(node.name, node.ip, node.node_role)
```

On creation the client sends `HEAD /`; if the cluster answers with 200, the
root endpoint is read into `client.info` (a `MainResponse`). `main_page()`
fetches it again on demand.

`OsClusterClient` accepts an optional `session` (a `requests.Session`) for
custom TLS settings, proxies or adapters. Without one, a new session is made
with certificate verification turned off, as clusters commonly use
self-signed certificates.

Besides the typed calls (`get_health`, `get_cluster_health`, `cat_nodes`,
`cat_indices`, `cat_shards`, `cat_named_indices_shards`, `nodes_stats`,
`get_cluster_settings`, `get_flat_cluster_settings`, `put_cluster_settings`,
`reroute_shard`, `index_exists`), the client offers raw `get`, `head`, `put`
and `delete` on a path, and `create_index`, `update_index_settings` and
`delete_index`, which return the HTTP status code.

## Errors

Failed API calls raise exceptions from `osgateway.errors`, all derived from
`GatewayError`. `ApiError` carries the HTTP `status_code`;
`ClusterHealthError`, `ClusterSettingsError` and `CatIndicesError` derive from
it. Network failures surface as the `requests` exceptions.

## Cluster operations

```python
from osgateway import data_service

ready, reason = data_service.check_cluster_status_for_restart(client, drain_nodes=False)

# Exclude a node from shard allocation and check whether it is empty yet
done = data_service.prepare_pod_for_delete(client, "my-cluster-masters-0", True, 3)

data_service.reactivate_shard_allocation(client)
data_service.remove_exclude_node_host(client, "my-cluster-masters-0")
```

`check_cluster_status_for_restart` returns `(True, "")` when the cluster is
green, or yellow only because of the `.opensearch-observability` index;
otherwise it returns `False` with a reason, and turns shard allocation back to
`all` if it was not. `set_cluster_shard_allocation` takes a
`ClusterSettingsAllocation` (`ALL`, `PRIMARIES`, `NONE`).

## Templates

```python
from osgateway import data_service
from osgateway.requests import IndexTemplate, Index

template = IndexTemplate(index_patterns=["logs-*"], template=Index(), priority=10)
if data_service.should_update_index_template(client, "logs", template):
    data_service.create_or_update_index_template(client, "logs", template)
```

Component templates work the same way with `ComponentTemplate` and the
`*_component_template` functions; `index_template_exists`,
`component_template_exists` and the `delete_*` functions complete the set.

## Security resources

```python
from osgateway import security_service
from osgateway.requests import Role, IndexPermissionSpec

role = Role(
    cluster_permissions=["cluster_monitor"],
    index_permissions=[IndexPermissionSpec(index_patterns=["logs-*"], allowed_actions=["read"])],
)
if security_service.should_update_role(client, "log-reader", role):
    security_service.create_or_update_role(client, "log-reader", role)
```

Every resource kind has `*_exists`, `should_update_*`, `create_or_update_*`
and `delete_*` functions. `should_update_user` ignores passwords and raises
`GatewayError` unless the stored user carries a `k8s-uid` attribute equal to
that of the desired user; `user_uid_matches` checks that attribute directly.

## Helpers

`osgateway.helpers` holds plain-value utilities: `map_cluster_role(s)` and
`resolve_cluster_manager_role`, which choose between `master` and
`cluster_manager` for 1.x and 2.x versions; `compare_versions`;
`version_check`, which gives the HTTP port and security-config path for a
version; `build_main_command` and `build_main_command_osd`, which build the
container command that installs plugins before the entrypoint; list helpers
such as `diff_slice` and `remove_duplicate_strings`; `find_by_path` for nested
settings; and `ComponentStatus` with functions to find, replace and remove
entries. `skip_init_container`, `cluster_dns_base` and
`parallel_recovery_mode` read `SKIP_INIT_CONTAINER`, `DNS_BASE` and
`PARALLEL_RECOVERY_ENABLED` from the environment.

## What this package does not do

It is a library only: there is no command-line tool and no long-running
service. It does not watch or reconcile Kubernetes objects, build
StatefulSets or pods, or read credentials from secrets; the helpers work on
plain strings, lists and dataclasses that the caller supplies.