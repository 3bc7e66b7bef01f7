"""Environment switches, role and version helpers, and command builders."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Sequence

from packaging.version import InvalidVersion, Version

DASHBOARD_CONFIG_NAME = "opensearch_dashboards.yml"
DASHBOARD_CHECKSUM_NAME = "checksum/dashboards.yml"
CLUSTER_LABEL = "opster.io/opensearch-cluster"
NODE_POOL_LABEL = "opster.io/opensearch-nodepool"
OS_USER_NAME_ANNOTATION = "opensearchuser/name"
OS_USER_NAMESPACE_ANNOTATION = "opensearchuser/namespace"
DNS_BASE_ENV_VARIABLE = "DNS_BASE"
PARALLEL_RECOVERY_ENABLED = "PARALLEL_RECOVERY_ENABLED"
SKIP_INIT_CONTAINER_ENV_VARIABLE = "SKIP_INIT_CONTAINER"

DEFAULT_DNS_BASE = "cluster.local"
UPGRADER_COMPONENT = "Upgrader"

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_CLUSTER_MANAGER_VERSION = Version("2.0.0")


def _parse_bool(text: str) -> bool:
    """Parse a boolean the way the operator's environment switches expect."""
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def _parse_version(text: str) -> Version | None:
    try:
        return Version(text)
    except (InvalidVersion, TypeError):
        return None


def skip_init_container() -> bool:
    """Whether init containers should be left out (``SKIP_INIT_CONTAINER``)."""
    env = os.environ.get(SKIP_INIT_CONTAINER_ENV_VARIABLE, "")
    if not env:
        return False
    try:
        return _parse_bool(env)
    except ValueError:
        return False


def cluster_dns_base() -> str:
    """The cluster DNS suffix, from ``DNS_BASE`` or ``cluster.local``."""
    return os.environ.get(DNS_BASE_ENV_VARIABLE, "") or DEFAULT_DNS_BASE


def parallel_recovery_mode() -> bool:
    """Whether parallel recovery is enabled; defaults to true."""
    env = os.environ.get(PARALLEL_RECOVERY_ENABLED, "") or "true"
    try:
        return _parse_bool(env)
    except ValueError:
        return True


def find_by_path(obj: Any, keys: Sequence[str]) -> tuple[Any, bool]:
    """Look up a value in nested mappings.

    Returns ``(value, found)``. Intermediate keys that are missing are skipped;
    an intermediate value that is not a mapping ends the search.
    """
    if not keys:
        raise ValueError("keys must not be empty")
    if not isinstance(obj, Mapping):
        return None, False
    current: Mapping[str, Any] = obj
    for key in keys[:-1]:
        if key in current:
            sub = current[key]
            if not isinstance(sub, Mapping):
                return None, False
            current = sub
    last = keys[-1]
    if last in current:
        return current[last], True
    return None, False


@dataclass
class ComponentStatus:
    """Status of one operator component as kept in the cluster status."""

    component: str = ""
    status: str = ""
    description: str = ""


Predicate = Callable[[ComponentStatus, ComponentStatus], "tuple[ComponentStatus, bool]"]


def component_status_equal(left: ComponentStatus, right: ComponentStatus) -> bool:
    """Compare component, description and status."""
    return (
        left.component == right.component
        and left.description == right.description
        and left.status == right.status
    )


def remove_it(status: ComponentStatus, statuses: Sequence[ComponentStatus]) -> list[ComponentStatus]:
    """Return ``statuses`` without the first entry equal to ``status``."""
    result = list(statuses)
    for position, candidate in enumerate(result):
        if component_status_equal(candidate, status):
            del result[position]
            break
    return result


def replace(
    remove: ComponentStatus, add: ComponentStatus, statuses: Sequence[ComponentStatus]
) -> list[ComponentStatus]:
    """Remove ``remove`` from ``statuses`` and append ``add``."""
    return [*remove_it(remove, statuses), add]


def find_first_partial(
    statuses: Iterable[ComponentStatus], item: ComponentStatus, predicate: Predicate
) -> tuple[ComponentStatus, bool]:
    """Return the first match chosen by ``predicate``, or ``(item, False)``."""
    for candidate in statuses:
        found_item, found = predicate(candidate, item)
        if found:
            return found_item, True
    return item, False


def get_by_description_and_group(
    left: ComponentStatus, right: ComponentStatus
) -> tuple[ComponentStatus, bool]:
    """Match on description and component."""
    if left.description == right.description and left.component == right.component:
        return left, True
    return right, False


def get_by_component(left: ComponentStatus, right: ComponentStatus) -> tuple[ComponentStatus, bool]:
    """Match on component only."""
    if left.component == right.component:
        return left, True
    return right, False


def upgrade_in_progress(statuses: Iterable[ComponentStatus]) -> bool:
    """Whether an upgrader status entry is present."""
    _, found = find_first_partial(
        statuses, ComponentStatus(component=UPGRADER_COMPONENT), get_by_component
    )
    return found


def merge_configs(
    left: dict[str, str] | None, right: Mapping[str, str] | None
) -> dict[str, str] | Mapping[str, str] | None:
    """Merge ``right`` into ``left`` (in place); ``right`` when ``left`` is None."""
    if left is None:
        return right
    left.update(right or {})
    return left


def sorted_keys(mapping: Mapping[str, Any]) -> list[str]:
    """Keys of ``mapping`` in sorted order."""
    return sorted(mapping)


def _is_2x(version: Version) -> bool:
    return version >= _CLUSTER_MANAGER_VERSION


def resolve_cluster_manager_role(version: str) -> str:
    """``cluster_manager`` for 2.0.0 and later, else ``master``."""
    parsed = _parse_version(version)
    if parsed is not None and _is_2x(parsed):
        return "cluster_manager"
    return "master"


def map_cluster_role(role: str, version: str) -> str:
    """Translate between ``master`` and ``cluster_manager`` for the version."""
    parsed = _parse_version(version)
    if parsed is None:
        return role
    is_2x = _is_2x(parsed)
    if role == "master" and is_2x:
        return "cluster_manager"
    if role == "cluster_manager" and not is_2x:
        return "master"
    return role


def map_cluster_roles(roles: Iterable[str], version: str) -> list[str]:
    """Apply :func:`map_cluster_role` to every role."""
    return [map_cluster_role(role, version) for role in roles]


def diff_slice(left: Iterable[str], right: Iterable[str]) -> list[str]:
    """Items of ``left`` that are not in ``right``, in order."""
    excluded = set(right)
    return [item for item in left if item not in excluded]


def remove_duplicate_strings(items: Iterable[str]) -> list[str]:
    """Drop repeated items, keeping first occurrences in order."""
    return list(dict.fromkeys(items))


def compare_versions(v1: str, v2: str) -> bool:
    """Whether ``v1`` is lower than ``v2``; False if either is unparsable."""
    first = _parse_version(v1)
    second = _parse_version(v2)
    return first is not None and second is not None and first < second


def has_data_role(roles: Iterable[str]) -> bool:
    """Whether the roles include ``data``."""
    return "data" in set(roles)


def has_manager_role(roles: Iterable[str]) -> bool:
    """Whether the roles include ``master`` or ``cluster_manager``."""
    role_set = set(roles)
    return "master" in role_set or "cluster_manager" in role_set


def version_check(version: str, http_port: int = 0) -> tuple[int, str]:
    """HTTP port and security config path for the given OpenSearch version."""
    parsed = _parse_version(version)
    if parsed is not None and not parsed.is_prerelease and parsed >= Version("2.0"):
        port = http_port if http_port > 0 else 9200
        return port, "/usr/share/opensearch/config/opensearch-security"
    return 9300, "/usr/share/opensearch/plugins/opensearch-security/securityconfig"


def _quote_plugin(plugin: str) -> str:
    return "'" + plugin.replace("'", "\\'") + "'"


def build_main_command(
    installer_binary: str, plugins: Sequence[str], batch_mode: bool, entrypoint: str
) -> list[str]:
    """Container command that installs plugins, then runs the entrypoint."""
    if not plugins:
        return ["/bin/bash", "-c", entrypoint]
    command = installer_binary + " install"
    if batch_mode:
        command += " --batch"
    command += "".join(" " + _quote_plugin(plugin) for plugin in plugins)
    command += " && " + entrypoint
    return ["/bin/bash", "-c", command]


def build_main_command_osd(
    installer_binary: str, plugins: Sequence[str], entrypoint: str
) -> list[str]:
    """Dashboards container command: one install per plugin, then the entrypoint."""
    installs = "".join(
        f"{installer_binary} install {_quote_plugin(plugin)} && " for plugin in plugins
    )
    return ["/bin/bash", "-c", installs + entrypoint]