"""Manage users, roles, role mappings, action groups and tenants of the security plugin."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Mapping, TypeVar

import requests

from osgateway.client import OsClusterClient, describe_response, is_error
from osgateway.errors import ApiError, GatewayError
from osgateway.requests import ActionGroup, Role, RoleMapping, Tenant, User
from osgateway.responses import (
    parse_action_groups,
    parse_role_mappings,
    parse_roles,
    parse_tenants,
    parse_users,
)

logger = logging.getLogger(__name__)

K8S_ATTRIBUTE_FIELD = "k8s-uid"

ROLES = "roles"
INTERNALUSERS = "internalusers"
ROLESMAPPING = "rolesmapping"
ACTIONGROUPS = "actiongroups"
TENANTS = "tenants"

T = TypeVar("T")


def _raise_api_error(response: requests.Response) -> None:
    raise ApiError(
        f"response from API is {response.status_code} {response.reason}",
        response.status_code,
    )


def _exists(service: OsClusterClient, resource: str, name: str) -> bool:
    response = service.get_security_resource(resource, name)
    if response.status_code == 404:
        return False
    if is_error(response):
        _raise_api_error(response)
    return True


def _fetch_existing(
    service: OsClusterClient,
    resource: str,
    name: str,
    parser: Callable[[Any], Mapping[str, T]],
) -> Mapping[str, T] | None:
    """The parsed resource map, or None when the resource does not exist."""
    response = service.get_security_resource(resource, name)
    if response.status_code == 404:
        return None
    if is_error(response):
        _raise_api_error(response)
    return parser(response.json())


def _should_update(
    service: OsClusterClient,
    resource: str,
    name: str,
    desired: T,
    parser: Callable[[Any], Mapping[str, T]],
    default: Callable[[], T],
    kind: str,
) -> bool:
    existing_map = _fetch_existing(service, resource, name, parser)
    if existing_map is None:
        return True
    existing = existing_map.get(name) or default()
    if existing == desired:
        return False
    logger.debug("existing %s: %r", kind, existing)
    logger.debug("new %s: %r", kind, desired)
    logger.info("%s requires update", kind)
    return True


def _create_or_update(
    service: OsClusterClient, resource: str, name: str, body: Any, kind: str
) -> None:
    response = service.put_security_resource(resource, name, body)
    if is_error(response):
        raise ApiError(
            f"failed to create {kind}: {describe_response(response)}", response.status_code
        )


def _delete(service: OsClusterClient, resource: str, name: str) -> None:
    response = service.delete_security_resource(resource, name)
    if is_error(response):
        _raise_api_error(response)


def should_update_user(service: OsClusterClient, username: str, user: User) -> bool:
    """Whether the stored user differs from ``user``; passwords are not compared.

    Raises :class:`GatewayError` when the stored user is not managed by the
    operator or belongs to another resource.
    """
    existing_map = _fetch_existing(service, INTERNALUSERS, username, parse_users)
    if existing_map is None:
        return True
    desired = dataclasses.replace(user, password="")
    existing = existing_map.get(username) or User()
    if K8S_ATTRIBUTE_FIELD not in existing.attributes:
        raise GatewayError("user resource not currently managed by kubernetes")
    if existing.attributes[K8S_ATTRIBUTE_FIELD] != desired.attributes.get(K8S_ATTRIBUTE_FIELD, ""):
        raise GatewayError("kubernetes resource conflict; uids don't match")
    if existing == desired:
        return False
    logger.info("user requires update")
    return True


def user_exists(service: OsClusterClient, username: str) -> bool:
    """Whether the internal user exists."""
    return _exists(service, INTERNALUSERS, username)


def user_uid_matches(service: OsClusterClient, username: str, uid: str) -> bool:
    """Whether the stored user carries the given operator resource uid."""
    response = service.get_security_resource(INTERNALUSERS, username)
    if is_error(response):
        _raise_api_error(response)
    existing = parse_users(response.json()).get(username) or User()
    return (
        K8S_ATTRIBUTE_FIELD in existing.attributes
        and existing.attributes[K8S_ATTRIBUTE_FIELD] == uid
    )


def create_or_update_user(service: OsClusterClient, username: str, user: User) -> None:
    """Create the internal user or overwrite it."""
    _create_or_update(service, INTERNALUSERS, username, user, "user")


def delete_user(service: OsClusterClient, username: str) -> None:
    """Delete the internal user."""
    _delete(service, INTERNALUSERS, username)


def role_exists(service: OsClusterClient, role_name: str) -> bool:
    """Whether the role exists."""
    return _exists(service, ROLES, role_name)


def should_update_role(service: OsClusterClient, role_name: str, role: Role) -> bool:
    """Whether the stored role differs from ``role``."""
    return _should_update(service, ROLES, role_name, role, parse_roles, Role, "role")


def create_or_update_role(service: OsClusterClient, role_name: str, role: Role) -> None:
    """Create the role or overwrite it."""
    _create_or_update(service, ROLES, role_name, role, "role")


def delete_role(service: OsClusterClient, role_name: str) -> None:
    """Delete the role."""
    _delete(service, ROLES, role_name)


def role_mapping_exists(service: OsClusterClient, role_name: str) -> bool:
    """Whether a mapping exists for the role."""
    return _exists(service, ROLESMAPPING, role_name)


def fetch_existing_role_mapping(service: OsClusterClient, role_name: str) -> RoleMapping:
    """The stored mapping of the role; an empty mapping if the answer lacks it."""
    response = service.get_security_resource(ROLESMAPPING, role_name)
    if is_error(response):
        _raise_api_error(response)
    return parse_role_mappings(response.json()).get(role_name) or RoleMapping()


def create_or_update_role_mapping(
    service: OsClusterClient, role_name: str, mapping: RoleMapping
) -> None:
    """Create the role mapping or overwrite it."""
    _create_or_update(service, ROLESMAPPING, role_name, mapping, "role mapping")


def delete_role_mapping(service: OsClusterClient, role_name: str) -> None:
    """Delete the role mapping."""
    _delete(service, ROLESMAPPING, role_name)


def action_group_exists(service: OsClusterClient, action_group_name: str) -> bool:
    """Whether the action group exists."""
    return _exists(service, ACTIONGROUPS, action_group_name)


def should_update_action_group(
    service: OsClusterClient, action_group_name: str, action_group: ActionGroup
) -> bool:
    """Whether the stored action group differs from ``action_group``."""
    return _should_update(
        service,
        ACTIONGROUPS,
        action_group_name,
        action_group,
        parse_action_groups,
        ActionGroup,
        "actiongroup",
    )


def create_or_update_action_group(
    service: OsClusterClient, action_group_name: str, action_group: ActionGroup
) -> None:
    """Create the action group or overwrite it."""
    _create_or_update(service, ACTIONGROUPS, action_group_name, action_group, "actiongroup")


def delete_action_group(service: OsClusterClient, action_group_name: str) -> None:
    """Delete the action group."""
    _delete(service, ACTIONGROUPS, action_group_name)


def tenant_exists(service: OsClusterClient, tenant_name: str) -> bool:
    """Whether the tenant exists."""
    return _exists(service, TENANTS, tenant_name)


def should_update_tenant(service: OsClusterClient, tenant_name: str, tenant: Tenant) -> bool:
    """Whether the stored tenant differs from ``tenant``."""
    return _should_update(
        service, TENANTS, tenant_name, tenant, parse_tenants, Tenant, "tenant"
    )


def create_or_update_tenant(service: OsClusterClient, tenant_name: str, tenant: Tenant) -> None:
    """Create the tenant or overwrite it."""
    _create_or_update(service, TENANTS, tenant_name, tenant, "tenant")


def delete_tenant(service: OsClusterClient, tenant_name: str) -> None:
    """Delete the tenant."""
    _delete(service, TENANTS, tenant_name)