import json

import pytest
import responses

from osgateway import security_service as sec
from osgateway.client import OsClusterClient
from osgateway.errors import ApiError, GatewayError
from osgateway.requests import (
    ActionGroup,
    IndexPermissionSpec,
    Role,
    RoleMapping,
    Tenant,
    User,
)

BASE = "http://localhost:9200"
API = BASE + "/_plugins/_security/api"


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        mock.add(responses.HEAD, BASE + "/", status=503)
        yield mock


@pytest.fixture
def client(rsps):
    password = "password"
    return OsClusterClient(BASE, "user", password)


def _user(uid="uid-1", roles=("reader",)):
    return User(
        password="",
        opendistro_security_roles=list(roles),
        attributes={sec.K8S_ATTRIBUTE_FIELD: uid},
    )


# ---- users ----


def test_user_exists(client, rsps):
    rsps.add(responses.GET, API + "/internalusers/alice", json={"alice": {}}, status=200)
    rsps.add(responses.GET, API + "/internalusers/bob", status=404)
    assert sec.user_exists(client, "alice") is True
    assert sec.user_exists(client, "bob") is False


def test_user_exists_error(client, rsps):
    rsps.add(responses.GET, API + "/internalusers/alice", status=500)
    with pytest.raises(ApiError, match="response from API is 500") as info:
        sec.user_exists(client, "alice")
    assert info.value.status_code == 500


def test_should_update_user_missing(client, rsps):
    rsps.add(responses.GET, API + "/internalusers/alice", status=404)
    assert sec.should_update_user(client, "alice", _user()) is True


def test_should_update_user_equal_ignores_password(client, rsps):
    stored = _user()
    rsps.add(responses.GET, API + "/internalusers/alice", json={"alice": stored.to_dict()})
    password = "password"
    desired = _user()
    desired.password = password
    assert sec.should_update_user(client, "alice", desired) is False
    assert desired.password == password


def test_should_update_user_changed(client, rsps):
    rsps.add(responses.GET, API + "/internalusers/alice", json={"alice": _user().to_dict()})
    assert sec.should_update_user(client, "alice", _user(roles=("writer",))) is True


def test_should_update_user_not_managed(client, rsps):
    rsps.add(
        responses.GET,
        API + "/internalusers/alice",
        json={"alice": {"backend_roles": ["x"]}},
    )
    with pytest.raises(GatewayError, match="not currently managed"):
        sec.should_update_user(client, "alice", _user())


def test_should_update_user_uid_conflict(client, rsps):
    rsps.add(responses.GET, API + "/internalusers/alice", json={"alice": _user("a").to_dict()})
    with pytest.raises(GatewayError, match="uids don't match"):
        sec.should_update_user(client, "alice", _user("b"))


def test_user_uid_matches(client, rsps):
    rsps.add(responses.GET, API + "/internalusers/alice", json={"alice": _user("a").to_dict()})
    assert sec.user_uid_matches(client, "alice", "a") is True
    assert sec.user_uid_matches(client, "alice", "b") is False


def test_user_uid_matches_missing_attribute(client, rsps):
    rsps.add(responses.GET, API + "/internalusers/alice", json={"alice": {}})
    assert sec.user_uid_matches(client, "alice", "") is False


def test_user_uid_matches_not_found_raises(client, rsps):
    rsps.add(responses.GET, API + "/internalusers/alice", status=404)
    with pytest.raises(ApiError):
        sec.user_uid_matches(client, "alice", "a")


def test_create_or_update_user_sends_body(client, rsps):
    rsps.add(responses.PUT, API + "/internalusers/alice", json={"status": "OK"}, status=200)
    user = _user()
    sec.create_or_update_user(client, "alice", user)
    request = rsps.calls[-1].request
    assert json.loads(request.body) == user.to_dict()
    assert request.headers["Content-Type"] == "application/json"


def test_create_or_update_user_error(client, rsps):
    rsps.add(responses.PUT, API + "/internalusers/alice", body="bad", status=400)
    with pytest.raises(ApiError, match="failed to create user"):
        sec.create_or_update_user(client, "alice", _user())


def test_delete_user(client, rsps):
    rsps.add(responses.DELETE, API + "/internalusers/alice", status=200)
    assert sec.delete_user(client, "alice") is None
    request = rsps.calls[-1].request
    assert request.method == "DELETE"
    assert request.url == API + "/internalusers/alice"


def test_delete_user_error(client, rsps):
    rsps.add(responses.DELETE, API + "/internalusers/alice", status=404)
    with pytest.raises(ApiError, match="response from API is 404"):
        sec.delete_user(client, "alice")


# ---- roles ----


def _role():
    return Role(
        cluster_permissions=["cluster_monitor"],
        index_permissions=[IndexPermissionSpec(index_patterns=["logs-*"], allowed_actions=["read"])],
    )


def test_role_exists(client, rsps):
    rsps.add(responses.GET, API + "/roles/r1", json={"r1": {}})
    rsps.add(responses.GET, API + "/roles/r2", status=404)
    assert sec.role_exists(client, "r1") is True
    assert sec.role_exists(client, "r2") is False


def test_should_update_role(client, rsps):
    payload = _role().to_dict()
    payload["reserved"] = False
    rsps.add(responses.GET, API + "/roles/r1", json={"r1": payload})
    assert sec.should_update_role(client, "r1", _role()) is False
    assert sec.should_update_role(client, "r1", Role(cluster_permissions=["all"])) is True


def test_should_update_role_missing(client, rsps):
    rsps.add(responses.GET, API + "/roles/r1", status=404)
    assert sec.should_update_role(client, "r1", _role()) is True


def test_create_and_delete_role(client, rsps):
    rsps.add(responses.PUT, API + "/roles/r1", status=201)
    rsps.add(responses.DELETE, API + "/roles/r1", status=500)
    sec.create_or_update_role(client, "r1", _role())
    assert json.loads(rsps.calls[-1].request.body) == _role().to_dict()
    with pytest.raises(ApiError):
        sec.delete_role(client, "r1")


# ---- role mappings ----


def test_role_mapping_exists(client, rsps):
    rsps.add(responses.GET, API + "/rolesmapping/r1", status=404)
    assert sec.role_mapping_exists(client, "r1") is False


def test_fetch_existing_role_mapping(client, rsps):
    mapping = RoleMapping(backend_roles=["b"], users=["alice"])
    rsps.add(responses.GET, API + "/rolesmapping/r1", json={"r1": mapping.to_dict()})
    assert sec.fetch_existing_role_mapping(client, "r1") == mapping


def test_fetch_existing_role_mapping_absent_name(client, rsps):
    rsps.add(responses.GET, API + "/rolesmapping/r1", json={})
    assert sec.fetch_existing_role_mapping(client, "r1") == RoleMapping()


def test_fetch_existing_role_mapping_error(client, rsps):
    rsps.add(responses.GET, API + "/rolesmapping/r1", status=403)
    with pytest.raises(ApiError, match="403"):
        sec.fetch_existing_role_mapping(client, "r1")


def test_create_role_mapping_error(client, rsps):
    rsps.add(responses.PUT, API + "/rolesmapping/r1", status=400)
    with pytest.raises(ApiError, match="failed to create role mapping"):
        sec.create_or_update_role_mapping(client, "r1", RoleMapping(users=["alice"]))


def test_delete_role_mapping(client, rsps):
    rsps.add(responses.DELETE, API + "/rolesmapping/r1", status=200)
    assert sec.delete_role_mapping(client, "r1") is None
    request = rsps.calls[-1].request
    assert request.method == "DELETE"
    assert request.url == API + "/rolesmapping/r1"


# ---- action groups ----


def test_action_group_cycle(client, rsps):
    group = ActionGroup(allowed_actions=["indices:data/read/*"], type="index")
    rsps.add(responses.GET, API + "/actiongroups/g1", json={"g1": group.to_dict()})
    assert sec.action_group_exists(client, "g1") is True
    assert sec.should_update_action_group(client, "g1", group) is False
    assert sec.should_update_action_group(client, "g1", ActionGroup(allowed_actions=["x"])) is True


def test_action_group_create_error(client, rsps):
    rsps.add(responses.PUT, API + "/actiongroups/g1", status=400)
    with pytest.raises(ApiError, match="failed to create actiongroup"):
        sec.create_or_update_action_group(client, "g1", ActionGroup())


def test_action_group_delete_error(client, rsps):
    rsps.add(responses.DELETE, API + "/actiongroups/g1", status=500)
    with pytest.raises(ApiError):
        sec.delete_action_group(client, "g1")


# ---- tenants ----


def test_tenant_cycle(client, rsps):
    tenant = Tenant(description="team tenant")
    rsps.add(responses.GET, API + "/tenants/t1", json={"t1": tenant.to_dict()})
    rsps.add(responses.PUT, API + "/tenants/t1", status=200)
    assert sec.tenant_exists(client, "t1") is True
    assert sec.should_update_tenant(client, "t1", tenant) is False
    assert sec.should_update_tenant(client, "t1", Tenant(description="other")) is True
    sec.create_or_update_tenant(client, "t1", tenant)
    assert json.loads(rsps.calls[-1].request.body) == {"description": "team tenant"}


def test_tenant_missing_and_errors(client, rsps):
    rsps.add(responses.GET, API + "/tenants/t1", status=404)
    rsps.add(responses.PUT, API + "/tenants/t1", status=400)
    rsps.add(responses.DELETE, API + "/tenants/t1", status=404)
    assert sec.tenant_exists(client, "t1") is False
    assert sec.should_update_tenant(client, "t1", Tenant()) is True
    with pytest.raises(ApiError, match="failed to create tenant"):
        sec.create_or_update_tenant(client, "t1", Tenant())
    with pytest.raises(ApiError):
        sec.delete_tenant(client, "t1")