import pytest

from osgateway.requests import (
    ActionGroup,
    ComponentTemplate,
    Index,
    IndexAlias,
    IndexPermissionSpec,
    IndexTemplate,
    ReRouteMoveAction,
    Role,
    RoleMapping,
    Tenant,
    TenantPermissionsSpec,
    User,
)


def test_action_group_always_has_allowed_actions():
    body = ActionGroup().to_dict()
    assert body == {"allowed_actions": []}


def test_action_group_round_trip():
    group = ActionGroup(allowed_actions=["indices:data/read*"], type="index", description="reads")
    body = group.to_dict()
    assert body["type"] == "index"
    assert ActionGroup.from_dict(body) == group


def test_reroute_move_action_keeps_all_keys():
    action = ReRouteMoveAction(index="logs", shard="0", from_node="n1", to_node="n2")
    body = action.to_dict()
    assert set(body) == {"index", "shard", "from_node", "to_node"}
    assert ReRouteMoveAction.from_dict(body) == action


def test_role_mapping_omits_empty_lists():
    mapping = RoleMapping(users=["alice"])
    assert mapping.to_dict() == {"users": ["alice"]}
    assert RoleMapping.from_dict(mapping.to_dict()) == mapping


def test_role_round_trip_with_nested_permissions():
    role = Role(
        cluster_permissions=["cluster_monitor"],
        index_permissions=[
            IndexPermissionSpec(
                index_patterns=["logs-*"],
                document_level_security='{"match_all": {}}',
                field_level_security=["~secret_field"],
                allowed_actions=["read"],
            )
        ],
        tenant_permissions=[TenantPermissionsSpec(tenant_patterns=["global"], allowed_actions=["kibana_all_read"])],
    )
    body = role.to_dict()
    assert body["index_permissions"][0]["dls"] == '{"match_all": {}}'
    assert body["index_permissions"][0]["fls"] == ["~secret_field"]
    assert Role.from_dict(body) == role


def test_empty_role_serialises_to_empty_object():
    assert Role().to_dict() == {}
    assert Role.from_dict({}) == Role()


def test_index_template_required_keys_present():
    body = IndexTemplate().to_dict()
    assert body == {"index_patterns": [], "template": {}}


def test_index_template_round_trip():
    template = IndexTemplate(
        index_patterns=["logs-*"],
        template=Index(
            settings={"number_of_shards": 1},
            mappings={"properties": {}},
            aliases={"current": IndexAlias(alias="current", is_write_index=True, filter={"term": {"a": 1}})},
        ),
        composed_of=["base"],
        priority=5,
        version=2,
        meta={"owner": "ops"},
    )
    body = template.to_dict()
    assert body["_meta"] == {"owner": "ops"}
    assert body["template"]["aliases"]["current"]["is_write_index"] is True
    assert IndexTemplate.from_dict(body) == template


def test_index_keeps_empty_settings_object():
    index = Index(settings={})
    assert index.to_dict() == {"settings": {}}


def test_component_template_round_trip():
    template = ComponentTemplate(template=Index(mappings={"properties": {}}), version=3, allow_auto_create=True)
    body = template.to_dict()
    assert "allow_auto_create" in body
    assert "_meta" not in body
    assert ComponentTemplate.from_dict(body) == template


def test_component_template_omits_false_auto_create():
    assert ComponentTemplate().to_dict() == {"template": {}}


def test_tenant_description_always_present():
    assert Tenant().to_dict() == {"description": ""}
    assert Tenant.from_dict({"description": "team"}) == Tenant(description="team")


def test_user_round_trip_and_omissions():
    password = "password"
    user = User(password=password, backend_roles=["admin"], attributes={"k8s-uid": "abc"})
    body = user.to_dict()
    assert "opendistro_security_roles" not in body
    assert body["attributes"] == {"k8s-uid": "abc"}
    assert User.from_dict(body) == user


@pytest.mark.parametrize("data", [None, {}])
def test_user_from_missing_data(data):
    assert User.from_dict(data) == User()