import pytest

from osgateway.errors import (
    ApiError,
    CatIndicesError,
    ClusterHealthError,
    ClusterSettingsError,
    GatewayError,
)


def test_api_error_keeps_status():
    err = ApiError("response from API is 500", status_code=500)
    assert isinstance(err, GatewayError)
    assert err.status_code == 500
    assert str(err) == "response from API is 500"


def test_cluster_health_error_message():
    err = ClusterHealthError("boom")
    assert isinstance(err, ApiError)
    message = str(err)
    assert "cluster health failed" in message
    assert message.startswith("get error")
    assert message.endswith("boom")
    assert err.response == "boom"


def test_cluster_settings_error_message():
    err = ClusterSettingsError("bad", status_code=400)
    assert "cluster settings failed" in str(err)
    assert str(err).endswith("bad")
    assert err.status_code == 400


def test_cat_indices_error_message():
    err = CatIndicesError("oops")
    assert str(err).startswith("cat indices failed")
    assert str(err).endswith("oops")
    assert err.status_code is None


@pytest.mark.parametrize("cls", [ClusterHealthError, ClusterSettingsError, CatIndicesError])
def test_specific_errors_are_gateway_errors(cls):
    err = cls("x")
    assert isinstance(err, GatewayError)
    assert str(err).endswith("x")
    assert err.response == "x"