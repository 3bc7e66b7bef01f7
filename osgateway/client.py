"""HTTP client for a single OpenSearch cluster."""

from __future__ import annotations

import json
from typing import Any, Iterable

import requests

from osgateway.errors import CatIndicesError, ClusterHealthError
from osgateway.responses import (
    CatIndicesResponse,
    CatNodesResponse,
    CatShardsResponse,
    ClusterHealthResponse,
    ClusterRerouteResponse,
    ClusterSettingsResponse,
    FlatClusterSettingsResponse,
    MainResponse,
    NodesStatsResponse,
)

HEADER_CONTENT_TYPE = "Content-Type"
JSON_CONTENT_HEADER = "application/json"

ADDITIONAL_SYSTEM_INDICES = (
    ".opendistro-alerting-config",
    ".opendistro-alerting-alert*",
    ".opendistro-anomaly-results*",
    ".opendistro-anomaly-detector*",
    ".opendistro-anomaly-checkpoints",
    ".opendistro-anomaly-detection-state",
    ".opendistro-reports-*",
    ".opendistro-notifications-*",
    ".opendistro-notebooks",
    ".opensearch-observability",
    ".opendistro-asynchronous-search-response*",
    ".replication-metadata-store",
)

_CLUSTER_HEALTH_TIMEOUT = "10000ms"


def generate_api_path(resource: str, name: str) -> str:
    """Path of a security plugin resource, e.g. ``/_plugins/_security/api/roles/x``."""
    return f"/_plugins/_security/api/{resource}/{name}"


def describe_response(response: requests.Response) -> str:
    """Status line and body of a response, for error messages."""
    return f"[{response.status_code} {response.reason}] {response.text}"


def is_error(response: requests.Response) -> bool:
    """Whether the status code signals an error."""
    return response.status_code > 299


def _encode(body: Any) -> str | bytes | None:
    if body is None or isinstance(body, (str, bytes)):
        return body
    to_dict = getattr(body, "to_dict", None)
    if callable(to_dict):
        return json.dumps(to_dict())
    return json.dumps(body)


class OsClusterClient:
    """Talks to one OpenSearch cluster over its REST API.

    On creation the cluster is pinged; if it answers, the root endpoint is
    read into :attr:`info`.
    """

    def __init__(
        self,
        cluster_url: str,
        username: str,
        password: str,
        session: requests.Session | None = None,
    ) -> None:
        self.cluster_url = cluster_url.rstrip("/")
        self._auth = (username, password)
        if session is None:
            session = requests.Session()
            session.verify = False
        self._session = session
        self.info = MainResponse()
        if self.ping():
            try:
                self.info = self.main_page()
            except (requests.RequestException, ValueError):
                pass

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: Any = None,
        json_body: bool = False,
    ) -> requests.Response:
        headers = {HEADER_CONTENT_TYPE: JSON_CONTENT_HEADER} if json_body else None
        return self._session.request(
            method,
            self.cluster_url + path,
            params=params,
            data=_encode(body),
            headers=headers,
            auth=self._auth,
        )

    def get(self, path: str) -> requests.Response:
        """Perform a GET request on ``path``."""
        return self._request("GET", path)

    def head(self, path: str) -> requests.Response:
        """Perform a HEAD request on ``path``."""
        return self._request("HEAD", path)

    def put(self, path: str, body: Any) -> requests.Response:
        """Perform a PUT request on ``path`` with a JSON body."""
        return self._request("PUT", path, body=body, json_body=True)

    def delete(self, path: str) -> requests.Response:
        """Perform a DELETE request on ``path``."""
        return self._request("DELETE", path)

    def ping(self) -> bool:
        """Whether the cluster answers its root endpoint with 200."""
        return self.head("/").status_code == 200

    def main_page(self) -> MainResponse:
        """Name, cluster and version information from the root endpoint."""
        return MainResponse.from_dict(self.get("/").json())

    def get_health(self) -> ClusterHealthResponse:
        """Cluster health with per-index detail."""
        response = self._request("GET", "/_cluster/health", params={"level": "indices"})
        return ClusterHealthResponse.from_dict(response.json())

    def cat_nodes(self) -> list[CatNodesResponse]:
        """Rows of ``_cat/nodes``."""
        response = self._request("GET", "/_cat/nodes", params={"format": "json"})
        return [CatNodesResponse.from_dict(row) for row in response.json() or []]

    def nodes_stats(self) -> NodesStatsResponse:
        """Statistics of all nodes."""
        return NodesStatsResponse.from_dict(self.get("/_nodes/stats").json())

    def cat_indices(self) -> list[CatIndicesResponse]:
        """Rows of ``_cat/indices``."""
        response = self._request("GET", "/_cat/indices", params={"format": "json"})
        return [CatIndicesResponse.from_dict(row) for row in response.json() or []]

    def _cat_shards(self, path: str, headers: Iterable[str] | None) -> list[CatShardsResponse]:
        params = {"format": "json"}
        columns = list(headers or [])
        if columns:
            params["h"] = ",".join(columns)
        response = self._request("GET", path, params=params)
        return [CatShardsResponse.from_dict(row) for row in response.json() or []]

    def cat_shards(self, headers: Iterable[str] | None = None) -> list[CatShardsResponse]:
        """Rows of ``_cat/shards``, limited to ``headers`` columns if given."""
        return self._cat_shards("/_cat/shards", headers)

    def cat_named_indices_shards(
        self, headers: Iterable[str] | None, indices: Iterable[str]
    ) -> list[CatShardsResponse]:
        """Rows of ``_cat/shards`` for the given indices."""
        names = ",".join(indices)
        path = f"/_cat/shards/{names}" if names else "/_cat/shards"
        return self._cat_shards(path, headers)

    def get_cluster_settings(self) -> ClusterSettingsResponse:
        """Nested persistent and transient cluster settings."""
        response = self._request("GET", "/_cluster/settings", params={"pretty": "true"})
        return ClusterSettingsResponse.from_dict(response.json())

    def get_flat_cluster_settings(self) -> FlatClusterSettingsResponse:
        """Cluster settings fetched with flat keys."""
        response = self._request("GET", "/_cluster/settings", params={"flat_settings": "true"})
        if is_error(response):
            raise ClusterHealthError(describe_response(response), response.status_code)
        return FlatClusterSettingsResponse.from_dict(response.json())

    def put_cluster_settings(self, settings: Any) -> ClusterSettingsResponse:
        """Update cluster settings and return what the cluster acknowledged."""
        response = self._request("PUT", "/_cluster/settings", body=settings, json_body=True)
        return ClusterSettingsResponse.from_dict(response.json())

    def reroute_shard(self, reroute_json: str) -> ClusterRerouteResponse:
        """Send reroute commands given as a JSON document."""
        response = self._request("POST", "/_cluster/reroute", body=reroute_json, json_body=True)
        return ClusterRerouteResponse.from_dict(response.json())

    def get_cluster_health(self) -> ClusterHealthResponse:
        """Cluster health, raising :class:`ClusterHealthError` on failure."""
        response = self._request(
            "GET", "/_cluster/health", params={"timeout": _CLUSTER_HEALTH_TIMEOUT}
        )
        if is_error(response):
            raise ClusterHealthError(describe_response(response), response.status_code)
        return ClusterHealthResponse.from_dict(response.json())

    def index_exists(self, index_name: str) -> bool:
        """Whether an index with this name exists."""
        response = self._request(
            "GET", f"/_cat/indices/{index_name}", params={"format": "json"}
        )
        if response.status_code == 404:
            return False
        if is_error(response):
            raise CatIndicesError(describe_response(response), response.status_code)
        return True

    def get_security_resource(self, resource: str, name: str) -> requests.Response:
        """Fetch a security plugin resource by name."""
        return self.get(generate_api_path(resource, name))

    def put_security_resource(self, resource: str, name: str, body: Any) -> requests.Response:
        """Create or update a security plugin resource."""
        return self.put(generate_api_path(resource, name), body)

    def delete_security_resource(self, resource: str, name: str) -> requests.Response:
        """Delete a security plugin resource."""
        return self.delete(generate_api_path(resource, name))

    def create_index(self, index_name: str, body: Any = None) -> int:
        """Create an index; returns the HTTP status code."""
        return self.put(f"/{index_name}", body).status_code

    def update_index_settings(self, index_name: str, body: Any) -> int:
        """Update the settings of an index; returns the HTTP status code."""
        return self.put(f"/{index_name}/_settings", body).status_code

    def delete_index(self, index_name: str) -> int:
        """Delete an index; returns the HTTP status code."""
        return self.delete(f"/{index_name}").status_code