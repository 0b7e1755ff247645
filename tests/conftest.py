import json
import re
import uuid
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from oneview_client import OVClient, Settings

ENDPOINT = "https://oneview.test"
COLLECTIONS = (
    "/rest/scopes",
    "/rest/fc-networks",
    "/rest/ethernet-networks",
    "/rest/server-profiles",
    "/rest/server-hardware",
)
FILTER_RE = re.compile(r"^(\w+) matches '(.*)'$")


class FakeAppliance:
    """In-memory OneView appliance behind httpx.MockTransport.

    Mutations apply on submission and answer 202 with a task; each poll of
    a task advances it one step through ``task_script``.
    """

    def __init__(self) -> None:
        self.api_version = 800
        self.username = "admin"
        self.password = "secret"
        self.sessions: set[str] = set()
        self.resources: dict[str, dict[str, dict]] = {c: {} for c in COLLECTIONS}
        self.resource_scopes: dict[str, list[str]] = {}
        self.ssh_access = {"type": "ApplianceSshAccess", "uri": "/rest/appliance/ssh-access", "allowSshAccess": True}
        self.tasks: dict[str, dict] = {}
        self.task_steps: dict[str, list[str]] = {}
        self.task_script = ["Running", "Completed"]
        # per task name overrides of task_script, e.g. {"power": ["Error"]}
        self.task_scripts: dict[str, list[str]] = {}
        self.task_errors: list[dict] = []
        self.poll_failures = 0
        self.fail_next: dict[tuple[str, str], int] = {}
        self.async_mutations = True
        self.requests: list[httpx.Request] = []

    # helpers for tests
    def add(self, collection: str, **fields) -> dict:
        rid = uuid.uuid4().hex[:12]
        record = {"uri": f"{collection}/{rid}", "eTag": "1", **fields}
        self.resources[collection][record["uri"]] = record
        return record

    def find(self, collection: str, name: str) -> dict | None:
        for r in self.resources[collection].values():
            if r.get("name") == name:
                return r
        return None

    def expire_sessions(self) -> None:
        self.sessions.clear()

    def calls(self, method: str, path_prefix: str = "") -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path.startswith(path_prefix)]

    # transport
    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        method = request.method
        key = (method, path)
        if self.fail_next.get(key):
            self.fail_next[key] -= 1
            return self._error(500, "INTERNAL_ERROR", "injected failure")
        if path == "/rest/version" and method == "GET":
            return httpx.Response(200, json={"currentVersion": self.api_version, "minimumVersion": 120})
        if path == "/rest/login-sessions":
            return self._login(request)
        if request.headers.get("Auth") not in self.sessions:
            return self._error(401, "AUTHORIZATION", "Invalid or expired session")
        body = json.loads(request.content) if request.content else None

        if path.startswith("/rest/tasks/"):
            return self._poll_task(path)
        if path == "/rest/appliance/ssh-access":
            if method == "GET":
                return httpx.Response(200, json=self.ssh_access)
            self.ssh_access.update(body or {})
            return self._submit("set ssh access", self.ssh_access["uri"])
        if path.startswith("/rest/scopes/resources/"):
            resource_uri = path[len("/rest/scopes/resources"):]
            if method == "GET":
                return httpx.Response(
                    200,
                    json={
                        "type": "ScopedResource",
                        "uri": path,
                        "resourceUri": resource_uri,
                        "scopeUris": self.resource_scopes.get(resource_uri, []),
                    },
                )
            self.resource_scopes[resource_uri] = list((body or {}).get("scopeUris") or [])
            return self._submit("update resource scopes", resource_uri)
        if path.endswith("/powerState") and method == "PUT":
            hw_uri = path[: -len("/powerState")]
            hw = self.resources["/rest/server-hardware"].get(hw_uri)
            if hw is None:
                return self._error(404, "RESOURCE_NOT_FOUND", f"{hw_uri} not found")
            hw["powerState"] = body["powerState"]
            return self._submit("power", hw_uri)

        for collection in COLLECTIONS:
            if path == collection:
                if method == "GET":
                    return self._list(collection, request)
                if method == "POST":
                    record = self.add(collection, **(body or {}))
                    return self._submit(f"create {record.get('name')}", record["uri"], created=record)
            if path.startswith(collection + "/"):
                record = self.resources[collection].get(path)
                if record is None:
                    return self._error(404, "RESOURCE_NOT_FOUND", f"{path} not found")
                if method == "GET":
                    return httpx.Response(200, json=record)
                if method == "PUT":
                    record.clear()
                    record.update(body or {})
                    record["uri"] = path
                    return self._submit("update", path, created=record)
                if method == "DELETE":
                    del self.resources[collection][path]
                    return self._submit("delete", path)
        return self._error(404, "RESOURCE_NOT_FOUND", f"{path} not found")

    def _error(self, status: int, code: str, message: str) -> httpx.Response:
        return httpx.Response(status, json={"errorCode": code, "message": message, "recommendedActions": []})

    def _login(self, request: httpx.Request) -> httpx.Response:
        if request.method == "DELETE":
            self.sessions.discard(request.headers.get("Auth"))
            return httpx.Response(204)
        body = json.loads(request.content)
        if body.get("userName") != self.username or body.get("password") != self.password:
            return self._error(401, "AUTHN_AUTH_FAIL", "Invalid user name or password")
        sid = uuid.uuid4().hex
        self.sessions.add(sid)
        return httpx.Response(200, json={"sessionID": sid, "partnerData": {}})

    def _list(self, collection: str, request: httpx.Request) -> httpx.Response:
        q = parse_qs(urlsplit(str(request.url)).query)
        members = list(self.resources[collection].values())
        if "filter" in q:
            m = FILTER_RE.match(q["filter"][0])
            if m:
                field, value = m.groups()
                members = [r for r in members if r.get(field) == value]
        if "sort" in q:
            field, _, order = q["sort"][0].partition(":")
            members.sort(key=lambda r: str(r.get(field, "")), reverse=order == "desc")
        return httpx.Response(
            200,
            json={
                "type": "ResourceCollection",
                "uri": collection,
                "start": 0,
                "count": len(members),
                "total": len(members),
                "members": members,
                "nextPageUri": None,
                "prevPageUri": None,
            },
        )

    def _submit(self, name: str, resource_uri: str, created: dict | None = None) -> httpx.Response:
        if not self.async_mutations:
            return httpx.Response(200, json=created) if created else httpx.Response(204)
        task_uri = f"/rest/tasks/{uuid.uuid4().hex[:8]}"
        task = {
            "category": "tasks",
            "type": "TaskResourceV2",
            "uri": task_uri,
            "name": name,
            "taskState": "New",
            "percentComplete": 0,
            "taskErrors": [],
            "associatedResource": {"resourceUri": resource_uri},
        }
        self.tasks[task_uri] = task
        self.task_steps[task_uri] = list(self.task_scripts.get(name, self.task_script))
        return httpx.Response(202, json=task, headers={"Location": f"{ENDPOINT}{task_uri}"})

    def _poll_task(self, path: str) -> httpx.Response:
        task = self.tasks.get(path)
        if task is None:
            return self._error(404, "RESOURCE_NOT_FOUND", f"{path} not found")
        if self.poll_failures:
            self.poll_failures -= 1
            return self._error(503, "SERVICE_UNAVAILABLE", "try again")
        steps = self.task_steps[path]
        if steps:
            task["taskState"] = steps.pop(0)
        if task["taskState"] in ("Completed", "Warning"):
            task["percentComplete"] = 100
        elif task["taskState"] in ("Error", "Terminated", "Killed"):
            task["taskErrors"] = list(self.task_errors)
        else:
            task["percentComplete"] = 50
        return httpx.Response(200, json=task)


@pytest.fixture
def appliance() -> FakeAppliance:
    return FakeAppliance()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        username="admin",
        password="secret",
        domain="LOCAL",
        endpoint=ENDPOINT,
        api_version=0,
        task_poll_interval=0,
        task_timeout=5,
        task_max_poll_errors=2,
    )


@pytest.fixture
def client(appliance: FakeAppliance, settings: Settings):
    c = OVClient(settings, transport=httpx.MockTransport(appliance.handle))
    yield c
    c.close()
