from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from ..connection import OVConnection
from ..models import OVModel, ResourceList
from .tasks import Task, TaskService

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=OVModel)


def list_query(filter: str = "", sort: str = "", start: int | str = "", count: int | str = "", query: str = "") -> dict[str, Any]:
    """Collection query string; empty arguments are left out."""
    q: dict[str, Any] = {}
    if filter:
        q["filter"] = filter
    if query:
        q["query"] = query
    if sort:
        q["sort"] = sort
    if start != "" and start is not None:
        q["start"] = str(start)
    if count != "" and count is not None:
        q["count"] = str(count)
    return q


class ResourceService(Generic[M]):
    """CRUD over one ``/rest/<collection>`` of the appliance."""

    uri: str = ""
    model: type[M]
    kind: str = "resource"

    def __init__(self, connection: OVConnection, tasks: TaskService) -> None:
        self.connection = connection
        self.tasks = tasks

    def list(self, filter: str = "", sort: str = "", start: int | str = "", count: int | str = "", query: str = "") -> ResourceList[M]:
        data = self.connection.get(self.uri, params=list_query(filter, sort, start, count, query))
        logger.debug(f"GET {self.uri} -> {data}")
        return ResourceList[self.model].model_validate(data or {})

    def iter_all(self, filter: str = "", sort: str = "") -> Iterator[M]:
        """Every member, following nextPageUri."""
        page = self.list(filter=filter, sort=sort)
        while True:
            yield from page.members
            if not page.next_page_uri:
                return
            page = ResourceList[self.model].model_validate(self.connection.get(page.next_page_uri) or {})

    def get_by_uri(self, uri: str) -> M:
        return self.model.model_validate(self.connection.get(uri) or {})

    def get_by_name(self, name: str) -> M | None:
        page = self.list(filter=f"name matches '{name}'", sort="name:asc")
        if page.members:
            return page.members[0]
        return None

    def create(self, resource: M) -> Task:
        name = getattr(resource, "name", "")
        logger.info(f"Creating {self.kind} {name}")
        r = self.connection.post(self.uri, resource)
        return self.tasks.from_response(r, f"create {self.kind} {name}")

    def update(self, resource: M) -> Task:
        uri = getattr(resource, "uri", None)
        if not uri:
            raise ValueError(f"{self.kind} {getattr(resource, 'name', '')!r} has no uri; fetch it before updating")
        r = self.connection.put(uri, resource)
        return self.tasks.from_response(r, f"update {self.kind} {getattr(resource, 'name', '')}")

    def delete_uri(self, uri: str, name: str = "") -> Task:
        r = self.connection.delete(uri)
        return self.tasks.from_response(r, f"delete {self.kind} {name}")

    def delete(self, name: str) -> Task:
        """Delete by name; a missing resource is a logged no-op."""
        resource = self.get_by_name(name)
        uri = getattr(resource, "uri", None) if resource is not None else None
        if not uri:
            logger.info(f"{self.kind.capitalize()} could not be found to delete, {name}, skipping delete ...")
            return self.tasks.completed(f"delete {self.kind} {name}")
        logger.info(f"Deleting {self.kind} {name} ({uri})")
        return self.delete_uri(uri, name)
