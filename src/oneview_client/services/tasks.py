from __future__ import annotations

import logging
import time
from typing import Any
from urllib.parse import urlsplit

import httpx

from ..config import Settings
from ..connection import OVConnection, response_json
from ..errors import OneViewError, TaskFailedError, TaskTimeoutError
from ..metrics import TASK_POLL_ERRORS, TASK_WAIT

logger = logging.getLogger(__name__)

TaskState = str  # "New" | "Pending" | "Starting" | "Running" | "Suspended" | "Completed" | "Warning" | "Error" | ...

SUCCESS_STATES = {"Completed", "Warning"}
FAILURE_STATES = {"Error", "Terminated", "Killed", "Interrupted"}
TERMINAL_STATES = SUCCESS_STATES | FAILURE_STATES

TASKS_URI = "/rest/tasks"


def _task_messages(data: dict[str, Any]) -> list[str]:
    out: list[str] = []
    for err in data.get("taskErrors") or []:
        if isinstance(err, dict):
            msg = err.get("message") or err.get("details") or err.get("errorCode")
            if msg:
                out.append(str(msg))
        elif err:
            out.append(str(err))
    return out


def _is_task_body(data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    uri = str(data.get("uri") or "")
    return data.get("category") == "tasks" or uri.startswith(f"{TASKS_URI}/")


class Task:
    """Handle on an asynchronous appliance operation.

    ``wait()`` polls until the task reaches a terminal state. Once terminal
    the handle is done and further waits return (or raise) the same
    outcome without touching the appliance.
    """

    def __init__(self, service: TaskService, uri: str | None, name: str = "") -> None:
        self.service = service
        self.uri = uri
        self.name = name
        self.state: TaskState = "New"
        self.percent_complete = 0
        self.status: str | None = None
        self.messages: list[str] = []
        self.associated_resource_uri: str | None = None
        # body of a synchronous response, when there was no real task
        self.resource: Any = None
        self.done = False
        self._error: OneViewError | None = None

    def __repr__(self) -> str:
        return f"Task(uri={self.uri!r}, name={self.name!r}, state={self.state!r}, percent={self.percent_complete}, done={self.done})"

    @property
    def succeeded(self) -> bool:
        return self.done and self._error is None

    def apply(self, data: dict[str, Any]) -> None:
        self.uri = data.get("uri") or self.uri
        self.name = data.get("name") or self.name
        self.state = data.get("taskState") or self.state
        self.percent_complete = int(data.get("percentComplete") or 0)
        self.status = data.get("taskStatus") or self.status
        self.messages = _task_messages(data)
        assoc = data.get("associatedResource") or {}
        if isinstance(assoc, dict):
            self.associated_resource_uri = assoc.get("resourceUri") or self.associated_resource_uri

    def finish(self, error: OneViewError | None = None) -> None:
        self.done = True
        self._error = error

    def refresh(self) -> Task:
        if not self.uri:
            return self
        data = self.service.connection.get(self.uri)
        if isinstance(data, dict):
            self.apply(data)
        return self

    def wait(self) -> Task:
        if self.done:
            if self._error is not None:
                raise self._error
            return self
        return self.service.wait(self)


class TaskService:
    def __init__(self, connection: OVConnection, settings: Settings) -> None:
        self.connection = connection
        self.poll_interval = settings.task_poll_interval
        self.timeout = settings.task_timeout
        self.max_poll_errors = settings.task_max_poll_errors

    def get(self, uri: str) -> Task:
        return Task(self, uri).refresh()

    def completed(self, name: str = "", resource: Any = None) -> Task:
        task = Task(self, None, name)
        task.state = "Completed"
        task.percent_complete = 100
        task.resource = resource
        task.finish()
        return task

    def from_response(self, response: httpx.Response, name: str = "") -> Task:
        """Build the handle for a submitted operation.

        The appliance answers long-running calls with 202 and the task
        resource (or at least a Location header); anything else already
        finished and is returned as a done task carrying the body.
        """
        data = response_json(response)
        location = response.headers.get("Location", "")
        location_path = (urlsplit(location).path or location) if location else None
        if _is_task_body(data):
            task = Task(self, data.get("uri") or location_path, name)
            task.apply(data)
            return task
        if response.status_code == 202 and location_path:
            return Task(self, location_path, name)
        return self.completed(name, data)

    def wait(self, task: Task) -> Task:
        if not task.uri:
            error = TaskFailedError(task.name, task.state, ["task has no uri to poll"])
            task.finish(error)
            raise error
        start = time.monotonic()
        consecutive_errors = 0
        logger.debug(f"Waiting for task {task.uri} ({task.name})")
        while True:
            try:
                task.refresh()
                consecutive_errors = 0
            except OneViewError as exc:
                consecutive_errors += 1
                TASK_POLL_ERRORS.inc()
                logger.warning(f"Polling task {task.uri} failed ({consecutive_errors}/{self.max_poll_errors}): {exc}")
                if consecutive_errors > self.max_poll_errors:
                    error = TaskFailedError(task.uri or "", "PollError", [str(exc)])
                    task.finish(error)
                    TASK_WAIT.labels(result="poll_error").observe(time.monotonic() - start)
                    raise error from exc
            else:
                if task.state in SUCCESS_STATES:
                    task.finish()
                    TASK_WAIT.labels(result="completed").observe(time.monotonic() - start)
                    if task.state == "Warning":
                        logger.warning(f"Task {task.uri} completed with warnings: {'; '.join(task.messages)}")
                    logger.info(f"Task {task.name or task.uri} {task.state}")
                    return task
                if task.state in FAILURE_STATES:
                    error = TaskFailedError(task.uri or "", task.state, task.messages)
                    task.finish(error)
                    TASK_WAIT.labels(result="failed").observe(time.monotonic() - start)
                    logger.error(str(error))
                    raise error
                logger.debug(f"Task {task.uri}: {task.state} ({task.percent_complete}%)")
            if time.monotonic() - start >= self.timeout:
                TASK_WAIT.labels(result="timeout").observe(time.monotonic() - start)
                # not marked done: the appliance may still finish it
                raise TaskTimeoutError(task.uri or "", self.timeout)
            time.sleep(self.poll_interval)
