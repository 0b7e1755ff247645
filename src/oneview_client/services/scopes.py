from __future__ import annotations

import logging

from ..models import ResourceScope, Scope
from .base import ResourceService
from .tasks import Task

logger = logging.getLogger(__name__)

RESOURCES_URI = "/rest/scopes/resources"


class ScopeService(ResourceService[Scope]):
    uri = "/rest/scopes"
    model = Scope
    kind = "scope"

    def get_for_resource(self, resource_uri: str) -> ResourceScope:
        """Scopes assigned to the resource at ``resource_uri``."""
        data = self.connection.get(f"{RESOURCES_URI}{resource_uri}")
        return ResourceScope.model_validate(data or {"resourceUri": resource_uri})

    def update_for_resource(self, resource_scope: ResourceScope) -> Task:
        if not resource_scope.resource_uri:
            raise ValueError("resource scope has no resourceUri")
        uri = f"{RESOURCES_URI}{resource_scope.resource_uri}"
        logger.info(f"Assigning scopes {resource_scope.scope_uris} to {resource_scope.resource_uri}")
        r = self.connection.put(uri, resource_scope)
        return self.tasks.from_response(r, f"update scopes of {resource_scope.resource_uri}")
