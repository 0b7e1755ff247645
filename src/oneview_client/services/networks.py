from __future__ import annotations

from ..models import EthernetNetwork, FCNetwork
from .base import ResourceService


class FCNetworkService(ResourceService[FCNetwork]):
    uri = "/rest/fc-networks"
    model = FCNetwork
    kind = "fc network"


class EthernetNetworkService(ResourceService[EthernetNetwork]):
    uri = "/rest/ethernet-networks"
    model = EthernetNetwork
    kind = "ethernet network"
