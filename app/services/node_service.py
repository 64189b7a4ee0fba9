# app/services/node_service.py
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from kubernetes import client

from app.core.config import Settings

logger = logging.getLogger(__name__)


class NodeService:
    """Fabricated node facts. Nothing here is measured."""

    def __init__(self, settings: Settings):
        self.settings = settings
        # Only used to turn client models into plain JSON-ready dicts
        self._api_client = client.ApiClient()

    def _serialize(self, obj: Any) -> Any:
        return self._api_client.sanitize_for_serialization(obj)

    def get_capacity(self) -> Dict[str, str]:
        return {
            "cpu": self.settings.NODE_CPU_CAPACITY,
            "memory": self.settings.NODE_MEMORY_CAPACITY,
            "pods": self.settings.NODE_PODS_CAPACITY,
        }

    def get_node_addresses(self) -> List[Dict[str, Any]]:
        """The node's internal IP, or nothing when VKUBELET_POD_IP is unset."""
        addresses = []
        if self.settings.VKUBELET_POD_IP:
            addresses.append(client.V1NodeAddress(address=self.settings.VKUBELET_POD_IP, type="InternalIP"))
        return self._serialize(addresses)

    def get_node_conditions(self) -> List[Dict[str, Any]]:
        """A single Ready condition stamped with the current time on every call."""
        now = datetime.now(timezone.utc).replace(microsecond=0)
        conditions = [
            client.V1NodeCondition(
                type="Ready",
                status="True",
                last_heartbeat_time=now,
                last_transition_time=now,
                reason="KubeletReady",
                message="At your service",
            )
        ]
        return self._serialize(conditions)
