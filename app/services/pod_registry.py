# app/services/pod_registry.py
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from app.models.pod import (
    ConditionStatus,
    ContainerState,
    ContainerStateRunning,
    ContainerStatus,
    Pod,
    PodCondition,
    PodConditionType,
    PodPhase,
    PodStatus,
)

logger = logging.getLogger(__name__)

LOG_TEMPLATE = (
    "Simulated log content for {namespace}, {pod_name}, {container_name}\n"
    "If this provider actually ran the containers then the logs would appear here ;-)\n"
)


class NotFoundError(Exception):
    """Base class for lookups that found nothing."""


class PodNotFoundError(NotFoundError):
    def __init__(self, namespace: str, name: str):
        super().__init__(f"Pod not found: {namespace} - {name}")
        self.namespace = namespace
        self.name = name


class ContainerNotFoundError(NotFoundError):
    def __init__(self, namespace: str, pod_name: str, container_name: str):
        super().__init__(f"Container not found: {namespace} - {pod_name} - {container_name}")
        self.namespace = namespace
        self.pod_name = pod_name
        self.container_name = container_name


def build_key(namespace: str, name: str) -> str:
    """Composite registry key. Opaque: never split it back into its parts."""
    return f"{namespace}-{name}"


def utc_now() -> datetime:
    # Kubernetes timestamps carry whole seconds only
    return datetime.now(timezone.utc).replace(microsecond=0)


class PodRegistry:
    """
    In-memory store of the pods submitted to the agent.

    Every operation takes a single lock, so concurrent requests see each
    admit/replace/remove as one atomic step. Pods are deep-copied on the way
    in and out; stored state only changes through these methods.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._pods: Dict[str, Pod] = {}
        self._lock = threading.Lock()
        self._clock = clock or utc_now

    def __len__(self) -> int:
        with self._lock:
            return len(self._pods)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._pods

    def _simulate_running_status(self, pod: Pod) -> PodStatus:
        """Builds the status of a pod whose containers all started right now."""
        started_at = self._clock()
        conditions = [
            PodCondition(type=condition_type.value, status=ConditionStatus.TRUE.value)
            for condition_type in (
                PodConditionType.POD_SCHEDULED,
                PodConditionType.INITIALIZED,
                PodConditionType.READY,
            )
        ]
        container_statuses = [
            ContainerStatus(
                name=container.name,
                image=container.image,
                ready=True,
                restart_count=0,
                state=ContainerState(running=ContainerStateRunning(started_at=started_at)),
            )
            for container in pod.spec.containers
        ]
        return PodStatus(
            phase=PodPhase.RUNNING.value,
            conditions=conditions,
            container_statuses=container_statuses,
        )

    def admit(self, pod: Pod) -> Pod:
        """
        Accepts a new pod and marks it Running.

        Whatever status the caller sent is discarded and replaced by a
        fabricated one. An existing pod with the same namespace/name is
        overwritten.
        """
        record = pod.model_copy(deep=True)
        record.status = self._simulate_running_status(record)
        key = build_key(record.metadata.namespace, record.metadata.name)
        with self._lock:
            self._pods[key] = record
        logger.debug(f"Admitted pod {key} with {len(record.spec.containers)} container(s).")
        return record.model_copy(deep=True)

    def replace(self, pod: Pod) -> Pod:
        """
        Stores the pod exactly as given, status included.

        Unlike admit() no status is derived; a missing pod is simply created.
        """
        record = pod.model_copy(deep=True)
        key = build_key(record.metadata.namespace, record.metadata.name)
        with self._lock:
            self._pods[key] = record
        logger.debug(f"Replaced pod {key}.")
        return record.model_copy(deep=True)

    def remove(self, namespace: str, name: str) -> None:
        key = build_key(namespace, name)
        with self._lock:
            removed = self._pods.pop(key, None)
        if removed is None:
            logger.debug(f"Remove of unknown pod {key} ignored.")

    def get_status(self, namespace: str, name: str) -> PodStatus:
        key = build_key(namespace, name)
        with self._lock:
            pod = self._pods.get(key)
            if pod is None:
                raise PodNotFoundError(namespace, name)
            return pod.status.model_copy(deep=True)

    def list_all(self) -> List[Pod]:
        """Every stored pod, in no particular order."""
        with self._lock:
            return [pod.model_copy(deep=True) for pod in self._pods.values()]

    def get_container_log(self, namespace: str, pod_name: str, container_name: str) -> str:
        """
        Placeholder log text for a container of a stored pod.

        Containers are looked up in the pod spec, not its status, so a pod
        stored through replace() with an empty status still has logs.
        """
        key = build_key(namespace, pod_name)
        with self._lock:
            pod = self._pods.get(key)
            if pod is None:
                raise PodNotFoundError(namespace, pod_name)
            container_names = [container.name for container in pod.spec.containers]

        for name in container_names:
            if name == container_name:
                return LOG_TEMPLATE.format(
                    namespace=namespace,
                    pod_name=pod_name,
                    container_name=container_name,
                )
        raise ContainerNotFoundError(namespace, pod_name, container_name)
