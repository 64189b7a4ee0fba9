# app/models/pod.py
"""
Pydantic models for the subset of the Kubernetes core/v1 Pod shape the agent
reads or fabricates. Keys travel in camelCase on the wire; anything the agent
does not model is kept as an extra field so a pod round-trips unchanged.

Phases and condition statuses are plain strings: a pod stored through
updatePod keeps whatever values the caller sent. The enums below are the
values the agent itself produces. A JSON null for a field that has a default
falls back to that default.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class PodPhase(str, Enum):
    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class ConditionStatus(str, Enum):
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class PodConditionType(str, Enum):
    POD_SCHEDULED = "PodScheduled"
    INITIALIZED = "Initialized"
    READY = "Ready"


class K8sModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='allow', # Keep fields we don't model
    )

    @classmethod
    def _default_if_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class ObjectMeta(K8sModel):
    name: str = ""
    namespace: str = ""
    uid: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None

    @field_validator("name", "namespace", mode="before")
    @classmethod
    def null_is_default(cls, value, info: ValidationInfo):
        return cls._default_if_null(value, info)


class Container(K8sModel):
    name: str = ""
    image: str = ""

    @field_validator("name", "image", mode="before")
    @classmethod
    def null_is_default(cls, value, info: ValidationInfo):
        return cls._default_if_null(value, info)


class PodSpec(K8sModel):
    containers: List[Container] = []
    node_name: Optional[str] = None

    @field_validator("containers", mode="before")
    @classmethod
    def null_is_default(cls, value, info: ValidationInfo):
        return cls._default_if_null(value, info)


class PodCondition(K8sModel):
    type: str = ""
    status: str = ""
    last_probe_time: Optional[datetime] = None
    last_transition_time: Optional[datetime] = None
    reason: Optional[str] = None
    message: Optional[str] = None

    @field_validator("type", "status", mode="before")
    @classmethod
    def null_is_default(cls, value, info: ValidationInfo):
        return cls._default_if_null(value, info)


class ContainerStateRunning(K8sModel):
    started_at: Optional[datetime] = None


class ContainerStateWaiting(K8sModel):
    reason: Optional[str] = None
    message: Optional[str] = None


class ContainerStateTerminated(K8sModel):
    exit_code: int = 0
    reason: Optional[str] = None
    message: Optional[str] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None


class ContainerState(K8sModel):
    """At most one of the three states is set."""
    running: Optional[ContainerStateRunning] = None
    waiting: Optional[ContainerStateWaiting] = None
    terminated: Optional[ContainerStateTerminated] = None


class ContainerStatus(K8sModel):
    name: str = ""
    image: str = ""
    ready: bool = False
    restart_count: int = 0
    state: ContainerState = Field(default_factory=ContainerState)

    @field_validator("name", "image", "ready", "restart_count", "state", mode="before")
    @classmethod
    def null_is_default(cls, value, info: ValidationInfo):
        return cls._default_if_null(value, info)


class PodStatus(K8sModel):
    phase: Optional[str] = None
    conditions: Optional[List[PodCondition]] = None
    container_statuses: Optional[List[ContainerStatus]] = None
    host_ip: Optional[str] = Field(None, alias="hostIP")
    pod_ip: Optional[str] = Field(None, alias="podIP")
    start_time: Optional[datetime] = None
    reason: Optional[str] = None
    message: Optional[str] = None


class Pod(K8sModel):
    """A submitted pod descriptor plus its (simulated) runtime status."""
    api_version: Optional[str] = None
    kind: Optional[str] = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PodSpec = Field(default_factory=PodSpec)
    status: PodStatus = Field(default_factory=PodStatus)

    @field_validator("metadata", "spec", "status", mode="before")
    @classmethod
    def null_is_default(cls, value, info: ValidationInfo):
        return cls._default_if_null(value, info)
