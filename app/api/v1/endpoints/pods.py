# app/api/v1/endpoints/pods.py
import logging
from typing import List
from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse
from app.api.deps import get_pod_registry
from app.models.pod import Pod, PodStatus
from app.services.pod_registry import PodRegistry, build_key

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/getPods",
    response_model=List[Pod],
    response_model_exclude_none=True,
    summary="List every pod stored on this node",
)
async def get_pods(registry: PodRegistry = Depends(get_pod_registry)) -> List[Pod]:
    logger.info("getPods")
    # The registry has no ordering; sort here so callers get stable output
    return sorted(
        registry.list_all(),
        key=lambda pod: build_key(pod.metadata.namespace, pod.metadata.name),
    )


@router.get(
    "/getPodStatus",
    response_model=PodStatus,
    response_model_exclude_none=True,
    summary="Status of a single pod",
    responses={404: {"description": "Pod not found (empty body)"}},
)
async def get_pod_status(
    namespace: str = "",
    name: str = "",
    registry: PodRegistry = Depends(get_pod_registry),
) -> PodStatus:
    logger.info(f"getPodStatus {namespace} - {name}")
    return registry.get_status(namespace, name)


@router.post(
    "/createPod",
    summary="Admit a pod and mark it Running",
    description="""
Stores the submitted pod and fabricates its status: phase Running, the PodScheduled,
Initialized and Ready conditions all True, and every container ready and running since now.
Any status in the body is ignored. No container is actually started.
    """,
)
async def create_pod(pod: Pod, registry: PodRegistry = Depends(get_pod_registry)) -> Response:
    logger.info(f"createPod {pod.metadata.namespace} - {pod.metadata.name}")
    registry.admit(pod)
    return Response(status_code=status.HTTP_200_OK)


@router.put(
    "/updatePod",
    summary="Replace a stored pod as-is",
    description="Stores the body verbatim, status included. The status is not re-simulated.",
)
async def update_pod(pod: Pod, registry: PodRegistry = Depends(get_pod_registry)) -> Response:
    logger.info(f"updatePod {pod.metadata.namespace} - {pod.metadata.name}")
    registry.replace(pod)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/deletePod",
    summary="Forget a pod",
    description="Only the namespace and name of the body are used. Deleting an unknown pod succeeds.",
)
async def delete_pod(pod: Pod, registry: PodRegistry = Depends(get_pod_registry)) -> Response:
    logger.info(f"deletePod {pod.metadata.namespace} - {pod.metadata.name}")
    registry.remove(pod.metadata.namespace, pod.metadata.name)
    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/getContainerLogs",
    response_class=PlainTextResponse,
    summary="Placeholder logs of a container",
    responses={404: {"description": "Pod or container not found (empty body)"}},
)
async def get_container_logs(
    namespace: str = "",
    pod_name: str = Query("", alias="podName"),
    container_name: str = Query("", alias="containerName"),
    registry: PodRegistry = Depends(get_pod_registry),
) -> str:
    logger.info(f"getContainerLogs {namespace} - {pod_name} - {container_name}")
    return registry.get_container_log(namespace, pod_name, container_name)
