# app/api/deps.py
from fastapi import Request

from app.services.node_service import NodeService
from app.services.pod_registry import PodRegistry


def get_pod_registry(request: Request) -> PodRegistry:
    """The registry created by create_app() for this application."""
    return request.app.state.pod_registry


def get_node_service(request: Request) -> NodeService:
    return request.app.state.node_service
