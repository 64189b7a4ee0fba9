# app/api/v1/endpoints/node.py
import logging
from typing import Any, Dict, List
from fastapi import APIRouter, Depends
from app.api.deps import get_node_service
from app.services.node_service import NodeService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/capacity", summary="Fixed resource capacity of the node")
async def get_capacity(node_service: NodeService = Depends(get_node_service)) -> Dict[str, str]:
    logger.info("getCapacity")
    return node_service.get_capacity()


@router.get("/nodeAddresses", summary="Internal IP of the node, if configured")
async def get_node_addresses(node_service: NodeService = Depends(get_node_service)) -> List[Dict[str, Any]]:
    logger.info("getNodeAddresses")
    return node_service.get_node_addresses()


@router.get("/nodeConditions", summary="A fresh Ready condition")
async def get_node_conditions(node_service: NodeService = Depends(get_node_service)) -> List[Dict[str, Any]]:
    logger.info("getNodeConditions")
    return node_service.get_node_conditions()
