# app/api/v1/api.py
from fastapi import APIRouter
from app.api.v1.endpoints import node, pods

api_router = APIRouter()

# Paths match what the control plane's node provider calls, so no sub-prefixes
api_router.include_router(node.router, tags=["Node"])
api_router.include_router(pods.router, tags=["Pods"])
