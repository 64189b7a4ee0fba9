# app/core/config.py
from pydantic_settings import BaseSettings
from pydantic import Field, validator
from kubernetes.utils import parse_quantity
from typing import Optional
import logging

logger = logging.getLogger(__name__)

class Settings(BaseSettings):
    APP_NAME: str = "Fake Node Agent"
    # The control plane calls the agent paths at the root, so no prefix by default
    API_V1_STR: str = ""
    LOG_LEVEL: str = "INFO"

    # Uvicorn bind address
    HOST: str = "0.0.0.0"
    PORT: int = Field(3000, description="Port the agent listens on")

    # Node facts
    VKUBELET_POD_IP: Optional[str] = Field(None, description="Internal IP reported in nodeAddresses")
    NODE_CPU_CAPACITY: str = Field("50", description="Reported cpu capacity (Kubernetes quantity)")
    NODE_MEMORY_CAPACITY: str = Field("100Gi", description="Reported memory capacity (Kubernetes quantity)")
    NODE_PODS_CAPACITY: str = Field("20", description="Reported pod ceiling (Kubernetes quantity)")

    @validator('LOG_LEVEL')
    def validate_log_level(cls, v):
        if v.upper() not in ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG']:
            raise ValueError("LOG_LEVEL must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
        return v.upper()

    @validator('NODE_CPU_CAPACITY', 'NODE_MEMORY_CAPACITY', 'NODE_PODS_CAPACITY')
    def validate_quantity(cls, v):
        # parse_quantity raises ValueError on anything that is not a resource quantity
        parse_quantity(v)
        return v

    class Config:
        env_file = '.env' # Load environment variables from .env file
        env_file_encoding = 'utf-8'
        extra = 'ignore' # Ignore extra fields from environment

settings = Settings()

if not settings.VKUBELET_POD_IP:
    logger.warning("VKUBELET_POD_IP environment variable not set. nodeAddresses will report no addresses.")
