"""API response models"""
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Service version")


class MetricsResponse(BaseModel):
    """Metrics response"""
    uptime_seconds: float = Field(..., description="Service uptime")
    total_requests: int = Field(..., description="Upload requests received")
    successful_uploads: int = Field(..., description="Uploads stored on disk")
    failed_requests: int = Field(..., description="Uploads that failed")
    client_errors: int = Field(..., description="Failures caused by the client (4xx)")
    server_errors: int = Field(..., description="Failures caused by the server (5xx)")
    total_bytes_received: int = Field(..., description="Payload bytes stored")
    total_audio_seconds: float = Field(..., description="Audio stored in seconds")
