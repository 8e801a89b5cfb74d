from pydantic import BaseModel, ConfigDict, Field


class HostSnapshot(BaseModel):
    """Host and runtime facts read fresh for a single request"""
    model_config = ConfigDict(frozen=True)

    hostname: str
    platform: str
    runtime_version: str
    uptime_seconds: float = Field(ge=0)
    environment: str
    timestamp: str


class HealthRecord(BaseModel):
    """Liveness probe payload"""
    status: str = "healthy"
    timestamp: str
    uptime: float = Field(ge=0)
    hostname: str


class InfoRecord(BaseModel):
    """Descriptive service payload for /api/info"""
    model_config = ConfigDict(populate_by_name=True)

    application: str
    version: str
    environment: str
    hostname: str
    platform: str
    node_version: str = Field(alias="nodeVersion")
    uptime: float = Field(ge=0)
