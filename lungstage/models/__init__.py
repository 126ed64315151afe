from .staging import (
    InhalerUseInput,
    CopdRequest,
    AsthmaRequest,
    StagingResponse,
    ReportRequest,
    ReportResponse,
    HealthResponse,
)

__all__ = [
    "InhalerUseInput",
    "CopdRequest",
    "AsthmaRequest",
    "StagingResponse",
    "ReportRequest",
    "ReportResponse",
    "HealthResponse",
]
