"""
API request / response models for the staging endpoints.

Request bodies keep the questionnaire pages' camelCase keys. Every answer
is optional at this layer so that missing answers reach the validator and
come back as a single MISSING_FIELD error listing all of them.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt

# Numeric answer as submitted. Strict members keep JSON booleans from being
# coerced to 1/0 so the validator sees and rejects them.
Answer = Optional[Union[StrictInt, StrictFloat, StrictBool, str]]


class InhalerUseInput(BaseModel):
    """One inhaler with its weekly use."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    weekly_frequency: Optional[str] = Field(None, alias="weeklyFrequency")


class CopdRequest(BaseModel):
    """COPD questionnaire answers."""
    model_config = ConfigDict(populate_by_name=True)

    ratio: Answer = Field(None, description="FEV1/FVC ratio, e.g. 0.65")
    fev1_percent: Answer = Field(None, alias="fev1Percent")
    exacerbations: Answer = None
    hospitalizations: Answer = None
    mmrc: Answer = Field(None, description="mMRC dyspnea score 0-4")
    inhalers: List[str] = Field(default_factory=list)
    frequency: Optional[str] = Field(None, description="Inhaler use, times per week")


class AsthmaRequest(BaseModel):
    """Asthma questionnaire answers."""
    model_config = ConfigDict(populate_by_name=True)

    fev1: Answer = Field(None, description="FEV1 % predicted")
    daytime: Optional[str] = None
    nighttime: Optional[str] = None
    activity: Optional[str] = None
    inhalers: List[Union[InhalerUseInput, str]] = Field(default_factory=list)
    frequency: Optional[str] = None


class StagingResponse(BaseModel):
    """Classification of one questionnaire."""
    assessment_id: str
    questionnaire: str
    headline: str
    result: Dict[str, Any]
    report_lines: List[str]
    timestamp: str


class ReportRequest(BaseModel):
    """Request for PDF report generation."""
    assessment_id: str


class ReportResponse(BaseModel):
    """Report generation response."""
    report_id: str
    questionnaire: str
    pdf_path: str
    download_filename: str
    generated_at: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    timestamp: str
    uptime_seconds: float
    questionnaires: List[str]
