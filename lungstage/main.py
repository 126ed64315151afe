"""
Respiratory Staging - FastAPI Application

Main application entry point with API endpoints for:
- COPD staging (GOLD grade / ABE group)
- Asthma severity staging
- Report generation and PDF download
"""
from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.middleware.cors import CORSMiddleware

from typing import Dict, Any
from datetime import datetime
import os
import uuid

from lungstage import config
from lungstage.core.clinical import StagingEngine, StagingResult, Questionnaire
from lungstage.core.reports import ReportRenderer, PdfReportExporter, StagingReport
from lungstage.utils import (
    get_logger,
    setup_logging,
    StagingError,
    ReportGenerationError,
)
from lungstage.models import (
    CopdRequest,
    AsthmaRequest,
    StagingResponse,
    ReportRequest,
    ReportResponse,
    HealthResponse,
)

setup_logging(config.LOG_LEVEL, config.LOG_FILE or None)
logger = get_logger(__name__)


# ---- FastAPI Application ----

app = FastAPI(
    title="Respiratory Staging API",
    description="COPD GOLD/ABE and asthma severity staging from questionnaire answers",
    version=config.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---- In-memory storage (process lifetime only) ----
_assessments: Dict[str, Dict[str, Any]] = {}
_reports: Dict[str, StagingReport] = {}
START_TIME = datetime.now()

# ---- Pipeline ----
_engine = StagingEngine()
_renderer = ReportRenderer()
_exporter = PdfReportExporter(output_dir=config.REPORTS_DIR)


# ---- Utility Functions ----

def _stage(questionnaire: Questionnaire, answers: Dict[str, Any]) -> StagingResponse:
    """Validate, classify, render and store one questionnaire."""
    try:
        result: StagingResult = _engine.classify(questionnaire, answers)
    except StagingError as e:
        logger.warning(f"{questionnaire.value} staging rejected: {e.message}")
        raise HTTPException(status_code=400, detail=e.to_dict())

    assessment_id = f"{questionnaire.value.upper()}-{uuid.uuid4().hex[:12]}"
    report = _renderer.render(result, report_id=f"RPT-{assessment_id}")
    timestamp = datetime.now().isoformat()

    _assessments[assessment_id] = {
        "result": result,
        "report": report,
        "timestamp": timestamp,
    }

    summary = _engine.summarise(result)
    return StagingResponse(
        assessment_id=assessment_id,
        questionnaire=summary["questionnaire"],
        headline=summary["headline"],
        result=summary["result"],
        report_lines=[line.to_text() for line in report.lines],
        timestamp=timestamp,
    )


def _health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=config.API_VERSION,
        timestamp=datetime.now().isoformat(),
        uptime_seconds=(datetime.now() - START_TIME).total_seconds(),
        questionnaires=[q.value for q in _engine.registered_questionnaires()],
    )


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """API root - health check."""
    return _health()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return _health()


@app.get("/api/v1/questionnaires", tags=["Reference"])
async def list_questionnaires():
    """
    List all supported staging questionnaires.
    """
    return {
        "questionnaires": [
            {"name": q.value, "description": f"{q.value.upper()} staging"}
            for q in _engine.registered_questionnaires()
        ]
    }


@app.post("/api/v1/copd/classify", response_model=StagingResponse, tags=["Staging"])
async def classify_copd(request: CopdRequest):
    """
    Assign a GOLD grade and ABE group from spirometry, exacerbation
    history and the mMRC score.
    """
    return _stage(Questionnaire.COPD, request.model_dump(by_alias=True))


@app.post("/api/v1/asthma/classify", response_model=StagingResponse, tags=["Staging"])
async def classify_asthma(request: AsthmaRequest):
    """
    Estimate asthma severity from lung function, symptom frequency and
    activity limitation.
    """
    return _stage(Questionnaire.ASTHMA, request.model_dump(by_alias=True))


@app.get("/api/v1/assessments/{assessment_id}", tags=["Staging"])
async def get_assessment(assessment_id: str):
    """
    Retrieve a previous classification.
    """
    if assessment_id not in _assessments:
        raise HTTPException(status_code=404, detail="Assessment not found")

    assessment = _assessments[assessment_id]
    summary = _engine.summarise(assessment["result"])
    return {
        "assessment_id": assessment_id,
        "timestamp": assessment["timestamp"],
        **summary,
        "report_lines": [line.to_text() for line in assessment["report"].lines],
    }


@app.post("/api/v1/reports/generate", response_model=ReportResponse, tags=["Reports"])
async def generate_report(request: ReportRequest):
    """
    Generate the PDF report for a completed classification.
    """
    if request.assessment_id not in _assessments:
        raise HTTPException(
            status_code=404,
            detail=f"Assessment {request.assessment_id} not found. Classify first."
        )

    report: StagingReport = _assessments[request.assessment_id]["report"]

    try:
        pdf_path = _exporter.export(report)
    except ReportGenerationError as e:
        logger.error(f"Report generation failed: {e.message}")
        raise HTTPException(status_code=500, detail=e.to_dict())

    _reports[report.report_id] = report

    return ReportResponse(
        report_id=report.report_id,
        questionnaire=report.questionnaire,
        pdf_path=pdf_path,
        download_filename=report.download_filename,
        generated_at=report.generated_at.isoformat()
    )


@app.get("/api/v1/reports/{report_id}/download", tags=["Reports"])
async def download_report(report_id: str):
    """
    Download a generated PDF report.
    """
    if report_id not in _reports:
        raise HTTPException(status_code=404, detail="Report not found")

    report = _reports[report_id]

    if not report.pdf_path or not os.path.exists(report.pdf_path):
        raise HTTPException(status_code=404, detail="PDF file not found")

    return FileResponse(
        path=report.pdf_path,
        media_type="application/pdf",
        filename=report.download_filename
    )


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
