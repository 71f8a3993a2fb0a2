import logging

import sentry_sdk
from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from models.cv_models import Analysis, AnalyzeRequest, AnalyzeResponse, ErrorResponse, UploadAnalysis
from services.cv_analyzer import CVAnalyzer
from services.exceptions import ExtractionError, InvalidInputError, UnsupportedFormatError
from services.feedback_export import render_feedback
from services.telemetry import log_analysis, traced
from services.text_extractor import DocumentKind, extract_text

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)


class CORSPreflightMiddleware(CORSMiddleware):
    """CORS middleware that answers accepted preflights with an empty body."""

    def preflight_response(self, request_headers):
        response = super().preflight_response(request_headers=request_headers)
        if response.status_code != 200:
            return response
        headers = {
            key: value for key, value in response.headers.items()
            if key not in ("content-length", "content-type")
        }
        return Response(status_code=200, headers=headers)


app = FastAPI(title="CV Coach API", version="1.0.0")

app.add_middleware(
    CORSPreflightMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

# Initialize services
cv_analyzer = CVAnalyzer(min_words=settings.min_words, max_words=settings.max_words)


@traced("cv_analysis")
def run_analysis(text: str) -> Analysis:
    analysis = cv_analyzer.analyze(text)
    log_analysis(analysis)
    return analysis


@traced("text_extraction")
def extract_document(filename: str, content: bytes) -> str:
    return extract_text(filename, content)


async def read_resume_text(request: Request) -> str:
    """
    Pull the `resume` string out of a JSON body; anything else is invalid input
    """
    try:
        payload = await request.json()
    except ValueError:
        raise InvalidInputError()
    try:
        return AnalyzeRequest.model_validate(payload, strict=True).resume
    except ValidationError:
        raise InvalidInputError()


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(UnsupportedFormatError)
async def unsupported_format_handler(request: Request, exc: UnsupportedFormatError):
    logger.info(f"Rejected unsupported file: {exc.filename}")
    return JSONResponse(
        status_code=415,
        content={"error": "Unsupported file format. Use PDF, DOCX, or TXT."},
    )


@app.exception_handler(ExtractionError)
async def extraction_error_handler(request: Request, exc: ExtractionError):
    return JSONResponse(status_code=422, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def cors_error_headers(request: Request):
    """
    CORS headers for responses built outside the CORS middleware (500s)
    """
    origin = request.headers.get("origin")
    if origin is None:
        return None
    if "*" in settings.cors_allowed_origins:
        return {"Access-Control-Allow-Origin": "*"}
    if origin in settings.cors_allowed_origins:
        return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
    return None


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
        headers=cors_error_headers(request),
    )


@app.get("/")
async def root():
    return {"message": "CV Coach API is working"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "text_extractor": "running",
            "cv_analyzer": "running"
        }
    }


@app.post("/analyze", response_model=AnalyzeResponse, responses=ERROR_RESPONSES)
async def analyze_resume(request: Request):
    """
    Analyze raw resume text sent as {"resume": "..."}
    """
    resume = await read_resume_text(request)
    logger.info(f"Analyzing CV with length: {len(resume)}")
    return AnalyzeResponse(analysis=await run_in_threadpool(run_analysis, resume))


@app.post("/feedback", response_class=PlainTextResponse, responses=ERROR_RESPONSES)
async def resume_feedback(request: Request):
    """
    Analyze resume text and return the shareable plain-text feedback
    """
    resume = await read_resume_text(request)
    analysis = await run_in_threadpool(run_analysis, resume)
    return PlainTextResponse(render_feedback(analysis, limit=settings.feedback_top_n))


@app.post(
    "/upload-resume",
    response_model=UploadAnalysis,
    responses={**ERROR_RESPONSES, 413: {"model": ErrorResponse}, 415: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def upload_resume(file: UploadFile = File(...)):
    """
    Upload a PDF, DOCX or TXT resume, extract its text and analyze it
    """
    filename = file.filename or ""
    if DocumentKind.from_filename(filename) is DocumentKind.UNSUPPORTED:
        raise UnsupportedFormatError(filename)

    too_large = HTTPException(
        status_code=413,
        detail=f"File size must be at most {settings.max_upload_bytes} bytes",
    )
    if file.size is not None and file.size > settings.max_upload_bytes:
        raise too_large

    content = await file.read()
    if len(content) > settings.max_upload_bytes:
        raise too_large

    logger.info(f"Processing file: {filename}")
    text = await run_in_threadpool(extract_document, filename, content)
    analysis = await run_in_threadpool(run_analysis, text)

    logger.info(f"Analysis completed for: {filename}")
    return UploadAnalysis(filename=filename, text=text, analysis=analysis)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
