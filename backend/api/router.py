import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_id_factory
from config import settings
from models.requests import FileMeta
from models.responses import ErrorResponse, HealthResponse
from models.schemas.candidate_profile import CandidateProfile
from services.document_decoder import decode_document, resolve_media_type
from services.profile_assembler import IdFactory, format_candidate_data
from services.resume_extractor import extract_structured_info

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse()


@router.post(
    "/parse-resume",
    response_model=CandidateProfile,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def parse_resume(
    request: Request,
    resume: UploadFile | None = File(None),
    make_id: IdFactory = Depends(get_id_factory),
):
    if resume is None or not resume.filename:
        return _error(400, "No file uploaded.")

    content = await resume.read()
    if not content:
        return _error(400, "No file uploaded.")

    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        return _error(400, f"File too large. Max size: {settings.max_upload_size_mb}MB")

    mime_type = resolve_media_type(resume.filename, resume.content_type)
    try:
        text = decode_document(content, mime_type)
        parsed = extract_structured_info(text)
        return format_candidate_data(
            FileMeta(name=resume.filename, size=len(content), mime_type=mime_type),
            parsed,
            make_id,
        )
    except Exception:
        logger.exception("Error parsing resume %s", resume.filename)
        return _error(500, "Failed to process resume.")
