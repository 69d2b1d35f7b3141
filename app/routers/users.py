"""Job seeker profile routes."""

from fastapi import APIRouter, Depends, File, Request, UploadFile

from app.core.exceptions import UploadError
from app.core.security import ApplicantContext
from app.dependencies import get_current_applicant, get_user_service
from app.schemas.user import UserOut, UserUpdateRequest
from app.services.user_service import UserService
from app.utils.uploads import read_resume_upload

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/profile")
async def get_user_profile(
    actor: ApplicantContext = Depends(get_current_applicant),
    service: UserService = Depends(get_user_service),
):
    user = await service.get_profile(actor)
    return {"success": True, "user": UserOut(**user.to_public())}


@router.put("/profile")
async def update_user_profile(
    payload: UserUpdateRequest,
    actor: ApplicantContext = Depends(get_current_applicant),
    service: UserService = Depends(get_user_service),
):
    user = await service.update_profile(actor, payload.name)
    return {
        "success": True,
        "message": "Profile updated successfully.",
        "user": UserOut(**user.to_public()),
    }


@router.post("/resume")
async def upload_resume(
    request: Request,
    resume: UploadFile | None = File(None),
    actor: ApplicantContext = Depends(get_current_applicant),
    service: UserService = Depends(get_user_service),
):
    """Replace the caller's resume with an uploaded PDF."""
    if resume is None or not resume.filename:
        raise UploadError("Please upload a PDF file.")
    upload = await read_resume_upload(resume, request.app.state.settings.max_resume_bytes)
    url = await service.replace_resume(actor, upload)
    return {"success": True, "message": "Resume uploaded successfully.", "resume": url}
