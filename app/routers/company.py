"""Company account routes."""

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status

from app.core.security import RecruiterContext
from app.dependencies import get_company_service, get_current_company
from app.schemas.company import CompanyLoginRequest, CompanyOut, CompanyProfileOut
from app.services.company_service import CompanyService
from app.utils.uploads import read_image_upload

router = APIRouter(prefix="/company", tags=["company"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register_company(
    request: Request,
    name: str | None = Form(None),
    email: str | None = Form(None),
    password: str | None = Form(None),
    image: UploadFile | None = File(None),
    service: CompanyService = Depends(get_company_service),
):
    """Register a company, optionally with a logo."""
    logo = None
    if image is not None and image.filename:
        logo = await read_image_upload(image, request.app.state.settings.max_logo_bytes)

    token, company = await service.register(name, email, password, logo)
    return {
        "success": True,
        "message": "Company registered successfully.",
        "company": CompanyOut.from_model(company),
        "token": token,
    }


@router.post("/login")
async def login_company(
    payload: CompanyLoginRequest,
    service: CompanyService = Depends(get_company_service),
):
    """Issue a session token for a company."""
    token, company = await service.login(payload.email, payload.password)
    return {
        "success": True,
        "message": "Login successful.",
        "company": CompanyOut.from_model(company),
        "token": token,
    }


@router.get("/profile")
async def get_company_profile(
    actor: RecruiterContext = Depends(get_current_company),
):
    """Return the authenticated company's profile."""
    return {
        "success": True,
        "company": CompanyProfileOut(**CompanyService.get_profile(actor.company)),
    }


@router.put("/profile")
async def update_company_profile(
    request: Request,
    name: str | None = Form(None),
    image: UploadFile | None = File(None),
    actor: RecruiterContext = Depends(get_current_company),
    service: CompanyService = Depends(get_company_service),
):
    """Update the company name and/or logo."""
    logo = None
    if image is not None and image.filename:
        logo = await read_image_upload(image, request.app.state.settings.max_logo_bytes)

    company = await service.update_profile(actor.company, name=name, logo=logo)
    return {
        "success": True,
        "message": "Company profile updated.",
        "company": CompanyOut.from_model(company),
    }
