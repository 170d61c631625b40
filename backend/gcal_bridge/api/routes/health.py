"""
Health and root endpoints
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

WELCOME_MESSAGE = "Welcome to the Google Calendar API service! Visit /auth/google to authenticate."


@router.get("/", response_class=PlainTextResponse)
def root():
    """Root endpoint - points at the authorization entry"""
    return WELCOME_MESSAGE


@router.get("/health")
def health():
    """Health check endpoint"""
    return {"ok": True}
