from fastapi import APIRouter, Depends
from pydantic import BaseModel

from edunotes.core.logging import get_logger
from edunotes.dependencies import get_portal
from edunotes.services.portal import Portal

logger = get_logger(__name__)
router = APIRouter()


class AdminLogin(BaseModel):
    code: str


@router.post("/admin")
def admin_login(payload: AdminLogin, portal: Portal = Depends(get_portal)):
    """Check the admin passphrase; clients then send it as X-Admin-Code"""
    portal.admin.login(payload.code)
    return {"authenticated": True, "user_type": "admin"}
