"""
Contact form endpoint.

Accepts a submission from the site's contact form, validates it and relays it
to the CRM webhook and the auto-reply mailer when those are configured.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from app.core.config import Settings, get_settings
from app.core.exceptions import ValidationError, GENERIC_FAILURE_MESSAGE
from app.core.notifications import CrmWebhookClient, ResendMailer, get_crm_client, get_auto_reply_mailer
from app.core.relay import relay_submission
from app.models.contact import ContactSubmission

router = APIRouter()
logger = logging.getLogger(__name__)

# Headers sent with every contact response
NO_STORE = {"Cache-Control": "no-store"}


@router.post("/contact")
async def submit_contact(
    request: Request,
    crm: Optional[CrmWebhookClient] = Depends(get_crm_client),
    mailer: Optional[ResendMailer] = Depends(get_auto_reply_mailer),
    settings: Settings = Depends(get_settings),
):
    """
    Handle a contact form submission.

    Returns {"success": true} for any valid submission, whether or not the
    CRM forward and auto-reply succeed.
    """
    try:
        data = await request.json()
        submission = ContactSubmission.model_validate(data)

        await relay_submission(submission, crm=crm, mailer=mailer, settings=settings)

        return JSONResponse({"success": True}, status_code=200, headers=NO_STORE)

    except ValidationError as e:
        logger.warning(f"Rejected contact submission: {e.message}")
        return JSONResponse({"error": e.message}, status_code=400, headers=NO_STORE)
    except Exception as e:
        logger.exception(f"Unexpected error processing contact submission: {str(e)}")
        return JSONResponse({"error": GENERIC_FAILURE_MESSAGE}, status_code=500, headers=NO_STORE)
