"""
Contact submission relay.

Validates a submission, then runs the CRM forward and the auto-reply as two
independent best-effort dispatches. Dispatch outcomes never change the result
for a valid submission.
"""

import asyncio
import logging
from typing import Dict, Optional

from app.core.config import Settings, get_settings
from app.core.exceptions import ValidationError
from app.core.notifications import CrmWebhookClient, ResendMailer, compose_auto_reply
from app.models.contact import ContactSubmission

logger = logging.getLogger(__name__)

SENT = "sent"
FAILED = "failed"
SKIPPED = "skipped"


def validate_submission(submission: ContactSubmission) -> None:
    """Raise ValidationError unless name, email and message are all present"""
    if not submission.name or not submission.email or not submission.message:
        raise ValidationError()


async def _forward_to_crm(submission: ContactSubmission, crm: Optional[CrmWebhookClient]) -> str:
    if crm is None:
        return SKIPPED
    await crm.forward(submission)
    return SENT


async def _send_auto_reply(
    submission: ContactSubmission,
    mailer: Optional[ResendMailer],
    settings: Settings,
) -> str:
    if mailer is None:
        return SKIPPED
    reply = compose_auto_reply(submission, settings)
    await mailer.send(submission.email, reply["subject"], reply["text"])
    return SENT


async def relay_submission(
    submission: ContactSubmission,
    crm: Optional[CrmWebhookClient] = None,
    mailer: Optional[ResendMailer] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, str]:
    """
    Validate a submission and dispatch its notifications.

    Args:
        submission: The parsed contact submission
        crm: CRM webhook client, or None when CRM forwarding is not configured
        mailer: Auto-reply mailer, or None when email is not configured
        settings: Business details for the auto-reply (defaults to app settings)

    Returns:
        dict: Outcome per channel ("sent", "failed" or "skipped"), for logging only

    Raises:
        ValidationError: If name, email or message is missing. Nothing is dispatched.
    """
    validate_submission(submission)

    if settings is None:
        settings = get_settings()

    results = await asyncio.gather(
        _forward_to_crm(submission, crm),
        _send_auto_reply(submission, mailer, settings),
        return_exceptions=True,
    )

    outcomes = {}
    for channel, result in zip(("crm", "email"), results):
        if isinstance(result, Exception):
            logger.error(f"❌ {channel} dispatch failed for {submission.email}: {str(result)}")
            outcomes[channel] = FAILED
        else:
            outcomes[channel] = result

    logger.info(f"Contact submission from {submission.email} relayed: {outcomes}")
    return outcomes
