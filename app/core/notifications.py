"""
Outbound notification clients for contact submissions.

Two optional collaborators:
- CrmWebhookClient: forwards the raw submission as JSON to the CRM webhook
- ResendMailer: sends the auto-reply email through the Resend API

Both raise DispatchError on any failure. Whether they exist at all is decided
by configuration (see get_crm_client / get_auto_reply_mailer), so the relay
never looks at environment variables itself.
"""

import httpx
import logging
from typing import Dict, Any, Optional
from fastapi import Depends

from app.core.config import Settings, get_settings
from app.core.exceptions import DispatchError
from app.models.contact import ContactSubmission

logger = logging.getLogger(__name__)


def compose_auto_reply(submission: ContactSubmission, settings: Settings) -> Dict[str, str]:
    """
    Build the fixed-template auto-reply for a submission.

    Returns:
        dict: subject and text of the reply
    """
    business = settings.business_name
    text = (
        f"Hi {submission.name},\n\n"
        f"Thank you for reaching out to {business}! We’ve received your message about "
        f"'{submission.topic_or_default}' and will get back to you shortly.\n\n"
        f"If your matter is urgent, feel free to call us at {settings.business_phone}.\n\n"
        f"Best regards,\n"
        f"The {business} Team"
    )
    return {
        "subject": f"Thanks for contacting {business}",
        "text": text,
    }


class CrmWebhookClient:
    """Forwards contact submissions to a CRM webhook"""

    channel = "crm"

    def __init__(self, webhook_url: str, timeout: float = 15.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._transport = transport

    async def forward(self, submission: ContactSubmission) -> None:
        payload = submission.model_dump(exclude_none=True)

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self.webhook_url, json=payload, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise DispatchError(self.channel, f"Error sending to CRM webhook: {str(e)}") from e

        if not response.is_success:
            raise DispatchError(self.channel, "CRM webhook rejected submission", response.status_code)

        logger.info(f"✅ CRM webhook accepted submission from {submission.email}")


class ResendMailer:
    """Sends auto-reply emails through the Resend API"""

    channel = "email"

    def __init__(
        self,
        api_key: str,
        sender: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.sender = sender
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    async def send(self, to: str, subject: str, text: str) -> Dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        body = {
            "from": self.sender,
            "to": to,
            "subject": subject,
            "text": text,
        }

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self.api_url, headers=headers, json=body, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise DispatchError(self.channel, f"Error sending auto-reply via Resend: {str(e)}") from e

        if not response.is_success:
            raise DispatchError(self.channel, "Resend rejected auto-reply", response.status_code)

        try:
            result = response.json()
        except ValueError:
            logger.warning("⚠️ Resend returned non-JSON; treating HTTP success as sent")
            result = {}

        logger.info(f"✅ Auto-reply sent to {to} (id: {result.get('id', 'N/A')})")
        return result


def get_crm_client(settings: Settings = Depends(get_settings)) -> Optional[CrmWebhookClient]:
    """CRM client if a webhook URL is configured, otherwise None"""
    if not settings.crm_webhook_url:
        return None
    return CrmWebhookClient(settings.crm_webhook_url, timeout=settings.outbound_timeout)


def get_auto_reply_mailer(settings: Settings = Depends(get_settings)) -> Optional[ResendMailer]:
    """Resend mailer if both API key and sender are configured, otherwise None"""
    if not settings.auto_reply_enabled:
        return None
    return ResendMailer(
        settings.resend_api_key,
        settings.resend_from,
        api_url=settings.resend_api_url,
        timeout=settings.outbound_timeout,
    )
