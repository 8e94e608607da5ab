"""
Contact form intake.

ContactForm holds the state the site's contact form shows to the user
(sending, sent, error message) and turns a raw form submission into a single
POST to the contact endpoint. It never retries; a failed send has to be
submitted again by the user.
"""

import httpx
import logging
from typing import Any, Dict, Mapping, Optional

from app.core.config import get_settings

logger = logging.getLogger(__name__)

# Hidden field real users never fill in
HONEYPOT_FIELD = "address"
FORM_FIELDS = ["name", "email", "phone", "topic", "message"]

BOT_DETECTED_MESSAGE = "Bot submission detected."
FALLBACK_ERROR_MESSAGE = "Something went wrong. Please try again later."
NETWORK_ERROR_MESSAGE = "Network error. Please try again later."


def read_attachment(attachment: Any) -> Optional[str]:
    """
    Read an attached file as text.

    Accepts raw bytes/str or any file-like object with read(). Returns None
    for a missing or empty attachment.
    """
    if attachment is None:
        return None

    content = attachment.read() if hasattr(attachment, "read") else attachment
    if not content:
        return None

    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return str(content)


class ContactForm:
    """Client-side state and submit logic for the contact form"""

    def __init__(
        self,
        endpoint_url: str = "/api/contact",
        client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint_url = endpoint_url
        self._client = client
        # Used only when no client is injected
        self.base_url = base_url or get_settings().site_url
        self._transport = transport
        self.values: Dict[str, Any] = {}
        self.is_submitting = False
        self.is_success = False
        self.error: Optional[str] = None

    def reset(self) -> None:
        """Clear the entered values"""
        self.values = {}

    def build_payload(self, form_input: Mapping[str, Any]) -> Dict[str, Any]:
        payload = {field: form_input.get(field) for field in FORM_FIELDS}
        file_text = read_attachment(form_input.get("file"))
        if file_text:
            payload["file"] = file_text
        return payload

    async def submit(self, form_input: Mapping[str, Any]) -> bool:
        """
        Submit the form.

        Args:
            form_input: Raw field values keyed by form field name, including
                the honeypot field and an optional "file" attachment

        Returns:
            bool: True if the contact endpoint accepted the submission
        """
        self.values = dict(form_input)
        self.is_submitting = True
        self.error = None

        try:
            if form_input.get(HONEYPOT_FIELD):
                logger.warning("Honeypot field filled in, submission dropped")
                self.error = BOT_DETECTED_MESSAGE
                return False

            payload = self.build_payload(form_input)

            try:
                response = await self._post(payload)
            except httpx.HTTPError as e:
                logger.error(f"❌ Contact form network error: {str(e)}")
                self.error = NETWORK_ERROR_MESSAGE
                return False

            if response.is_success:
                self.is_success = True
                self.reset()
                return True

            self.error = self._error_from(response)
            return False
        finally:
            self.is_submitting = False

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(self.endpoint_url, json=payload)
        async with httpx.AsyncClient(base_url=self.base_url, transport=self._transport) as client:
            return await client.post(self.endpoint_url, json=payload)

    @staticmethod
    def _error_from(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return FALLBACK_ERROR_MESSAGE
        if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
            return data["error"]
        return FALLBACK_ERROR_MESSAGE
