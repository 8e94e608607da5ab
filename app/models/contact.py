from pydantic import BaseModel, field_validator
from typing import Any, Optional

# Topics offered by the contact form's select box
CONTACT_TOPICS = ["General", "Quote", "Hiring", "Partnership"]
DEFAULT_TOPIC = "General"

class ContactSubmission(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    topic: Optional[str] = None
    message: Optional[str] = None
    file: Optional[str] = None  # Uploaded file contents decoded as text

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> Optional[str]:
        """Empty non-string values count as absent, others become text"""
        if value is None or isinstance(value, str):
            return value
        if not value:
            return None
        return str(value)

    @property
    def topic_or_default(self) -> str:
        return self.topic or DEFAULT_TOPIC
