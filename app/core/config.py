from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # CRM webhook - forwarding is disabled when unset
    crm_webhook_url: Optional[str] = None

    # Resend auto-reply - both key and verified sender are required
    resend_api_key: Optional[str] = None
    resend_from: Optional[str] = None
    resend_api_url: str = "https://api.resend.com/emails"

    # Applies to every outbound webhook/email call
    outbound_timeout: float = 15.0

    # Business details used in the auto-reply and sitemap
    business_name: str = "LumiMaid"
    business_phone: str = "(612) 888-7916"
    site_url: str = "https://lumimaid.com"

    # CORS settings
    allowed_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def auto_reply_enabled(self) -> bool:
        """Auto-reply needs both an API key and a verified sender"""
        return bool(self.resend_api_key and self.resend_from)

@lru_cache
def get_settings():
    return Settings()
