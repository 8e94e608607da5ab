#run it with uvicorn app.main:app --reload
from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv
from app.api.api_router import api_router
from app.api.endpoints import site
from app.core.config import Settings, get_settings
import logging

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)
settings = get_settings()

app = FastAPI(title="LumiMaid Website Backend", version="1.0.0")

# CORS setup (set ALLOWED_ORIGINS to the site's domain in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
app.include_router(site.router, tags=["Site"])

NOT_FOUND_MESSAGE = "Sorry, the page you were looking for could not be found."


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Friendly 404 pointing back to the home and contact pages"""
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)
    return JSONResponse(
        status_code=404,
        content={
            "error": NOT_FOUND_MESSAGE,
            "links": {"home": "/", "contact": "/contact"},
        },
    )


@app.get("/api/health")
def health_check(current: Settings = Depends(get_settings)):
    """
    Health check endpoint.

    Reports which optional integrations are configured, never their values.
    """
    return {
        "status": "ok",
        "integrations": {
            "crm_webhook": bool(current.crm_webhook_url),
            "auto_reply": current.auto_reply_enabled,
        },
    }

logger.info(
    f"🚀 {settings.business_name} backend ready "
    f"(crm_webhook={bool(settings.crm_webhook_url)}, auto_reply={settings.auto_reply_enabled})"
)
