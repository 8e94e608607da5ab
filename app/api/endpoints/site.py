from fastapi import APIRouter, Depends
from fastapi.responses import Response
from datetime import datetime, timezone
from xml.sax.saxutils import escape

from app.core.config import Settings, get_settings

router = APIRouter()

SITEMAP_PATHS = ["/", "/contact"]


def build_sitemap(site_url: str, lastmod: str) -> str:
    """Render the sitemap XML for the public pages"""
    base = site_url.rstrip("/")
    entries = "".join(
        f"<url><loc>{escape(base + path)}</loc><lastmod>{lastmod}</lastmod></url>"
        for path in SITEMAP_PATHS
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
        f"{entries}"
        "</urlset>"
    )


@router.get("/sitemap.xml")
def sitemap(settings: Settings = Depends(get_settings)):
    lastmod = datetime.now(timezone.utc).isoformat()
    return Response(content=build_sitemap(settings.site_url, lastmod), media_type="application/xml")
