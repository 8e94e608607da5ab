"""
Tests for the sitemap and 404 handling.
"""
from fastapi import status

from app.api.endpoints.site import build_sitemap


def test_sitemap_lists_public_pages(client):
    response = client.get("/sitemap.xml")

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"].startswith("application/xml")
    assert "<loc>https://lumimaid.com/</loc>" in response.text
    assert "<loc>https://lumimaid.com/contact</loc>" in response.text
    assert response.text.count("<lastmod>") == 2


def test_build_sitemap_trims_trailing_slash():
    xml = build_sitemap("https://example.com/", "2026-01-01T00:00:00+00:00")

    assert "<loc>https://example.com/contact</loc>" in xml
    assert "<lastmod>2026-01-01T00:00:00+00:00</lastmod>" in xml


def test_unknown_page_returns_friendly_404(client):
    response = client.get("/pricing")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {
        "error": "Sorry, the page you were looking for could not be found.",
        "links": {"home": "/", "contact": "/contact"},
    }


def test_other_http_errors_keep_default_shape(client):
    response = client.get("/api/contact")

    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert response.json() == {"detail": "Method Not Allowed"}
