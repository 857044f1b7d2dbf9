"""Verified identity extraction.

The identity provider sits in front of the application. The authenticating
proxy verifies the caller's token and forwards the provider subject in the
configured header; requests without it are anonymous.
"""
from fastapi import Request

from app.core.config import settings


def get_subject(request: Request) -> str | None:
    """Dependency returning the verified subject of the caller, if any."""
    subject = request.headers.get(settings.identity_header, "").strip()
    return subject or None
