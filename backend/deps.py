"""FastAPI dependencies."""

from fastapi import Request

from siteforge.state import AppState


def get_state(request: Request) -> AppState:
    """Process-scoped services built in the app lifespan."""
    return request.app.state.services
