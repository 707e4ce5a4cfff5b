"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from rental_store.rendering.registry import RendererRegistry


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_registry(request: Request) -> RendererRegistry:
    """Provide the renderer registry configured at app startup"""
    return request.app.state.renderer_registry
