"""
Triggers Package.

Azure Functions HTTP trigger implementations.

HTTP Endpoints:
    /api/health: System health check
    /api/grid-assets: Grid asset Lifecycle API

Exports:
    Base classes for HTTP endpoints
"""

# Only import base classes to avoid initialization at import time
# Trigger instances are built by function_app.py
from .http_base import BaseHttpTrigger, SystemMonitoringTrigger

__all__ = [
    'BaseHttpTrigger',
    'SystemMonitoringTrigger',
]
