"""
Centralized API Dependencies
"""
from src.operator_server.api.security import get_api_key
from src.operator_server.state import AppState, get_app_state

__all__ = ["get_app_state", "get_api_key", "AppState"]
