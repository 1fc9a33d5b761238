from .loader import (
    config_manager,
    settings,
    LOG_DIR,
    PROJECT_ROOT,
    resolve_config_path,
)
from .schema import (
    OperatorSettings,
    AppConfig,
    ServerConfig,
    ChatHistoryConfig,
    BrowserbaseConfig,
    ViewportConfig,
    LLMConfig,
    LoggingConfig,
)

__all__ = [
    "config_manager",
    "settings",
    "LOG_DIR",
    "PROJECT_ROOT",
    "resolve_config_path",
    "OperatorSettings",
    "AppConfig",
    "ServerConfig",
    "ChatHistoryConfig",
    "BrowserbaseConfig",
    "ViewportConfig",
    "LLMConfig",
    "LoggingConfig",
]
