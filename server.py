# server.py
"""
Browser Operator Server Entry Point
Delegates to operator_server package.
"""
import os

from src.core.config import LOG_DIR, config_manager
from src.core.system.logging import cleanup_old_logs, setup_logging
from src.operator_server.app_factory import create_app

config_manager.load_config()
_settings = config_manager.settings

_secrets = [
    s.get_secret_value()
    for s in (_settings.browserbase.api_key, _settings.llm.api_key, _settings.server.api_key)
    if s is not None
]
_secrets.extend(v for v in (os.getenv("BROWSERBASE_API_KEY"), os.getenv("OPENAI_API_KEY")) if v)

setup_logging(
    log_dir=LOG_DIR,
    level=_settings.logging.level.upper(),
    log_to_file=_settings.logging.log_to_file,
    redact_secrets=_settings.logging.redact_secrets,
    extra_secrets=_secrets,
)

# Clean up old log files on startup
cleanup_old_logs(LOG_DIR, max_age_days=_settings.logging.max_age_days)

app = create_app()

if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", str(_settings.server.port)))
    uvicorn.run(app, host=_settings.server.host, port=port)
