"""Run the YouthSync API.

    APP_ENV=production python app.py
"""

import importlib

from config import get_settings_module

from src.youthsync.youthsync.core.constants import DEFAULT_HOST, DEFAULT_PORT
from src.youthsync.youthsync.main import create_app

app = create_app()

if __name__ == "__main__":
    settings = importlib.import_module(get_settings_module())
    app.run(
        host=getattr(settings, "HOST", DEFAULT_HOST),
        port=int(getattr(settings, "PORT", DEFAULT_PORT)),
        debug=bool(getattr(settings, "DEBUG", False)),
    )
