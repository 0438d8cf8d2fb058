import logging

from flask import Flask
from flask_cors import CORS

import config
from routes import init_routes


def create_app(config_overrides=None, user_service=None, overlay_host=None):
    """Application factory pattern for better testing and configuration.
    
    Args:
        config_overrides: Optional Flask config values applied after defaults.
        user_service: Optional UserService override (tests inject fakes here).
        overlay_host: Optional OverlayHost override (defaults to the global host).
    """
    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.SECRET_KEY
    if config_overrides:
        app.config.update(config_overrides)
    
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    
    # Enable CORS for all routes
    CORS(app)
    
    # Initialize routes
    init_routes(app, user_service=user_service, overlay_host=overlay_host)
    
    logging.getLogger(__name__).info(f"User admin ready against {config.USERS_API_URL}")
    return app

# Create the app instance
app = create_app()

# === Main ===
if __name__ == "__main__":
    import os
    debug_mode = os.getenv('FLASK_ENV') != 'production'
    app.run(host='0.0.0.0', port=5001, debug=debug_mode)
