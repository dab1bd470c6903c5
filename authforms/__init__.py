"""Flask application factory for credential form validation."""

import logging
import os

from flask import Flask
from dotenv import load_dotenv

from authforms.config import config

# Load environment variables from .env file
load_dotenv()


def create_app(config_override=None):
    """Create and configure the Flask application.
    
    Args:
        config_override: Optional configuration dictionary to override defaults.
        
    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)
    
    # Load configuration from environment or default
    env = os.environ.get('FLASK_ENV', 'development')
    app.config.from_object(config.get(env, config['default']))
    
    # Override with provided config
    if config_override:
        app.config.update(config_override)
    
    logging.getLogger(__name__).setLevel(app.config['LOG_LEVEL'])
    app.logger.setLevel(app.config['LOG_LEVEL'])
    
    # Register blueprints
    from authforms.routes import credentials
    app.register_blueprint(credentials.bp)
    
    return app
