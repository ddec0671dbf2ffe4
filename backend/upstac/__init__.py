from flask import Flask
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import os

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


def create_app(config: Optional[Dict[str, Any]] = None):
    app = Flask(__name__)

    app.config['API_DOCS_ENABLED'] = _env_flag('API_DOCS_ENABLED', 'true')
    app.config['API_DOCS_URL'] = os.getenv('API_DOCS_URL', '/docs')
    app.config['OPENAPI_URL'] = os.getenv('OPENAPI_URL', '/openapi.json')
    app.config['OPENAPI_SERVER_URL'] = os.getenv('OPENAPI_SERVER_URL') or None

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            payload = {
                'error': {
                    'status': e.code,
                    'title': e.name,
                    'detail': e.description,
                }
            }
            return payload, e.code
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    # Descriptor is built once here; host blueprints registered later are still picked up
    from .docs import register_api_docs
    register_api_docs(app)

    return app
