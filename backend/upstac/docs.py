"""Routes serving the rendered OpenAPI document and a Swagger UI page."""
from typing import Optional

from flask import Flask, current_app, jsonify, render_template_string, url_for

from .openapi_builder import build_openapi_spec
from .openapi_parts.descriptor import ApiDescriptor, build_descriptor

EXTENSION_KEY = 'upstac_docs'

SWAGGER_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
  <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/swagger-ui-dist@5/swagger-ui.css">
  <style>
    body { margin: 0; background: #fafafa; }
  </style>
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://cdn.jsdelivr.net/npm/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
  <script>
    window.onload = () => {
      SwaggerUIBundle({
        url: "{{ spec_url }}",
        dom_id: '#swagger-ui',
        deepLinking: true,
        persistAuthorization: true
      });
    };
  </script>
</body>
</html>
"""


def get_descriptor(app: Flask) -> ApiDescriptor:
    return app.extensions[EXTENSION_KEY]['descriptor']


def get_openapi_spec(app: Flask) -> dict:
    """Render the spec on first use and keep it for the life of the app."""
    state = app.extensions[EXTENSION_KEY]
    if state['spec'] is None:
        state['spec'] = build_openapi_spec(
            app,
            descriptor=state['descriptor'],
            server_url=app.config.get('OPENAPI_SERVER_URL'),
        )
    return state['spec']


def register_api_docs(app: Flask, descriptor: Optional[ApiDescriptor] = None) -> None:
    """Attach the descriptor to ``app`` and expose the docs endpoints."""
    app.extensions[EXTENSION_KEY] = {'descriptor': descriptor or build_descriptor(), 'spec': None}

    if not app.config.get('API_DOCS_ENABLED', True):
        app.logger.info('API documentation disabled')
        return

    spec_url = app.config.get('OPENAPI_URL', '/openapi.json')
    docs_url = app.config.get('API_DOCS_URL', '/docs')

    def openapi_spec():
        return jsonify(get_openapi_spec(current_app))

    def docs_index():
        title = get_descriptor(current_app).metadata.title
        return render_template_string(SWAGGER_TEMPLATE, title=title, spec_url=url_for('openapi_spec'))

    app.add_url_rule(spec_url, 'openapi_spec', openapi_spec)
    app.add_url_rule(docs_url, 'docs_index', docs_index)
    app.logger.info('API documentation served at %s (spec %s)', docs_url, spec_url)


__all__ = ['register_api_docs', 'get_descriptor', 'get_openapi_spec', 'EXTENSION_KEY']
