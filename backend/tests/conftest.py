import os, sys, pytest
# Ensure backend directory is on path so 'upstac' and 'scripts' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from flask import Blueprint
from upstac import create_app

# Stand-ins for the host application's endpoints
auth_bp = Blueprint('auth', __name__)
documents_bp = Blueprint('documents', __name__)
testrequests_bp = Blueprint('testrequests', __name__)
labrequests_bp = Blueprint('labrequests', __name__)
users_bp = Blueprint('users', __name__)
public_bp = Blueprint('public', __name__)


@auth_bp.post('/login')
def login():
    """Login with username and password."""
    return {'token': 'x'}


@documents_bp.get('/<int:document_id>')
def get_document(document_id):
    return {'id': document_id}


@testrequests_bp.get('/')
def list_test_requests():
    """List test requests."""
    return {'data': []}


@testrequests_bp.route('/<int:request_id>', methods=['GET', 'PUT'])
def test_request(request_id):
    """Get or update a test request.

    Longer description that should not end up in the summary.
    """
    return {'id': request_id}


@labrequests_bp.put('/update/<uuid:request_id>')
def update_lab_result(request_id):
    """Update lab result."""
    return {'id': str(request_id)}


@users_bp.get('/me')
def me():
    """Current user."""
    return {}


@public_bp.get('/health')
def public_health():
    return {'status': 'ok'}


def register_host_blueprints(app):
    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(documents_bp, url_prefix='/documents')
    app.register_blueprint(testrequests_bp, url_prefix='/api/testrequests')
    app.register_blueprint(labrequests_bp, url_prefix='/api/labrequests')
    app.register_blueprint(users_bp, url_prefix='/users')
    app.register_blueprint(public_bp, url_prefix='/public')


@pytest.fixture(scope='session', autouse=True)
def app_instance():
    app = create_app({'TESTING': True, 'OPENAPI_SERVER_URL': None})
    register_host_blueprints(app)
    yield app

@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()

@pytest.fixture()
def spec(client):
    resp = client.get('/openapi.json')
    assert resp.status_code == 200
    return resp.get_json()
