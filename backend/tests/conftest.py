import io
import json
import os
import sys
import pytest

# Ensure the backend root (containing the `scoreproof` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from scoreproof import create_app, db, socketio


def fake_verifier(proof):
    """Stands in for the zk verifier: trusts the proof's own id and score."""
    if proof.get('explode'):
        raise RuntimeError('verifier crashed')
    return proof.get('proofId'), proof.get('score')


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = ['*']
    MAX_CONTENT_LENGTH = 64 * 1024
    PROOF_VERIFIER = fake_verifier
    VERIFIER_COMMAND = None
    VERIFIER_TIMEOUT_SEC = 10
    AUTO_INIT_DB = True
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass


@pytest.fixture()
def submit(client):
    """Upload a proof file; dicts are JSON-encoded, str/bytes sent as-is."""
    def _submit(payload, filename='proof.json'):
        if isinstance(payload, dict):
            payload = json.dumps(payload)
        if isinstance(payload, str):
            payload = payload.encode('utf-8')
        return client.post(
            '/scores/proof',
            data={'proof': (io.BytesIO(payload), filename)},
            content_type='multipart/form-data',
        )
    return _submit
