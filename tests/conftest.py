"""Shared fixtures for the sum checker tests."""

import threading

import pytest
from flask import Flask, jsonify
from werkzeug.serving import make_server


def create_target_app():
    """Create a small Flask app standing in for the target URL."""
    app = Flask(__name__)

    @app.route('/health', methods=['GET'])
    def health_check():
        return jsonify({'status': 'healthy'}), 200

    @app.route('/missing', methods=['GET'])
    def missing():
        return jsonify({'error': 'not found'}), 404

    @app.route('/broken', methods=['GET'])
    def broken():
        return jsonify({'error': 'server error'}), 500

    return app


@pytest.fixture(scope="session")
def target_server():
    """Serve the target app on an ephemeral port and yield its base URL."""
    server = make_server('127.0.0.1', 0, create_target_app())
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}"
    finally:
        server.shutdown()
        thread.join(timeout=5)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure variables loaded from .env files do not leak between tests."""
    for name in ("TARGET_URL", "LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
