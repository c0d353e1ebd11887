"""
API Server

Run this to start the API:
    python server.py

Then test with:
    curl http://localhost:8082/
    curl http://localhost:8082/health
"""

import json

from flask import Flask
from werkzeug.exceptions import NotFound
from werkzeug.serving import BaseWSGIServer, make_server

HOST = '0.0.0.0'
PORT = 8082

app = Flask(__name__)


def json_response(payload):
    """Compact JSON body, no trailing newline."""
    body = json.dumps(payload, separators=(',', ':'))
    return app.response_class(body, mimetype='application/json')


@app.route('/', methods=['GET'])
def index():
    return json_response({"message": "Hola desde el API (Node)"})


@app.route('/health', methods=['GET'])
def health():
    return json_response({"status": "ok"})


@app.errorhandler(405)
def method_not_allowed(error):
    # Unmatched methods fall through to not-found, same as unknown paths.
    return NotFound().get_response()


def create_server(host: str = HOST, port: int = PORT) -> BaseWSGIServer:
    """Bind the listener and announce it. Exits with status 1 if the port is taken."""
    server = make_server(host, port, app, threaded=True)
    print(f"API escuchando en http://{host}:{server.server_port}", flush=True)
    return server


def main():
    create_server().serve_forever()


if __name__ == '__main__':
    main()
