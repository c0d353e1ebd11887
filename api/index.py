"""
Root Endpoint
Serverless Function

Greets callers of the API root.
"""

from http.server import BaseHTTPRequestHandler
import json


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        body = json.dumps({"message": "Hola desde el API (Node)"}, separators=(',', ':')).encode('utf-8')

        self.send_response(200)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_POST(self):
        self.send_error(404)

    do_PUT = do_POST
    do_DELETE = do_POST
    do_PATCH = do_POST
