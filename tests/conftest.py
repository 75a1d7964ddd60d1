import json
import socket
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest


class RecordedRequest:
    def __init__(self, method, path, headers, body):
        self.method = method
        self.path = path
        self.headers = headers
        self.body = body

    @property
    def route(self):
        return self.path.split('?', 1)[0]


class FakeService:
    """Scripted HTTP service recording every request it receives.

    Responses are queued per (method, path); the last one is repeated.
    """

    def __init__(self):
        self.url = None
        self.requests = []
        self.responses = {}

    def respond(self, method, path, status=200, body=b'', headers=None, delay=0):
        headers = list(headers or [])
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode('utf-8')
            headers.append(('Content-Type', 'application/json'))
        elif isinstance(body, str):
            body = body.encode('utf-8')
        self.responses.setdefault((method, path), []).append(
            (status, headers, body, delay))

    def next_response(self, method, path):
        queue = self.responses.get((method, path))
        if not queue:
            return 404, [], b'', 0
        if len(queue) > 1:
            return queue.pop(0)
        return queue[0]

    @property
    def last(self):
        return self.requests[-1]


def make_handler(service):
    class Handler(BaseHTTPRequestHandler):
        def _handle(self):
            length = int(self.headers.get('Content-Length') or 0)
            body = self.rfile.read(length) if length else b''
            service.requests.append(
                RecordedRequest(self.command, self.path, self.headers, body))
            status, headers, data, delay = service.next_response(
                self.command, self.path.split('?', 1)[0])
            if delay:
                time.sleep(delay)
            self.send_response(status)
            for name, value in headers:
                self.send_header(name, value)
            self.send_header('Content-Length', str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        do_GET = do_POST = do_DELETE = do_PUT = _handle

        def log_message(self, format, *args):
            pass

    return Handler


@pytest.fixture
def service():
    fake = FakeService()
    server = ThreadingHTTPServer(('127.0.0.1', 0), make_handler(fake))
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    fake.url = 'http://127.0.0.1:%d' % server.server_address[1]
    yield fake
    server.shutdown()
    server.server_close()


@pytest.fixture
def closed_port_url():
    sock = socket.socket()
    sock.bind(('127.0.0.1', 0))
    port = sock.getsockname()[1]
    sock.close()
    return 'http://127.0.0.1:%d' % port
