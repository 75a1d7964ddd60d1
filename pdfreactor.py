# Copyright (C) 2024 web2print contributors
#
# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation
# files (the "Software"), to deal in the Software without
# restriction, including without limitation the rights to use,
# copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES
# OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY,
# WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.

import argparse
import http.client
import json
import logging
import os
import re
import socket
import ssl
import sys
import time
from urllib.parse import quote, urlsplit

__version__ = '12.0.0'

logger = logging.getLogger(__name__)

DEFAULT_URL = os.environ.get('PDFREACTOR_URL', 'http://localhost:9423/service/rest')
CLIENT_NAME = 'PYTHON'
USER_AGENT = 'PDFreactor Python API v12'
CHUNK_SIZE = 16384

ASYNC_503 = 'Asynchronous conversions are unavailable.'
ERROR_400 = 'Invalid client data.'
ERROR_401 = 'Unauthorized.'
ERROR_404 = 'Document with the given ID was not found.'
ERROR_413 = 'The configuration is too large to process.'
ERROR_429 = 'Too many requests made to the PDFreactor Web Service.'
ERROR_503 = 'PDFreactor Web Service is unavailable.'
UNKNOWN_ERROR = 'Unknown PDFreactor Web Service error'
NO_CONVERSION = 'No conversion was triggered.'

# header names a caller may not override through the connection settings
RESERVED_HEADERS = ('content-type', 'content-length', 'range')

# ==================
# === exceptions ===
# ==================

class PDFreactorWebserviceException(Exception):
    """Thrown by the PDFreactor Web Service client.

    It has several sub classes, all indicating different issues. To react
    to specific problems, catch the appropriate sub class.
    """
    def __init__(self, message=None):
        self.message = message or UNKNOWN_ERROR
        self.result = None
        super().__init__(self.message)

    def __str__(self):
        return self.message

    def getMessage(self):
        return self.message

    def getResult(self):
        return self.result


class ServerException(PDFreactorWebserviceException):
    """Produced by the PDFreactor Web Service.

    The service is running but the request could not be processed. The
    'X-RO-Error-ID' response header selects the sub class; without it the
    exception has this generic type.
    """
    def __init__(self, error_id=None, client_message=None,
                 server_message=None, result=None):
        if server_message is None and isinstance(result, dict):
            server_message = result.get('error')
        messages = [m for m in (client_message, server_message) if m]
        super().__init__(' '.join(messages))
        self.errorId = error_id
        self.client_message = client_message
        self.server_message = server_message
        self.result = result

    def getErrorId(self):
        return self.errorId


class ClientException(PDFreactorWebserviceException):
    """Produced by the client: the service could not be reached or understood."""
    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause

    def getCause(self):
        return self.cause


class AsyncUnavailableException(ServerException):
    """Asynchronous conversions are not available in this PDFreactor Web Service."""


class BadRequestException(ServerException):
    """The requested page number is below 0 or exceeds the number of pages."""


class ConversionAbortedException(ServerException):
    """The configuration is valid but the conversion could not be completed."""


class ConversionFailureException(ServerException):
    """The configuration could not be processed and should be re-checked."""


class DocumentNotFoundException(ServerException):
    """The conversion does not exist."""


class InvalidClientException(ServerException):
    """The client version is outdated and no longer supported."""


class InvalidConfigurationException(ServerException):
    """The supplied configuration was not valid."""


class NoConfigurationException(ServerException):
    """No configuration was supplied to the operation."""


class NoInputDocumentException(ServerException):
    """No input document was specified in the configuration."""


class NotAcceptableException(ServerException):
    """No result with a media type matching the request could be produced."""


class ServiceUnavailableException(ServerException):
    """The service is reachable but not able to perform the operation."""


class UnauthorizedException(ServerException):
    """The client failed an authorization check, e.g. an invalid API key."""


class UnprocessableConfigurationException(ServerException):
    """The configuration was accepted but could not be converted."""


class UnprocessableInputException(ServerException):
    """The input data was accepted but could not be processed."""


class UnreachableServiceException(ClientException):
    """The PDFreactor Web Service could not be reached."""


class InvalidServiceException(ClientException):
    """A response was received but it does not come from PDFreactor."""


class ClientTimeoutException(ClientException):
    """The request timed out. Consider asynchronous conversions."""


SERVER_EXCEPTIONS = {
    'asyncUnavailable': AsyncUnavailableException,
    'badRequest': BadRequestException,
    'conversionAborted': ConversionAbortedException,
    'conversionFailure': ConversionFailureException,
    'documentNotFound': DocumentNotFoundException,
    'invalidClient': InvalidClientException,
    'invalidConfiguration': InvalidConfigurationException,
    'noConfiguration': NoConfigurationException,
    'noInputDocument': NoInputDocumentException,
    'notAcceptable': NotAcceptableException,
    'serviceUnavailable': ServiceUnavailableException,
    'unauthorized': UnauthorizedException,
    'unprocessableConfiguration': UnprocessableConfigurationException,
    'unprocessableInput': UnprocessableInputException,
}

# Expected error statuses per operation, mapped to the client message.
# A status missing from the table produces an anonymous ServerException.
CONVERT_ERRORS = {
    422: None,
    400: ERROR_400,
    401: ERROR_401,
    413: ERROR_413,
    429: ERROR_429,
    500: None,
    503: ERROR_503,
}
ASYNC_ERRORS = dict(CONVERT_ERRORS)
ASYNC_ERRORS[503] = ASYNC_503
DOCUMENT_ERRORS = {
    422: None,
    404: ERROR_404,
    401: ERROR_401,
    429: ERROR_429,
    503: ERROR_503,
}
PAGE_ERRORS = dict(DOCUMENT_ERRORS)
PAGE_ERRORS[400] = ERROR_400
DELETE_ERRORS = {
    404: ERROR_404,
    401: ERROR_401,
    429: ERROR_429,
    503: ERROR_503,
}
SERVICE_ERRORS = {
    401: ERROR_401,
    429: ERROR_429,
    503: ERROR_503,
}

# ===============
# === helpers ===
# ===============

def gen_headers(connection_settings):
    headers = (connection_settings or {}).get('headers') or {}
    for name, value in headers.items():
        if name.lower() not in RESERVED_HEADERS:
            yield name, str(value)

def encode_cookies(connection_settings):
    cookies = (connection_settings or {}).get('cookies') or {}
    return '; '.join('%s=%s' % (name, value) for name, value in cookies.items())

def parse_set_cookie(value):
    pair = value.split(';', 1)[0]
    name, _, cookie_value = pair.partition('=')
    return name.strip(), cookie_value.strip()

def document_id_from_location(location):
    return location[location.rfind('/') + 1:].strip()

def read_payload(asset_package):
    if hasattr(asset_package, 'read'):
        return asset_package.read()
    return asset_package


class Response:
    """What the client keeps of a single HTTP exchange."""

    def __init__(self, status, error_mode, data=None, error=None,
                 error_id=None, document_id=None):
        self.status = status
        self.error_mode = error_mode
        self.data = data
        self.error = error
        self.error_id = error_id
        self.document_id = document_id

# ==============
# === client ===
# ==============

class PDFreactor:
    """Client for the PDFreactor Web Service REST API.

    Configurations are plain dicts which are serialized to JSON. Results
    of JSON operations are returned as decoded dicts.
    """

    VERSION = 12

    def __init__(self, url=None):
        self.url = url or DEFAULT_URL
        if self.url.endswith('/'):
            self.url = self.url[:-1]
        self.apiKey = None
        self.timeout = 300

    def setApiKey(self, api_key):
        self.apiKey = api_key
        return self

    def setTimeout(self, timeout):
        self.timeout = timeout
        return self

    def convert(self, config, connection_settings=None):
        """Converts the configuration into PDF or image.

        Returns the result dict containing the converted document (base64
        encoded) and its metadata.
        """
        response = self._request(
            'convert.json', CONVERT_ERRORS, connection_settings,
            payload=self._prepare_configuration(config))
        return self._decode(response)

    def convertAsBinary(self, config, out_stream=None, connection_settings=None):
        """Converts the configuration into PDF or image.

        out_stream -- an object having method 'write(data)'; if None the
                      converted document is returned as bytes.
        """
        out_stream, connection_settings = self._split_stream(
            out_stream, connection_settings)
        response = self._request(
            'convert.bin', CONVERT_ERRORS, connection_settings,
            payload=self._prepare_configuration(config), text_error=True,
            out_stream=out_stream)
        if out_stream is None:
            return response.data

    def convertAsync(self, config, connection_settings=None):
        """Starts an asynchronous conversion and returns the document ID.

        Cookies set by the service are stored in connection_settings so
        that subsequent calls reach the same node.
        """
        response = self._request(
            'convert/async.json', ASYNC_ERRORS, connection_settings,
            payload=self._prepare_configuration(config), is_async=True)
        logger.info('Started asynchronous conversion %s', response.document_id)
        return response.document_id

    def getProgress(self, document_id, connection_settings=None):
        self._check_document_id(document_id)
        response = self._request(
            'progress/%s.json' % document_id, DOCUMENT_ERRORS,
            connection_settings)
        return self._decode(response)

    def getDocument(self, document_id, connection_settings=None):
        """Retrieves the asynchronously converted document with the given ID."""
        self._check_document_id(document_id)
        response = self._request(
            'document/%s.json' % document_id, DOCUMENT_ERRORS,
            connection_settings)
        return self._decode(response)

    def getDocumentAsBinary(self, document_id, out_stream=None,
                            connection_settings=None):
        self._check_document_id(document_id)
        out_stream, connection_settings = self._split_stream(
            out_stream, connection_settings)
        response = self._request(
            'document/%s.bin' % document_id, DOCUMENT_ERRORS,
            connection_settings, text_error=True, out_stream=out_stream)
        if out_stream is None:
            return response.data

    def getDocumentMetadata(self, document_id, connection_settings=None):
        self._check_document_id(document_id)
        response = self._request(
            'document/metadata/%s.json' % document_id, DOCUMENT_ERRORS,
            connection_settings)
        return self._decode(response)

    def convertAssetPackage(self, asset_package, connection_settings=None):
        """Converts a ZIP asset package (bytes or a binary stream)."""
        response = self._request(
            'convert.json', CONVERT_ERRORS, connection_settings,
            payload=read_payload(asset_package), zip=True)
        return self._decode(response)

    def convertAssetPackageAsBinary(self, asset_package, out_stream=None,
                                    connection_settings=None):
        out_stream, connection_settings = self._split_stream(
            out_stream, connection_settings)
        response = self._request(
            'convert.bin', CONVERT_ERRORS, connection_settings,
            payload=read_payload(asset_package), zip=True, text_error=True,
            out_stream=out_stream)
        if out_stream is None:
            return response.data

    def convertAssetPackageAsync(self, asset_package, connection_settings=None):
        response = self._request(
            'convert/async.json', ASYNC_ERRORS, connection_settings,
            payload=read_payload(asset_package), zip=True, is_async=True)
        logger.info('Started asynchronous conversion %s', response.document_id)
        return response.document_id

    def getDocumentPageAsBinary(self, document_id, page_number, out_stream=None,
                                connection_settings=None):
        """Retrieves one page of an asynchronously converted multi-image."""
        self._check_document_id(document_id)
        out_stream, connection_settings = self._split_stream(
            out_stream, connection_settings)
        response = self._request(
            'document/%s/%s.bin' % (document_id, page_number), PAGE_ERRORS,
            connection_settings, text_error=True, out_stream=out_stream)
        if out_stream is None:
            return response.data

    def deleteDocument(self, document_id, connection_settings=None):
        """Deletes the document. A conversion still running is terminated."""
        self._check_document_id(document_id)
        self._request(
            'document/%s.json' % document_id, DELETE_ERRORS,
            connection_settings, method='DELETE')

    def getVersion(self, connection_settings=None):
        response = self._request('version.json', SERVICE_ERRORS,
                                 connection_settings)
        return self._decode(response)

    def getStatus(self, connection_settings=None):
        """Raises if the service is not available and functional."""
        self._request('status.json', SERVICE_ERRORS, connection_settings)

    def getDocumentUrl(self, document_id, page_number=None):
        if document_id is None:
            return None
        if page_number is not None:
            return '%s/document/%s/%s' % (self.url, document_id, page_number)
        return '%s/document/%s' % (self.url, document_id)

    def getProgressUrl(self, document_id):
        if document_id is None:
            return None
        return '%s/progress/%s' % (self.url, document_id)

    def waitForDocument(self, document_id, connection_settings=None,
                        interval=1, timeout=None):
        """Polls the progress of an asynchronous conversion until it finishes.

        Returns the final progress dict. Raises ClientTimeoutException if
        the conversion is not finished after 'timeout' seconds.
        """
        started = time.time()
        while True:
            progress = self.getProgress(document_id, connection_settings)
            if progress.get('finished'):
                return progress
            if timeout is not None and time.time() - started >= timeout:
                raise ClientTimeoutException(
                    'Conversion %s did not finish within %s seconds.'
                    % (document_id, timeout))
            logger.info('Conversion %s at %s%%', document_id,
                        progress.get('progress', 0))
            time.sleep(interval)

    # ----------------------------------------------------------------------
    #
    #                       Private stuff
    #

    def _prepare_configuration(self, config):
        if config is None:
            return None
        config = dict(config)
        config['clientName'] = CLIENT_NAME
        config['clientVersion'] = self.VERSION
        return config

    def _check_document_id(self, document_id):
        if document_id is None:
            raise ClientException(NO_CONVERSION)

    def _split_stream(self, out_stream, connection_settings):
        # settings passed in place of the stream
        if isinstance(out_stream, dict):
            return None, out_stream
        return out_stream, connection_settings

    def _decode(self, response):
        try:
            return json.loads(response.data.decode('utf-8'))
        except ValueError as err:
            raise InvalidServiceException(
                'Invalid response from PDFreactor Web Service at %s.'
                % self.url, err)

    def _request(self, path, status_errors, connection_settings=None,
                 payload=None, zip=False, method=None, text_error=False,
                 is_async=False, out_stream=None):
        if payload:
            if zip:
                body, content_type = payload, 'application/zip'
            else:
                body = json.dumps(payload).encode('utf-8')
                content_type = 'application/json'
        else:
            body = content_type = None
        if method is None:
            method = 'POST' if body is not None else 'GET'

        response = self._exec_request(
            method, path, connection_settings, body, content_type,
            text_error, is_async, out_stream)

        if response.error_mode:
            if response.status in status_errors:
                raise self._create_server_exception(
                    response, status_errors[response.status])
            raise ServerException(
                None, 'PDFreactor Web Service error (status %d).'
                % response.status)
        return response

    def _create_connection(self, parts):
        if parts.scheme == 'https':
            return http.client.HTTPSConnection(
                parts.hostname, parts.port, timeout=self.timeout)
        return http.client.HTTPConnection(
            parts.hostname, parts.port, timeout=self.timeout)

    def _exec_request(self, method, path, connection_settings, body,
                      content_type, text_error, is_async, out_stream):
        url = self.url + '/' + path
        logger.debug('%s %s', method, url)
        if self.apiKey is not None:
            url += '?apiKey=' + quote(str(self.apiKey), safe='')
        parts = urlsplit(url)
        selector = parts.path
        if parts.query:
            selector += '?' + parts.query

        conn = None
        try:
            conn = self._create_connection(parts)
            conn.putrequest(method, selector)
            conn.putheader('User-Agent', USER_AGENT)
            conn.putheader('X-RO-User-Agent', USER_AGENT)
            for name, value in gen_headers(connection_settings):
                conn.putheader(name, value)
            cookie = encode_cookies(connection_settings)
            if cookie:
                conn.putheader('Cookie', cookie)
            if body is not None:
                conn.putheader('Content-Type', content_type)
                conn.putheader('Content-Length', str(len(body)))
            conn.endheaders()
            if body is not None:
                conn.send(body)
            response = conn.getresponse()
            return self._read_response(
                response, connection_settings, text_error, is_async, out_stream)
        except socket.timeout as err:
            raise ClientTimeoutException(
                'Request to PDFreactor Web Service at %s timed out after %s '
                'seconds.' % (self.url, self.timeout), err)
        except (http.client.HTTPException, ssl.SSLError, socket.error) as err:
            raise UnreachableServiceException(
                'Error connecting to PDFreactor Web Service at %s. Please make '
                'sure the PDFreactor Web Service is installed and running '
                '(Error: %s)' % (self.url, err), err)
        finally:
            if conn is not None:
                conn.close()

    def _read_response(self, response, connection_settings, text_error,
                       is_async, out_stream):
        status = response.status
        error_mode = not 200 <= status <= 204
        error_id = response.getheader('X-RO-Error-ID') if error_mode else None

        document_id = None
        if is_async:
            location = response.getheader('Location')
            if location:
                document_id = document_id_from_location(location)
            if connection_settings is not None:
                cookies = connection_settings.get('cookies') or {}
                for name, value in response.getheaders():
                    if name.lower() == 'set-cookie':
                        cookie_name, cookie_value = parse_set_cookie(value)
                        cookies[cookie_name] = cookie_value
                connection_settings['cookies'] = cookies

        if out_stream is not None and not error_mode:
            while True:
                data = response.read(CHUNK_SIZE)
                if data:
                    out_stream.write(data)
                else:
                    break
            return Response(status, error_mode, document_id=document_id)

        data = response.read()
        error = None
        if error_mode:
            logger.debug('PDFreactor Web Service returned status %d (%s)',
                         status, error_id)
            if text_error and data:
                error = data.decode('utf-8', 'replace')
                data = None
        return Response(status, error_mode, data, error, error_id, document_id)

    def _create_server_exception(self, response, client_message=None):
        result = None
        if response.data:
            try:
                result = json.loads(response.data.decode('utf-8'))
            except ValueError:
                result = None
        exception_type = SERVER_EXCEPTIONS.get(response.error_id, ServerException)
        return exception_type(response.error_id, client_message,
                              response.error, result)

# =================
# === constants ===
# =================

class CallbackType:
    """An enum containing callback type constants."""
    FINISH = "FINISH"
    PROGRESS = "PROGRESS"
    START = "START"


class Cleanup:
    """An enum containing cleanup constants."""
    CYBERNEKO = "CYBERNEKO"
    JTIDY = "JTIDY"
    NONE = "NONE"
    TAGSOUP = "TAGSOUP"


class ColorSpace:
    """An enum containing color space constants."""
    CMYK = "CMYK"
    RGB = "RGB"


class Conformance:
    """An enum containing conformance constants."""
    PDF = "PDF"
    PDFA1A = "PDFA1A"
    PDFA1A_PDFUA1 = "PDFA1A_PDFUA1"
    PDFA1B = "PDFA1B"
    PDFA2A = "PDFA2A"
    PDFA2A_PDFUA1 = "PDFA2A_PDFUA1"
    PDFA2B = "PDFA2B"
    PDFA2U = "PDFA2U"
    PDFA3A = "PDFA3A"
    PDFA3A_PDFUA1 = "PDFA3A_PDFUA1"
    PDFA3B = "PDFA3B"
    PDFA3U = "PDFA3U"
    PDFUA1 = "PDFUA1"
    PDFX1A_2001 = "PDFX1A_2001"
    PDFX1A_2003 = "PDFX1A_2003"
    PDFX3_2002 = "PDFX3_2002"
    PDFX3_2003 = "PDFX3_2003"
    PDFX4 = "PDFX4"
    PDFX4P = "PDFX4P"


class ContentType:
    """An enum containing content type constants."""
    BINARY = "BINARY"
    BMP = "BMP"
    GIF = "GIF"
    HTML = "HTML"
    JPEG = "JPEG"
    JSON = "JSON"
    NONE = "NONE"
    PDF = "PDF"
    PNG = "PNG"
    TEXT = "TEXT"
    TIFF = "TIFF"
    XML = "XML"


class CookiePolicy:
    """An enum containing cookie policy constants."""
    DISABLED = "DISABLED"
    RELAXED = "RELAXED"
    STRICT = "STRICT"


class CssPropertySupport:
    """An enum containing CSS property support mode constants."""
    ALL = "ALL"
    HTML = "HTML"
    HTML_THIRD_PARTY = "HTML_THIRD_PARTY"
    HTML_THIRD_PARTY_LENIENT = "HTML_THIRD_PARTY_LENIENT"


class Doctype:
    """An enum containing document type constants."""
    AUTODETECT = "AUTODETECT"
    HTML5 = "HTML5"
    XHTML = "XHTML"
    XML = "XML"


class Encryption:
    """An enum containing encryption constants."""
    AES_128 = "AES_128"
    AES_256 = "AES_256"
    NONE = "NONE"
    RC4_128 = "RC4_128"
    RC4_40 = "RC4_40"
    TYPE_128 = "TYPE_128"
    TYPE_40 = "TYPE_40"


class ErrorPolicy:
    """An enum containing error policies."""
    CONFORMANCE_VALIDATION_UNAVAILABLE = "CONFORMANCE_VALIDATION_UNAVAILABLE"
    IGNORE_INVALID_MERGE_DOCUMENTS_EXCEPTION = "IGNORE_INVALID_MERGE_DOCUMENTS_EXCEPTION"
    LICENSE = "LICENSE"
    MISSING_RESOURCE = "MISSING_RESOURCE"
    UNCAUGHT_JAVASCRIPT_EXCEPTION = "UNCAUGHT_JAVASCRIPT_EXCEPTION"
    WARN_EVENT = "WARN_EVENT"


class ExceedingContentAgainst:
    """An enum containing constants for logging exceeding content against."""
    NONE = "NONE"
    PAGE_BORDERS = "PAGE_BORDERS"
    PAGE_CONTENT = "PAGE_CONTENT"
    PARENT = "PARENT"


class ExceedingContentAnalyze:
    """An enum containing constants for analyzing exceeding content."""
    CONTENT = "CONTENT"
    CONTENT_AND_BOXES = "CONTENT_AND_BOXES"
    CONTENT_AND_STATIC_BOXES = "CONTENT_AND_STATIC_BOXES"
    NONE = "NONE"


class HttpAuthScheme:
    """An enum containing HTTP authentication scheme constants."""
    ANY = "ANY"
    BASIC = "BASIC"
    DIGEST = "DIGEST"
    KERBEROS = "KERBEROS"
    NTLM = "NTLM"
    SPNEGO = "SPNEGO"


class HttpProtocol:
    """An enum containing HTTP protocol constants."""
    ANY = "ANY"
    HTTP = "HTTP"
    HTTPS = "HTTPS"


class HttpsMode:
    """Deprecated as of PDFreactor 12. Use the trustAllConnectionCertificates security setting instead."""
    LENIENT = "LENIENT"
    STRICT = "STRICT"


class JavaScriptDebugMode:
    """An enum containing JavaScript debug mode constants."""
    EXCEPTIONS = "EXCEPTIONS"
    FUNCTIONS = "FUNCTIONS"
    LINES = "LINES"
    NONE = "NONE"
    POSITIONS = "POSITIONS"


class JavaScriptEngine:
    """An enum containing JavaScript engines."""
    GRAALJS = "GRAALJS"
    RHINO = "RHINO"


class KeystoreType:
    """An enum containing keystore type constants."""
    JKS = "JKS"
    PKCS12 = "PKCS12"


class LogLevel:
    """An enum containing log level constants."""
    DEBUG = "DEBUG"
    ERROR = "ERROR"
    FATAL = "FATAL"
    INFO = "INFO"
    NONE = "NONE"
    PERFORMANCE = "PERFORMANCE"
    TRACE = "TRACE"
    WARN = "WARN"


class MediaFeature:
    """An enum containing media feature constants."""
    ANY_HOVER = "ANY_HOVER"
    ANY_POINTER = "ANY_POINTER"
    ASPECT_RATIO = "ASPECT_RATIO"
    COLOR = "COLOR"
    COLOR_GAMUT = "COLOR_GAMUT"
    COLOR_INDEX = "COLOR_INDEX"
    DEVICE_ASPECT_RATIO = "DEVICE_ASPECT_RATIO"
    DEVICE_HEIGHT = "DEVICE_HEIGHT"
    DEVICE_WIDTH = "DEVICE_WIDTH"
    DISPLAY_MODE = "DISPLAY_MODE"
    DYNAMIC_RANGE = "DYNAMIC_RANGE"
    ENVIRONMENT_BLENDING = "ENVIRONMENT_BLENDING"
    FORCED_COLORS = "FORCED_COLORS"
    GRID = "GRID"
    HEIGHT = "HEIGHT"
    HORIZONTAL_VIEWPORT_SEGMENTS = "HORIZONTAL_VIEWPORT_SEGMENTS"
    HOVER = "HOVER"
    INVERTED_COLORS = "INVERTED_COLORS"
    MONOCHROME = "MONOCHROME"
    NAV_CONTROLS = "NAV_CONTROLS"
    ORIENTATION = "ORIENTATION"
    OVERFLOW_BLOCK = "OVERFLOW_BLOCK"
    OVERFLOW_INLINE = "OVERFLOW_INLINE"
    POINTER = "POINTER"
    PREFERS_COLOR_SCHEME = "PREFERS_COLOR_SCHEME"
    PREFERS_CONSTRAST = "PREFERS_CONSTRAST"
    PREFERS_REDUCED_DATA = "PREFERS_REDUCED_DATA"
    PREFERS_REDUCED_MOTION = "PREFERS_REDUCED_MOTION"
    PREFERS_REDUCED_TRANSPARENCY = "PREFERS_REDUCED_TRANSPARENCY"
    RESOLUTION = "RESOLUTION"
    SCAN = "SCAN"
    SCRIPTING = "SCRIPTING"
    UPDATE = "UPDATE"
    VERTICAL_VIEWPORT_SEGMENTS = "VERTICAL_VIEWPORT_SEGMENTS"
    VIDEO_COLOR_GAMUT = "VIDEO_COLOR_GAMUT"
    VIDEO_DYNAMIC_RANGE = "VIDEO_DYNAMIC_RANGE"
    WIDTH = "WIDTH"


class MergeMode:
    """An enum containing merge mode constants."""
    APPEND = "APPEND"
    ARRANGE = "ARRANGE"
    OVERLAY = "OVERLAY"
    OVERLAY_BELOW = "OVERLAY_BELOW"
    PREPEND = "PREPEND"


class OutputIntentDefaultProfile:
    """An enum containing default profiles for output intents."""
    FOGRA39 = "Coated FOGRA39"
    GRACOL = "Coated GRACoL 2006"
    IFRA = "ISO News print 26% (IFRA)"
    JAPAN = "Japan Color 2001 Coated"
    JAPAN_NEWSPAPER = "Japan Color 2001 Newspaper"
    JAPAN_UNCOATED = "Japan Color 2001 Uncoated"
    JAPAN_WEB = "Japan Web Coated (Ad)"
    SWOP = "US Web Coated (SWOP) v2"
    SWOP_3 = "Web Coated SWOP 2006 Grade 3 Paper"


class OutputType:
    """An enum containing output format constants."""
    BMP = "BMP"
    GIF = "GIF"
    GIF_DITHERED = "GIF_DITHERED"
    JPEG = "JPEG"
    PDF = "PDF"
    PNG = "PNG"
    PNG_AI = "PNG_AI"
    PNG_TRANSPARENT = "PNG_TRANSPARENT"
    PNG_TRANSPARENT_AI = "PNG_TRANSPARENT_AI"
    TIFF_CCITT_1D = "TIFF_CCITT_1D"
    TIFF_CCITT_1D_DITHERED = "TIFF_CCITT_1D_DITHERED"
    TIFF_CCITT_GROUP_3 = "TIFF_CCITT_GROUP_3"
    TIFF_CCITT_GROUP_3_DITHERED = "TIFF_CCITT_GROUP_3_DITHERED"
    TIFF_CCITT_GROUP_4 = "TIFF_CCITT_GROUP_4"
    TIFF_CCITT_GROUP_4_DITHERED = "TIFF_CCITT_GROUP_4_DITHERED"
    TIFF_LZW = "TIFF_LZW"
    TIFF_PACKBITS = "TIFF_PACKBITS"
    TIFF_UNCOMPRESSED = "TIFF_UNCOMPRESSED"


class OverlayContentDocument:
    """An enum containing constants that determines whether the converted document"""
    CONVERTED = "CONVERTED"
    PDF = "PDF"


class OverlayFit:
    """An enum containing data to configure how overlay pages that have"""
    CONTAIN = "CONTAIN"
    COVER = "COVER"
    FILL = "FILL"
    NONE = "NONE"


class OverlayRepeat:
    """An enum containing data for repeating overlays."""
    ALL_PAGES = "ALL_PAGES"
    LAST_PAGE = "LAST_PAGE"
    NONE = "NONE"
    TRIM = "TRIM"


class PageOrder:
    """An enum containing pre-defined page orders."""
    BOOKLET = "BOOKLET"
    BOOKLET_RTL = "BOOKLET_RTL"
    EVEN = "EVEN"
    ODD = "ODD"
    REVERSE = "REVERSE"


class PagesPerSheetDirection:
    """An enum containing constants for pages per sheet directions."""
    DOWN_LEFT = "DOWN_LEFT"
    DOWN_RIGHT = "DOWN_RIGHT"
    LEFT_DOWN = "LEFT_DOWN"
    LEFT_UP = "LEFT_UP"
    RIGHT_DOWN = "RIGHT_DOWN"
    RIGHT_UP = "RIGHT_UP"
    UP_LEFT = "UP_LEFT"
    UP_RIGHT = "UP_RIGHT"


class PdfScriptTriggerEvent:
    """An enum containing trigger events for PDF scripts."""
    AFTER_PRINT = "AFTER_PRINT"
    AFTER_SAVE = "AFTER_SAVE"
    BEFORE_PRINT = "BEFORE_PRINT"
    BEFORE_SAVE = "BEFORE_SAVE"
    CLOSE = "CLOSE"
    OPEN = "OPEN"


class ProcessingPreferences:
    """An enum containing constants for processing preferences."""
    SAVE_MEMORY_IMAGES = "SAVE_MEMORY_IMAGES"


class QuirksMode:
    """An enum containing modes for Quirks."""
    DETECT = "DETECT"
    QUIRKS = "QUIRKS"
    STANDARDS = "STANDARDS"


class ResolutionUnit:
    """An enum containing resolution units."""
    DPCM = "DPCM"
    DPI = "DPI"
    DPPX = "DPPX"
    TDPCM = "TDPCM"
    TDPI = "TDPI"
    TDPPX = "TDPPX"


class ResourceSubtype:
    """An enum containing resource sub type constants."""
    JAVASCRIPT_CLASSIC = "JAVASCRIPT_CLASSIC"
    JAVASCRIPT_IMPORTMAP = "JAVASCRIPT_IMPORTMAP"
    JAVASCRIPT_MODULE = "JAVASCRIPT_MODULE"


class ResourceType:
    """Indicates the type of resource."""
    ATTACHMENT = "ATTACHMENT"
    DOCUMENT = "DOCUMENT"
    FONT = "FONT"
    ICC_PROFILE = "ICC_PROFILE"
    IFRAME = "IFRAME"
    IMAGE = "IMAGE"
    LICENSEKEY = "LICENSEKEY"
    MERGE_DOCUMENT = "MERGE_DOCUMENT"
    OBJECT = "OBJECT"
    RUNNING_DOCUMENT = "RUNNING_DOCUMENT"
    SCRIPT = "SCRIPT"
    STYLESHEET = "STYLESHEET"
    UNKNOWN = "UNKNOWN"
    XHR = "XHR"


class SigningMode:
    """An enum containing the cryptographic filter type that is used for signing."""
    SELF_SIGNED = "SELF_SIGNED"
    VERISIGN_SIGNED = "VERISIGN_SIGNED"
    WINCER_SIGNED = "WINCER_SIGNED"


class ViewerPreferences:
    """An enum containing constants for viewer preferences."""
    CENTER_WINDOW = "CENTER_WINDOW"
    DIRECTION_L2R = "DIRECTION_L2R"
    DIRECTION_R2L = "DIRECTION_R2L"
    DISPLAY_DOC_TITLE = "DISPLAY_DOC_TITLE"
    DUPLEX_FLIP_LONG_EDGE = "DUPLEX_FLIP_LONG_EDGE"
    DUPLEX_FLIP_SHORT_EDGE = "DUPLEX_FLIP_SHORT_EDGE"
    DUPLEX_SIMPLEX = "DUPLEX_SIMPLEX"
    FIT_WINDOW = "FIT_WINDOW"
    HIDE_MENUBAR = "HIDE_MENUBAR"
    HIDE_TOOLBAR = "HIDE_TOOLBAR"
    HIDE_WINDOW_UI = "HIDE_WINDOW_UI"
    NON_FULLSCREEN_PAGE_MODE_USE_NONE = "NON_FULLSCREEN_PAGE_MODE_USE_NONE"
    NON_FULLSCREEN_PAGE_MODE_USE_OC = "NON_FULLSCREEN_PAGE_MODE_USE_OC"
    NON_FULLSCREEN_PAGE_MODE_USE_OUTLINES = "NON_FULLSCREEN_PAGE_MODE_USE_OUTLINES"
    NON_FULLSCREEN_PAGE_MODE_USE_THUMBS = "NON_FULLSCREEN_PAGE_MODE_USE_THUMBS"
    PAGE_LAYOUT_ONE_COLUMN = "PAGE_LAYOUT_ONE_COLUMN"
    PAGE_LAYOUT_SINGLE_PAGE = "PAGE_LAYOUT_SINGLE_PAGE"
    PAGE_LAYOUT_TWO_COLUMN_LEFT = "PAGE_LAYOUT_TWO_COLUMN_LEFT"
    PAGE_LAYOUT_TWO_COLUMN_RIGHT = "PAGE_LAYOUT_TWO_COLUMN_RIGHT"
    PAGE_LAYOUT_TWO_PAGE_LEFT = "PAGE_LAYOUT_TWO_PAGE_LEFT"
    PAGE_LAYOUT_TWO_PAGE_RIGHT = "PAGE_LAYOUT_TWO_PAGE_RIGHT"
    PAGE_MODE_FULLSCREEN = "PAGE_MODE_FULLSCREEN"
    PAGE_MODE_USE_ATTACHMENTS = "PAGE_MODE_USE_ATTACHMENTS"
    PAGE_MODE_USE_NONE = "PAGE_MODE_USE_NONE"
    PAGE_MODE_USE_OC = "PAGE_MODE_USE_OC"
    PAGE_MODE_USE_OUTLINES = "PAGE_MODE_USE_OUTLINES"
    PAGE_MODE_USE_THUMBS = "PAGE_MODE_USE_THUMBS"
    PICKTRAYBYPDFSIZE_FALSE = "PICKTRAYBYPDFSIZE_FALSE"
    PICKTRAYBYPDFSIZE_TRUE = "PICKTRAYBYPDFSIZE_TRUE"
    PRINTSCALING_APPDEFAULT = "PRINTSCALING_APPDEFAULT"
    PRINTSCALING_NONE = "PRINTSCALING_NONE"


class XmpPriority:
    """An enum containing the priority for XMP."""
    HIGH = "HIGH"
    LOW = "LOW"
    NONE = "NONE"


# ===========================
# === command line client ===
# ===========================

def main(argv):
    def term_error(message):
        sys.stderr.write(message + '\n')
        sys.exit(1)

    parser = argparse.ArgumentParser(prog = 'pdfreactor',
                                     description = 'PDFreactor Web Service client.',
                                     epilog = 'The service URL defaults to $PDFREACTOR_URL.')
    parser.add_argument('-url',
                        help = 'The URL of the PDFreactor Web Service REST API. Default is %s.' % DEFAULT_URL)
    parser.add_argument('-api-key',
                        help = 'The API key, only required if the service is so configured.')
    parser.add_argument('-timeout',
                        type = float,
                        help = 'The connection timeout in seconds. Default is 300.')
    parser.add_argument('-debug',
                        action = 'store_true',
                        help = 'Log the HTTP requests to stderr.')
    commands = parser.add_subparsers(dest = 'command')

    convert = commands.add_parser('convert',
                                  help = 'Convert a document and write the result to stdout.')
    convert.add_argument('source',
                         help = "Source to be converted. It can be URL, path to a local file or '-' to use stdin as an input text.")
    convert.add_argument('-output-format',
                         help = 'The output format, e.g. PDF, PNG or JPEG. Default is PDF.')
    convert.add_argument('-async',
                         dest = 'use_async',
                         action = 'store_true',
                         help = 'Convert asynchronously and poll the progress until the document is ready.')
    convert.add_argument('-interval',
                         type = float,
                         default = 1,
                         help = 'The polling interval in seconds for asynchronous conversions. Default is 1.')
    commands.add_parser('version', help = 'Print the version of the service.')
    commands.add_parser('status', help = 'Check that the service is available.')
    progress = commands.add_parser('progress', help = 'Print the progress of an asynchronous conversion.')
    progress.add_argument('document_id')
    document = commands.add_parser('document', help = 'Write an asynchronously converted document to stdout.')
    document.add_argument('document_id')

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit()

    if args.debug:
        logging.basicConfig(level = logging.DEBUG, stream = sys.stderr)

    client = PDFreactor(args.url)
    if args.api_key:
        client.setApiKey(args.api_key)
    if args.timeout:
        client.setTimeout(args.timeout)

    def get_input(source):
        if source == '-':
            return ''.join(line for line in sys.stdin)

        if re.match('(?i)^https?://.*$', source):
            return source

        if os.path.isfile(source):
            with open(source, encoding = 'utf-8') as f:
                return f.read()

        term_error("Invalid source '{}'. Must be a valid file, URL, or '-'.".format(source))

    try:
        if args.command == 'version':
            print(json.dumps(client.getVersion(), indent = 2))
        elif args.command == 'status':
            client.getStatus()
            print('PDFreactor Web Service at %s is available.' % client.url)
        elif args.command == 'progress':
            print(json.dumps(client.getProgress(args.document_id), indent = 2))
        elif args.command == 'document':
            client.getDocumentAsBinary(args.document_id, sys.stdout.buffer)
        else:
            config = {'document': get_input(args.source)}
            if args.output_format:
                config['outputFormat'] = {'type': args.output_format.upper()}
            if args.use_async:
                settings = {}
                document_id = client.convertAsync(config, settings)
                client.waitForDocument(document_id, settings, args.interval)
                client.getDocumentAsBinary(document_id, sys.stdout.buffer, settings)
            else:
                client.convertAsBinary(config, sys.stdout.buffer)
    except PDFreactorWebserviceException as err:
        term_error(str(err))

def _console():
    main(sys.argv[1:])

if __name__ == "__main__":
    _console()
