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
import mimetypes
import os
import re
import socket
import ssl
import sys
import tempfile
import uuid
from urllib.parse import urlsplit

__version__ = '1.0.0'

logger = logging.getLogger(__name__)

BASE_URL = os.environ.get('GOTENBERG_BASE_URL', 'http://gotenberg:3000')
HOST_URL = os.environ.get('WEB2PRINT_HOST_URL', 'http://nginx:80')
MULTIPART_BOUNDARY = '----------ThIs_Is_tHe_bOUnDary_$'
CHUNK_SIZE = 16384

HTML_ROUTE = '/forms/chromium/convert/html'
URL_ROUTE = '/forms/chromium/convert/url'

# processor events
PRINT_MODIFY_PROCESSING_OPTIONS = 'print.modify_processing_options'
PRINT_MODIFY_PROCESSING_CONFIG = 'print.modify_processing_config'

DEFAULT_MARGIN = 0.39
DEFAULT_PAPER_WIDTH = 8.5
DEFAULT_PAPER_HEIGHT = 11

# flags enabled by a truthy entry of the processor params
FLAG_OPTIONS = (
    'printBackground', 'landscape', 'preferCssPageSize', 'omitBackground',
    'emulatePrintMediaType', 'emulateScreenMediaType',
    'generateDocumentOutline',
)


class Error(Exception):
    """Thrown when an error occurs."""
    def __init__(self, error, http_code=None, trace=None):
        if isinstance(error, bytes):
            error = error.decode('utf-8', 'replace')
        self.message = error
        self.http_code = http_code
        self.trace = trace
        self.error = error
        if http_code:
            self.error = '%s - %s' % (http_code, error)
        super().__init__(self.error)

    def __str__(self):
        return self.error

    def getStatusCode(self):
        return self.http_code

    def getMessage(self):
        return self.message

    def getTrace(self):
        return self.trace


def create_invalid_value_message(value, field, hint):
    message = "Invalid value '%s' for the '%s' option." % (value, field)
    if hint:
        message += ' ' + hint
    return message

def format_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)

def gen_fields(fields):
    for key, val in fields.items():
        if val is not None:
            yield key, format_value(val)

def add_file_field(name, file_name, data, body, mime_type=None):
    head = []
    head.append('--' + MULTIPART_BOUNDARY)
    head.append('Content-Disposition: form-data; name="{}"; filename="{}"'.format(name, file_name))
    head.append('Content-Type: {}'.format(mime_type or 'application/octet-stream'))
    head.append('')
    body.append('\r\n'.join(head).encode('utf-8'))
    body.append(data)

def encode_multipart_post_data(fields, files, raw_data):
    """Encodes a multipart body.

    Gotenberg expects every document under the 'files' form field; the
    file name (index.html, header.html, footer.html) tells them apart.
    files    -- file name -> local path
    raw_data -- file name -> in-memory content
    """
    head, tail = [], []
    body = []
    for field, value in gen_fields(fields):
        head.append('--' + MULTIPART_BOUNDARY)
        head.append('Content-Disposition: form-data; name="%s"' % field)
        head.append('')
        head.append(value)
    if head:
        body.append('\r\n'.join(head).encode('utf-8'))

    for file_name, path in files.items():
        with open(path, 'rb') as f:
            add_file_field('files', file_name, f.read(), body,
                           mimetypes.guess_type(path)[0])

    for file_name, data in raw_data.items():
        if not isinstance(data, bytes):
            data = data.encode('utf-8')
        add_file_field('files', file_name, data, body,
                       mimetypes.guess_type(file_name)[0])

    tail.append('--' + MULTIPART_BOUNDARY + '--')
    tail.append('')
    body.append('\r\n'.join(tail).encode('utf-8'))

    return b'\r\n'.join(body)

def filename_from_disposition(disposition):
    match = re.search(r'filename\*?=(?:UTF-8\'\')?"?([^";]+)"?', disposition or '')
    if match:
        return os.path.basename(match.group(1).strip())
    return None

def process_html(html, host_url):
    """Makes root-relative src, href and url() references absolute."""
    host_url = host_url.rstrip('/')
    html = re.sub(r'''(\s(?:src|href)\s*=\s*["'])/(?!/)''',
                  lambda m: m.group(1) + host_url + '/', html)
    return re.sub(r'''(url\(\s*["']?)/(?!/)''',
                  lambda m: m.group(1) + host_url + '/', html)


class ConnectionHelper:
    def __init__(self, base_url):
        self.base_url = base_url.rstrip('/')
        self.timeout = 300
        self._reset_response_data()

    def _reset_response_data(self):
        self.trace = ''
        self.output_size = 0
        self.content_type = ''
        self.output_filename = None

    def post(self, route, fields, files, raw_data, headers=None, out_stream=None):
        body = encode_multipart_post_data(fields, files, raw_data)
        content_type = 'multipart/form-data; boundary=' + MULTIPART_BOUNDARY
        return self._do_post(route, body, content_type, headers or {}, out_stream)

    def _create_connection(self, parts):
        if parts.scheme == 'https':
            return http.client.HTTPSConnection(
                parts.hostname, parts.port, timeout=self.timeout)
        return http.client.HTTPConnection(
            parts.hostname, parts.port, timeout=self.timeout)

    # sends a POST to the service
    def _do_post(self, route, body, content_type, headers, out_stream=None):
        self._reset_response_data()
        parts = urlsplit(self.base_url + route)
        logger.debug('POST %s (%d bytes)', self.base_url + route, len(body))
        conn = None
        try:
            conn = self._create_connection(parts)
            conn.putrequest('POST', parts.path)
            conn.putheader('Content-Type', content_type)
            conn.putheader('Content-Length', str(len(body)))
            for name, value in headers.items():
                conn.putheader(name, value)
            conn.endheaders()
            conn.send(body)
            response = conn.getresponse()

            self.trace = response.getheader('Gotenberg-Trace', '')
            self.content_type = response.getheader('Content-Type', '')
            self.output_filename = filename_from_disposition(
                response.getheader('Content-Disposition'))

            if response.status > 299:
                raise Error(response.read(), response.status, self.trace)

            if out_stream is not None:
                while True:
                    data = response.read(CHUNK_SIZE)
                    if data:
                        out_stream.write(data)
                        self.output_size += len(data)
                    else:
                        break
                return out_stream

            data = response.read()
            self.output_size = len(data)
            return data
        except http.client.HTTPException as err:
            raise Error(str(err)) from err
        except ssl.SSLError as err:
            raise Error('There was a problem connecting to Gotenberg at %s over HTTPS: %s'
                        % (self.base_url, err)) from err
        except socket.error as err:
            raise Error('Could not connect to Gotenberg at %s: %s'
                        % (self.base_url, err)) from err
        finally:
            if conn is not None:
                conn.close()

    def getTrace(self):
        return self.trace

    def getOutputSize(self):
        return self.output_size

    def getContentType(self):
        return self.content_type

    def getOutputFilename(self):
        return self.output_filename


class HtmlToPdfClient:
    """Conversion from HTML to PDF with the Gotenberg Chromium module."""

    def __init__(self, base_url=None):
        self.helper = ConnectionHelper(base_url or BASE_URL)
        self.fields = {}
        self.files = {}
        self.headers = {}
        self.output_filename = None

    def convertString(self, text):
        """Converts an in-memory HTML document and returns the PDF."""
        if not text:
            raise Error(create_invalid_value_message(text, 'convertString', 'The string must not be empty.'), 470)

        return self.helper.post(HTML_ROUTE, self.fields, self.files,
                                {'index.html': text}, self.headers)

    def convertStringToStream(self, text, out_stream):
        """Converts an in-memory HTML document.

        out_stream -- an object having method 'write(data)', e.g. a file
        """
        if not text:
            raise Error(create_invalid_value_message(text, 'convertStringToStream::text', 'The string must not be empty.'), 470)

        self.helper.post(HTML_ROUTE, self.fields, self.files,
                         {'index.html': text}, self.headers, out_stream)

    def convertStringToFile(self, text, file_path):
        if not file_path:
            raise Error(create_invalid_value_message(file_path, 'convertStringToFile::file_path', 'The string must not be empty.'), 470)

        output_file = open(file_path, 'wb')
        try:
            self.convertStringToStream(text, output_file)
            output_file.close()
        except Error:
            output_file.close()
            os.remove(file_path)
            raise

    def convertStringToDirectory(self, text, directory):
        """Converts the document into 'directory' and returns the file path.

        The file name is taken from the response, falling back to the
        output file name.
        """
        data = self.convertString(text)
        file_name = self.helper.getOutputFilename()
        if not file_name:
            file_name = (self.output_filename or 'output') + '.pdf'
        path = os.path.join(directory, file_name)
        with open(path, 'wb') as f:
            f.write(data)
        return path

    def convertUrl(self, url):
        if not re.match(r'(?i)^https?://.*$', url):
            raise Error(create_invalid_value_message(url, 'convertUrl', 'Supported protocols are http:// and https://.'), 470)

        fields = dict(self.fields)
        fields['url'] = url
        return self.helper.post(URL_ROUTE, fields, self.files, {}, self.headers)

    def setPrintBackground(self, value=True):
        self.fields['printBackground'] = bool(value)
        return self

    def setLandscape(self, value=True):
        self.fields['landscape'] = bool(value)
        return self

    def setPreferCssPageSize(self, value=True):
        self.fields['preferCssPageSize'] = bool(value)
        return self

    def setOmitBackground(self, value=True):
        self.fields['omitBackground'] = bool(value)
        return self

    def setEmulatePrintMediaType(self, value=True):
        if value:
            self.fields['emulatedMediaType'] = 'print'
        return self

    def setEmulateScreenMediaType(self, value=True):
        if value:
            self.fields['emulatedMediaType'] = 'screen'
        return self

    def setGenerateDocumentOutline(self, value=True):
        self.fields['generateDocumentOutline'] = bool(value)
        return self

    def setMarginTop(self, top):
        self.fields['marginTop'] = self._check_length(top, 'setMarginTop', allow_zero=True)
        return self

    def setMarginBottom(self, bottom):
        self.fields['marginBottom'] = self._check_length(bottom, 'setMarginBottom', allow_zero=True)
        return self

    def setMarginLeft(self, left):
        self.fields['marginLeft'] = self._check_length(left, 'setMarginLeft', allow_zero=True)
        return self

    def setMarginRight(self, right):
        self.fields['marginRight'] = self._check_length(right, 'setMarginRight', allow_zero=True)
        return self

    def setMargins(self, top, bottom, left, right):
        self.setMarginTop(top)
        self.setMarginBottom(bottom)
        self.setMarginLeft(left)
        self.setMarginRight(right)
        return self

    def setPaperSize(self, width, height):
        self.fields['paperWidth'] = self._check_length(width, 'setPaperSize::width')
        self.fields['paperHeight'] = self._check_length(height, 'setPaperSize::height')
        return self

    def setScale(self, scale):
        try:
            value = float(scale)
        except (TypeError, ValueError):
            value = None
        if value is None or not 0.1 <= value <= 2:
            raise Error(create_invalid_value_message(scale, 'setScale', 'The value must be a number between 0.1 and 2.'), 470)

        self.fields['scale'] = value
        return self

    def setNativePageRanges(self, pages):
        if not re.match(r'^\s*\d+(\s*-\s*\d+)?(\s*,\s*\d+(\s*-\s*\d+)?)*\s*$', str(pages)):
            raise Error(create_invalid_value_message(pages, 'setNativePageRanges', 'A comma separated list of page numbers or ranges, e.g. 1-5, 8.'), 470)

        self.fields['nativePageRanges'] = str(pages).strip()
        return self

    def setHeaderFile(self, path):
        self.files['header.html'] = self._check_file(path, 'setHeaderFile')
        return self

    def setFooterFile(self, path):
        self.files['footer.html'] = self._check_file(path, 'setFooterFile')
        return self

    def setExtraHttpHeaders(self, headers):
        """Headers Chromium sends when loading the page and its resources."""
        self.fields['extraHttpHeaders'] = self._check_mapping(headers, 'setExtraHttpHeaders')
        return self

    def setMetadata(self, metadata):
        """Metadata written into the PDF (Author, Title, Keywords, ...)."""
        self.fields['metadata'] = self._check_mapping(metadata, 'setMetadata')
        return self

    def setUserAgent(self, user_agent):
        self.fields['userAgent'] = user_agent
        return self

    def setPdfFormat(self, pdf_format):
        """The PDF/A format of the output, e.g. PDF/A-1b."""
        if not re.match(r'(?i)^PDF/A-(1b|2b|3b)$', pdf_format):
            raise Error(create_invalid_value_message(pdf_format, 'setPdfFormat', 'Allowed values are PDF/A-1b, PDF/A-2b, PDF/A-3b.'), 470)

        self.fields['pdfa'] = pdf_format
        return self

    def setOutputFilename(self, filename):
        self.output_filename = filename
        self.headers['Gotenberg-Output-Filename'] = filename
        return self

    def setTimeout(self, timeout):
        self.helper.timeout = timeout
        return self

    def getTrace(self):
        """The Gotenberg-Trace value of the last response."""
        return self.helper.getTrace()

    def getOutputSize(self):
        return self.helper.getOutputSize()

    def getContentType(self):
        return self.helper.getContentType()

    def _check_length(self, value, field, allow_zero=False):
        text = str(value).strip()
        pattern = r'(?i)^[0-9]*\.?[0-9]+(pt|px|in|mm|cm|pc)?$'
        if not re.match(pattern, text) or (not allow_zero and float(re.sub(r'[a-z]+$', '', text.lower())) == 0):
            raise Error(create_invalid_value_message(value, field, 'The value must be a positive number, optionally with a unit (pt, px, in, mm, cm, pc).'), 470)

        return text

    def _check_mapping(self, value, field):
        try:
            mapping = json.loads(value) if isinstance(value, str) else value
            return dict(mapping)
        except (TypeError, ValueError) as err:
            raise Error(create_invalid_value_message(value, field, 'The value must be a JSON object.'), 470) from err

    def _check_file(self, path, field):
        if not (path and os.path.isfile(path)):
            raise Error(create_invalid_value_message(path, field, 'The file must exist.'), 470)

        return path


def applyParams(client, params):
    """Applies the processor parameters to a HtmlToPdfClient."""
    for option in FLAG_OPTIONS:
        if params.get(option):
            setter = getattr(client, 'set' + option[0].upper() + option[1:])
            setter(True)

    def param(name, default):
        value = params.get(name)
        return default if value is None else value

    client.setMargins(
        param('marginTop', DEFAULT_MARGIN),
        param('marginBottom', DEFAULT_MARGIN),
        param('marginLeft', DEFAULT_MARGIN),
        param('marginRight', DEFAULT_MARGIN))

    if params.get('scale') is not None:
        client.setScale(params['scale'])

    if params.get('nativePageRanges') is not None:
        client.setNativePageRanges(params['nativePageRanges'])

    if params.get('headerTemplate') is not None:
        client.setHeaderFile(params['headerTemplate'])
    if params.get('footerTemplate') is not None:
        client.setFooterFile(params['footerTemplate'])

    # a null width falls back to whether a height is given
    if params.get('paperWidth') is not None:
        use_paper_size = bool(params['paperWidth'])
    else:
        use_paper_size = params.get('paperHeight') is not None
    if use_paper_size:
        client.setPaperSize(param('paperWidth', DEFAULT_PAPER_WIDTH),
                            param('paperHeight', DEFAULT_PAPER_HEIGHT))

    if params.get('extraHttpHeaders') is not None:
        client.setExtraHttpHeaders(params['extraHttpHeaders'])
    if params.get('metadata') is not None:
        client.setMetadata(params['metadata'])
    if params.get('userAgent') is not None:
        client.setUserAgent(params['userAgent'])
    if params.get('pdfFormat') is not None:
        client.setPdfFormat(params['pdfFormat'])
    return client


def load_config(path):
    """Reads the web-to-print configuration from a JSON file."""
    with open(path, encoding='utf-8') as f:
        return json.load(f)


class GotenbergProcessor:
    """Renders web-to-print documents to PDF through Gotenberg.

    config keys:
      gotenbergBaseUrl  -- the Gotenberg service, defaults to $GOTENBERG_BASE_URL
      gotenbergHostUrl  -- prefix for root-relative references in the HTML
      gotenbergSettings -- JSON string with default conversion params
      tempDirectory     -- where files are saved for returnFilePath
    """

    def __init__(self, config=None):
        self.config = dict(config or {})
        self.listeners = {}
        self.status_callback = None

    def addListener(self, event, callback):
        self.listeners.setdefault(event, []).append(callback)
        return self

    def setStatusCallback(self, callback):
        """callback(document_id, percent, step)"""
        self.status_callback = callback
        return self

    def dispatch(self, event, arguments):
        # listeners modify the arguments in place
        for callback in self.listeners.get(event, []):
            callback(arguments)
        return arguments

    def updateStatus(self, document_id, percent, step):
        logger.debug('Document %s: %d%% %s', document_id, percent, step)
        if self.status_callback:
            self.status_callback(document_id, percent, step)

    def buildPdf(self, document):
        document_id = document.getId()
        self.updateStatus(document_id, 10, 'start_html_rendering')
        html = document.renderDocument({'document': document})
        self.updateStatus(document_id, 40, 'finished_html_rendering')

        try:
            self.updateStatus(document_id, 50, 'pdf_conversion')
            pdf = self.getPdfFromString(html)
            self.updateStatus(document_id, 100, 'saving_pdf_document')
        except Exception as err:
            message = err.getMessage() if isinstance(err, Error) else str(err)
            logger.error('PDF generation for document %s failed: %s', document_id, message)
            document.setLastGenerateMessage(message)
            raise Error('Error during PDF-Generation:' + message) from err

        document.setLastGenerateMessage('')
        return pdf

    def getProcessingOptions(self):
        arguments = self.dispatch(PRINT_MODIFY_PROCESSING_OPTIONS, {'options': []})
        return list(arguments['options'])

    def getPdfFromString(self, html, params=None, return_file_path=False):
        """Converts HTML to PDF.

        Returns the PDF, or the path of the file saved in the temp
        directory if return_file_path is set.
        """
        html = process_html(html, self.config.get('gotenbergHostUrl') or HOST_URL)

        params = dict(params or {})
        params.update(self._load_settings())
        params = params or self.getDefaultOptions()

        arguments = self.dispatch(PRINT_MODIFY_PROCESSING_CONFIG, {
            'params': params,
            'html': html,
        })
        html, params = arguments['html'], arguments['params']

        client = HtmlToPdfClient(self.config.get('gotenbergBaseUrl'))
        applyParams(client, params)
        client.setOutputFilename('web2print_' + uuid.uuid4().hex[:13])

        if return_file_path:
            directory = self.config.get('tempDirectory') or tempfile.gettempdir()
            return client.convertStringToDirectory(html, directory)
        return client.convertString(html)

    def getDefaultOptions(self):
        return {
            'printBackground': True,
            'landscape': False,
        }

    def _load_settings(self):
        settings = self.config.get('gotenbergSettings') or ''
        if isinstance(settings, str):
            if not settings.strip():
                return {}
            try:
                settings = json.loads(settings)
            except ValueError as err:
                logger.warning('Ignoring invalid gotenbergSettings: %s', err)
                return {}
        if not isinstance(settings, dict):
            return {}

        settings = dict(settings)
        for item in ('header', 'footer'):
            path = settings.pop(item, None)
            if path and os.path.isfile(path):
                settings[item + 'Template'] = path
        return settings


def main(argv):
    def term_error(message):
        sys.stderr.write(message + '\n')
        sys.exit(1)

    multi_args = {}
    parser = argparse.ArgumentParser(prog = 'gotenberg',
                                     usage = '%(prog)s [options] source',
                                     description = 'Conversion from HTML to PDF with Gotenberg.',
                                     epilog = 'The service URL defaults to $GOTENBERG_BASE_URL.')
    parser.add_argument('source',
                        help = "Source to be converted. It can be URL, path to a local file or '-' to use stdin as an input text.")
    parser.add_argument('-url',
                        help = 'The URL of the Gotenberg service. Default is %s.' % BASE_URL)
    parser.add_argument('-debug',
                        action = 'store_true',
                        help = 'Log the HTTP requests to stderr.')
    parser.add_argument('-print-background',
                        action = 'store_true',
                        help = 'Print the background graphics.')
    parser.add_argument('-landscape',
                        action = 'store_true',
                        help = 'Set the paper orientation to landscape.')
    parser.add_argument('-prefer-css-page-size',
                        action = 'store_true',
                        help = 'Prefer the page size defined by CSS over the paper size.')
    parser.add_argument('-omit-background',
                        action = 'store_true',
                        help = 'Hide the default white background and allow transparency.')
    parser.add_argument('-emulate-print-media-type',
                        action = 'store_true',
                        help = 'Emulate the print media type.')
    parser.add_argument('-emulate-screen-media-type',
                        action = 'store_true',
                        help = 'Emulate the screen media type.')
    parser.add_argument('-generate-document-outline',
                        action = 'store_true',
                        help = 'Embed the document outline into the PDF.')
    multi_args['margins'] = 4
    parser.add_argument('-margins',
                        help = 'Set the margins. MARGINS must contain 4 values separated by a semicolon: top, bottom, left and right. Default is 0.39 inches each.')
    multi_args['paper_size'] = 2
    parser.add_argument('-paper-size',
                        help = 'Set the paper size. PAPER_SIZE must contain 2 values separated by a semicolon: width and height.')
    parser.add_argument('-scale',
                        help = 'The scale of the page rendering. Must be between 0.1 and 2.')
    parser.add_argument('-native-page-ranges',
                        help = 'Page ranges to print, e.g. 1-5, 8.')
    parser.add_argument('-header-file',
                        help = 'Path to the HTML file with the page header.')
    parser.add_argument('-footer-file',
                        help = 'Path to the HTML file with the page footer.')
    parser.add_argument('-user-agent',
                        help = 'Override the default user agent of Chromium.')
    parser.add_argument('-pdf-format',
                        help = 'Convert the result to PDF/A. Allowed values are PDF/A-1b, PDF/A-2b, PDF/A-3b.')
    parser.add_argument('-output-filename',
                        help = 'The file name of the result without extension.')

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level = logging.DEBUG, stream = sys.stderr)

    converter = HtmlToPdfClient(args.url)

    def invoke_method(method, value, arg):
        if arg in multi_args.keys():
            values = value.split(';')
            if len(values) != multi_args[arg]:
                raise Error("Invalid number of arguments for '%s': %s" % (arg, value))
            getattr(converter, method)(*values)
        else:
            getattr(converter, method)(value)

    def get_input(source):
        if source == '-':
            lines = (line for line in sys.stdin)
            return 'convertString', ''.join(lines)

        if re.match('(?i)^https?://.*$', source):
            return 'convertUrl', source

        if os.path.isfile(source):
            with open(source, encoding = 'utf-8') as f:
                return 'convertString', f.read()

        term_error("Invalid source '{}'. Must be a valid file, URL, or '-'.".format(source))

    try:
        for arg in vars(args):
            if arg in ('source', 'url', 'debug'):
                continue
            value = getattr(args, arg)
            if value:
                method = ''.join(w.title() for w in arg.split('_'))
                invoke_method('set' + method, value, arg)

        method, source = get_input(args.source)
        out = getattr(converter, method)(source)
    except Error as err:
        term_error(str(err))

    sys.stdout.buffer.write(out)

def _console():
    main(sys.argv[1:])

if __name__ == "__main__":
    _console()
