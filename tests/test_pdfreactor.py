import io
import json

import pytest

import pdfreactor
from pdfreactor import PDFreactor

BASE = '/service/rest'


@pytest.fixture
def client(service):
    return PDFreactor(service.url + BASE + '/')


def test_default_url_and_trailing_slash(client, service):
    assert client.url == service.url + BASE
    assert PDFreactor().url == pdfreactor.DEFAULT_URL


def test_convert_sends_configuration(client, service):
    service.respond('POST', BASE + '/convert.json', body={'document': 'JVBERi0=', 'numberOfPages': 1})
    config = {'document': '<html><body>Hello</body></html>'}

    result = client.convert(config)

    assert result['numberOfPages'] == 1
    request = service.last
    assert request.method == 'POST'
    assert request.headers['Content-Type'] == 'application/json'
    assert request.headers['User-Agent'] == 'PDFreactor Python API v12'
    assert request.headers['X-RO-User-Agent'] == 'PDFreactor Python API v12'
    sent = json.loads(request.body)
    assert sent['document'] == config['document']
    assert sent['clientName'] == 'PYTHON'
    assert sent['clientVersion'] == 12
    # caller's configuration stays untouched
    assert 'clientName' not in config


def test_api_key_is_sent_as_query_parameter(client, service):
    service.respond('GET', BASE + '/version.json', body={'major': 12})
    client.setApiKey('s3cret&key')

    assert client.getVersion() == {'major': 12}
    assert service.last.path == BASE + '/version.json?apiKey=s3cret%26key'


def test_connection_settings_headers_and_cookies(client, service):
    service.respond('GET', BASE + '/status.json')
    settings = {
        'headers': {'X-Custom': 'yes', 'Content-Type': 'text/plain', 'range': 'bytes=0-1'},
        'cookies': {'node': 'a', 'session': 'b'},
    }

    client.getStatus(settings)

    headers = service.last.headers
    assert headers['X-Custom'] == 'yes'
    assert headers['Cookie'] == 'node=a; session=b'
    assert 'Range' not in headers
    assert 'Content-Type' not in headers


def test_get_requests_carry_no_cookie_header_by_default(client, service):
    service.respond('GET', BASE + '/status.json')
    client.getStatus()
    assert 'Cookie' not in service.last.headers


def test_convert_as_binary_returns_bytes(client, service):
    service.respond('POST', BASE + '/convert.bin', body=b'%PDF-1.7 data')
    assert client.convertAsBinary({'document': 'x'}) == b'%PDF-1.7 data'


def test_convert_as_binary_streams(client, service):
    payload = b'%PDF' + b'x' * 50000
    service.respond('POST', BASE + '/convert.bin', body=payload)
    out = io.BytesIO()

    assert client.convertAsBinary({'document': 'x'}, out) is None
    assert out.getvalue() == payload


def test_settings_in_stream_position(client, service):
    service.respond('POST', BASE + '/convert.bin', body=b'%PDF')
    settings = {'headers': {'X-Trace': '1'}}

    assert client.convertAsBinary({'document': 'x'}, settings) == b'%PDF'
    assert service.last.headers['X-Trace'] == '1'


def test_convert_async_returns_document_id_and_keeps_cookies(client, service):
    service.respond('POST', BASE + '/convert/async.json', status=202, headers=[
        ('Location', service.url + BASE + '/progress/abc-123 '),
        ('Set-Cookie', 'JSESSIONID=xyz; Path=/; HttpOnly'),
        ('Set-Cookie', 'node=n2'),
    ])
    settings = {}

    document_id = client.convertAsync({'document': 'x'}, settings)

    assert document_id == 'abc-123'
    assert settings['cookies'] == {'JSESSIONID': 'xyz', 'node': 'n2'}


def test_async_cookies_are_sent_with_progress(client, service):
    service.respond('POST', BASE + '/convert/async.json', status=202, headers=[
        ('Location', BASE + '/progress/doc1'),
        ('Set-Cookie', 'node=n2'),
    ])
    service.respond('GET', BASE + '/progress/doc1.json', body={'finished': False, 'progress': 40})
    settings = {}

    document_id = client.convertAsync({'document': 'x'}, settings)
    progress = client.getProgress(document_id, settings)

    assert progress['progress'] == 40
    assert service.last.headers['Cookie'] == 'node=n2'


def test_document_operations(client, service):
    service.respond('GET', BASE + '/document/doc1.json', body={'document': 'AAA'})
    service.respond('GET', BASE + '/document/doc1.bin', body=b'%PDF')
    service.respond('GET', BASE + '/document/metadata/doc1.json', body={'numberOfPages': 3})
    service.respond('GET', BASE + '/document/doc1/2.bin', body=b'PNG')
    service.respond('DELETE', BASE + '/document/doc1.json', status=204)

    assert client.getDocument('doc1') == {'document': 'AAA'}
    assert client.getDocumentAsBinary('doc1') == b'%PDF'
    assert client.getDocumentMetadata('doc1') == {'numberOfPages': 3}
    assert client.getDocumentPageAsBinary('doc1', 2) == b'PNG'
    assert client.deleteDocument('doc1') is None
    assert service.last.method == 'DELETE'


def test_asset_package_is_posted_as_zip(client, service):
    service.respond('POST', BASE + '/convert.bin', body=b'%PDF')
    service.respond('POST', BASE + '/convert.json', body={'document': 'AAA'})

    assert client.convertAssetPackageAsBinary(io.BytesIO(b'PK\x03\x04zip')) == b'%PDF'
    assert service.last.headers['Content-Type'] == 'application/zip'
    assert service.last.body == b'PK\x03\x04zip'

    assert client.convertAssetPackage(b'PK\x03\x04zip') == {'document': 'AAA'}


def test_asset_package_async(client, service):
    service.respond('POST', BASE + '/convert/async.json', status=202, headers=[
        ('Location', service.url + BASE + '/progress/pkg-7'),
    ])

    assert client.convertAssetPackageAsync(b'PK\x03\x04zip') == 'pkg-7'
    assert service.last.headers['Content-Type'] == 'application/zip'


def test_asset_package_async_unavailable(client, service):
    service.respond('POST', BASE + '/convert/async.json', status=503,
                    headers=[('X-RO-Error-ID', 'asyncUnavailable')])

    with pytest.raises(pdfreactor.AsyncUnavailableException) as exc:
        client.convertAssetPackageAsync(b'PK\x03\x04zip')

    assert str(exc.value) == pdfreactor.ASYNC_503


def test_document_binaries_stream(client, service):
    payload = b'%PDF' + b'y' * 40000
    service.respond('GET', BASE + '/document/doc1.bin', body=payload)
    service.respond('GET', BASE + '/document/doc1/1.bin', body=b'PNG page')
    document = io.BytesIO()
    page = io.BytesIO()

    assert client.getDocumentAsBinary('doc1', document) is None
    assert client.getDocumentPageAsBinary('doc1', 1, page) is None

    assert document.getvalue() == payload
    assert page.getvalue() == b'PNG page'


def test_document_urls(client, service):
    assert client.getDocumentUrl('d1') == service.url + BASE + '/document/d1'
    assert client.getDocumentUrl('d1', 3) == service.url + BASE + '/document/d1/3'
    assert client.getDocumentUrl(None) is None
    assert client.getProgressUrl('d1') == service.url + BASE + '/progress/d1'
    assert client.getProgressUrl(None) is None


@pytest.mark.parametrize('method', [
    'getProgress', 'getDocument', 'getDocumentAsBinary',
    'getDocumentMetadata', 'deleteDocument',
])
def test_missing_document_id(client, method):
    with pytest.raises(pdfreactor.ClientException) as exc:
        getattr(client, method)(None)
    assert str(exc.value) == 'No conversion was triggered.'


def test_error_id_selects_exception_type(client, service):
    service.respond('POST', BASE + '/convert.json', status=422,
                    headers=[('X-RO-Error-ID', 'conversionFailure')],
                    body={'error': 'The document could not be parsed.'})

    with pytest.raises(pdfreactor.ConversionFailureException) as exc:
        client.convert({'document': 'x'})

    assert str(exc.value) == 'The document could not be parsed.'
    assert exc.value.getErrorId() == 'conversionFailure'
    assert exc.value.errorId == 'conversionFailure'
    assert exc.value.getResult() == {'error': 'The document could not be parsed.'}


def test_client_message_is_prepended(client, service):
    service.respond('POST', BASE + '/convert.json', status=401,
                    headers=[('X-RO-Error-ID', 'unauthorized')],
                    body={'error': 'Invalid API key.'})

    with pytest.raises(pdfreactor.UnauthorizedException) as exc:
        client.convert({'document': 'x'})

    assert str(exc.value) == 'Unauthorized. Invalid API key.'
    assert isinstance(exc.value, pdfreactor.ServerException)


def test_async_unavailable_message(client, service):
    service.respond('POST', BASE + '/convert/async.json', status=503,
                    headers=[('X-RO-Error-ID', 'asyncUnavailable')])

    with pytest.raises(pdfreactor.AsyncUnavailableException) as exc:
        client.convertAsync({'document': 'x'})

    assert str(exc.value) == pdfreactor.ASYNC_503


def test_binary_error_uses_text_body(client, service):
    service.respond('GET', BASE + '/document/gone.bin', status=404,
                    headers=[('X-RO-Error-ID', 'documentNotFound')],
                    body='No such document.')

    with pytest.raises(pdfreactor.DocumentNotFoundException) as exc:
        client.getDocumentAsBinary('gone')

    assert str(exc.value) == pdfreactor.ERROR_404 + ' No such document.'
    assert exc.value.getResult() is None


def test_configuration_too_large(client, service):
    service.respond('POST', BASE + '/convert.json', status=413)

    with pytest.raises(pdfreactor.ServerException) as exc:
        client.convert({'document': 'x'})

    assert str(exc.value) == pdfreactor.ERROR_413


def test_page_out_of_range(client, service):
    service.respond('GET', BASE + '/document/d1/99.bin', status=400,
                    headers=[('X-RO-Error-ID', 'badRequest')])

    with pytest.raises(pdfreactor.BadRequestException) as exc:
        client.getDocumentPageAsBinary('d1', 99)

    assert str(exc.value) == pdfreactor.ERROR_400


def test_missing_error_id_gives_generic_server_exception(client, service):
    service.respond('GET', BASE + '/version.json', status=429, body={'error': 'Slow down.'})

    with pytest.raises(pdfreactor.ServerException) as exc:
        client.getVersion()

    assert type(exc.value) is pdfreactor.ServerException
    assert str(exc.value) == pdfreactor.ERROR_429 + ' Slow down.'


def test_unexpected_status(client, service):
    # 413 is not an expected status for status checks
    service.respond('GET', BASE + '/status.json', status=413)

    with pytest.raises(pdfreactor.ServerException) as exc:
        client.getStatus()

    assert str(exc.value) == 'PDFreactor Web Service error (status 413).'
    assert exc.value.getErrorId() is None


def test_unknown_error_without_messages(client, service):
    service.respond('POST', BASE + '/convert.json', status=500)

    with pytest.raises(pdfreactor.ServerException) as exc:
        client.convert({'document': 'x'})

    assert str(exc.value) == 'Unknown PDFreactor Web Service error'


def test_unreachable_service(closed_port_url):
    client = PDFreactor(closed_port_url)

    with pytest.raises(pdfreactor.UnreachableServiceException) as exc:
        client.getVersion()

    assert 'Error connecting to PDFreactor Web Service at %s' % closed_port_url in str(exc.value)
    assert exc.value.getCause() is not None


def test_timeout(client, service):
    service.respond('GET', BASE + '/version.json', body={'major': 12}, delay=1)
    client.setTimeout(0.2)

    with pytest.raises(pdfreactor.ClientTimeoutException):
        client.getVersion()


def test_invalid_service_response(client, service):
    service.respond('GET', BASE + '/version.json', body='<html>not PDFreactor</html>')

    with pytest.raises(pdfreactor.InvalidServiceException):
        client.getVersion()


def test_wait_for_document_polls_until_finished(client, service):
    service.respond('GET', BASE + '/progress/d1.json', body={'finished': False, 'progress': 10})
    service.respond('GET', BASE + '/progress/d1.json', body={'finished': False, 'progress': 70})
    service.respond('GET', BASE + '/progress/d1.json', body={'finished': True, 'progress': 100})

    progress = client.waitForDocument('d1', interval=0)

    assert progress['progress'] == 100
    assert len(service.requests) == 3


def test_wait_for_document_timeout(client, service):
    service.respond('GET', BASE + '/progress/d1.json', body={'finished': False, 'progress': 10})

    with pytest.raises(pdfreactor.ClientTimeoutException):
        client.waitForDocument('d1', interval=0.01, timeout=0.05)


def test_cli_version(service, capsys):
    service.respond('GET', BASE + '/version.json', body={'major': 12, 'minor': 0})

    pdfreactor.main(['-url', service.url + BASE, 'version'])

    assert json.loads(capsys.readouterr().out) == {'major': 12, 'minor': 0}


def test_cli_reports_errors(closed_port_url, capsys):
    with pytest.raises(SystemExit) as exc:
        pdfreactor.main(['-url', closed_port_url, 'status'])

    assert exc.value.code == 1
    assert 'Error connecting to PDFreactor Web Service' in capsys.readouterr().err


def test_constants():
    assert pdfreactor.OutputType.PDF == 'PDF'
    assert pdfreactor.OutputIntentDefaultProfile.FOGRA39 == 'Coated FOGRA39'
    assert pdfreactor.Conformance.PDFA3U == 'PDFA3U'
