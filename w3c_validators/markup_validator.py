import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from .constants import (BOOLEAN_PARAMS, CHARSETS, DOCTYPES, HEAD_ERROR_COUNT_HEADER,
                        HEAD_STATUS_HEADER, MARKUP_VALIDATOR_URI, SOAP_OUTPUT_PARAM)
from .exceptions import ParsingError
from .results import Results
from .validator import Validator, element_params, select_path

logger = logging.getLogger(__name__)

CONTENT_SOURCES = ('uri', 'uploaded_file', 'fragment')

# Results field -> child of markupvalidationresponse
RESPONSE_FIELDS = {
    'doctype': 'doctype',
    'uri': 'uri',
    'charset': 'charset',
    'checked_by': 'checkedby',
    'validity': 'validity',
}

MESSAGE_PATHS = {
    'warning': ('warnings', 'warninglist', 'warning'),
    'error': ('errors', 'errorlist', 'error'),
}


class MarkupValidator(Validator):
    """Client for the W3C Markup Validation Service

    Keyword options are sent as request parameters with every call (see
    http://validator.w3.org/docs/api.html#requestformat); they can also be
    set with set_charset, set_doctype and set_debug.
    """

    default_uri = MARKUP_VALIDATOR_URI
    upload_content_type = 'text/html'

    def set_charset(self, charset: str, only_as_fallback: bool = False):
        """Character encoding used to parse the document

        ``charset`` is either a key of ``CHARSETS`` (e.g. ``utf_8``) or the
        label itself. With ``only_as_fallback`` the encoding is only used when
        the document's own one is absent or unrecognized. Has no effect on
        validate_uri_quickly.
        """
        self.options['charset'] = CHARSETS.get(charset, charset)
        self.options['fbc'] = only_as_fallback

    def set_doctype(self, doctype: str, only_as_fallback: bool = False):
        """Document type used to parse the document

        ``doctype`` is either a key of ``DOCTYPES`` (e.g. ``html32``) or the
        name itself. With ``only_as_fallback`` it is only used when the
        document's DOCTYPE is missing or unrecognized. Has no effect on
        validate_uri_quickly.
        """
        self.options['doctype'] = DOCTYPES.get(doctype, doctype)
        self.options['fbd'] = only_as_fallback

    def set_debug(self, debug: bool = True):
        """Ask the validator for extra debugging output

        The output ends up in ``Results.debug_messages``.
        """
        self.options['debug'] = debug

    def validate_uri(self, uri) -> Results:
        return self._validate({'uri': uri})

    def validate_uri_quickly(self, uri) -> Results:
        """Validate with a HEAD request: validity and error count only"""
        return self._validate({'uri': uri}, quick=True)

    def validate_text(self, text: str) -> Results:
        return self._validate({'fragment': text})

    def validate_file(self, file_path) -> Results:
        """Validate a local file, given as a path or an open file object"""
        if hasattr(file_path, 'read'):
            src = file_path.read()
        else:
            src = self._read_local_file(file_path)
        return self._validate({'uploaded_file': src, 'file_path': file_path})

    def _validate(self, options: dict, quick: bool = False) -> Results:
        options = self._request_options(options)

        if quick:
            response = self._send_request(options, 'head')
            self.results = self._parse_head_response(response, options['uri'])
        else:
            method = 'get' if options.get('uri') is not None else 'post'
            response = self._send_request(options, method)
            self.results = self._parse_soap_response(response.content)
        logger.debug(f"Markup validation: {len(self.results.errors)} errors, "
                     f"{len(self.results.warnings)} warnings")
        return self.results

    def _request_options(self, options: dict) -> dict:
        options = {**self.options, **options}
        options['output'] = SOAP_OUTPUT_PARAM

        sources = [key for key in CONTENT_SOURCES if options.get(key) is not None]
        if not sources:
            raise ValueError("an uri, uploaded file or fragment is required.")
        if len(sources) > 1:
            raise ValueError(f"only one of uri, uploaded file or fragment may be given, got {sources}")

        if options.get('uri') is not None and not isinstance(options['uri'], str):
            options['uri'] = str(options['uri'])

        for key in BOOLEAN_PARAMS:
            value = options.get(key)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                options[key] = 1 if value else 0

        return options

    def _parse_soap_response(self, body) -> Results:
        try:
            soup = BeautifulSoup(body, 'xml')
            soap_body = select_path(soup, 'Envelope', 'Body')
            if not soap_body:
                raise ParsingError("response is not a SOAP envelope")
            soap_body = soap_body[0]
            faults = select_path(soap_body, 'Fault', 'Reason', 'Text')
            response_el = soap_body.find('markupvalidationresponse', recursive=False)
            if response_el is None and not faults:
                raise ParsingError("no markupvalidationresponse in SOAP body")

            params = {}
            if response_el is not None:
                for local_key, remote_key in RESPONSE_FIELDS.items():
                    el = response_el.find(remote_key, recursive=False)
                    if el is not None:
                        params[local_key] = el.get_text().strip()
            if 'validity' in params:
                params['validity'] = params['validity'].lower() == 'true'

            results = Results.parse_obj(params)

            if response_el is not None:
                for message_type, path in MESSAGE_PATHS.items():
                    for message in select_path(response_el, *path):
                        results.add_message(message_type, element_params(message))

            for fault in faults:
                results.add_error({'message': fault.get_text().strip()})

            if response_el is not None:
                for debug in response_el.find_all('debug', recursive=False):
                    results.add_debug_message(debug.get('name'), debug.get_text().strip())
            return results
        except ParsingError:
            raise
        except Exception as e:
            self._handle_exception(e)

    def _parse_head_response(self, response: requests.Response,
                             validated_uri: Optional[str] = None) -> Results:
        try:
            status = response.headers.get(HEAD_STATUS_HEADER)
            if status is None:
                raise ParsingError(f"response has no {HEAD_STATUS_HEADER} header")
            results = Results(uri=validated_uri, validity=status.strip().lower() == 'valid')

            # Placeholder messages, the HEAD reply only carries the count
            for _ in range(int(response.headers.get(HEAD_ERROR_COUNT_HEADER) or 0)):
                results.add_error()
            return results
        except ParsingError:
            raise
        except Exception as e:
            self._handle_exception(e)
