import os
import logging
from typing import Optional

import requests

from .exceptions import ParsingError, ValidatorUnavailable

logger = logging.getLogger(__name__)

USER_AGENT = 'w3c-validators-py (+https://validator.w3.org/docs/api.html)'
DEFAULT_TIMEOUT = 30


class Validator:
    """Base class for the W3C validator clients

    Subclasses set ``default_uri`` and ``upload_content_type`` and implement
    their own request-option checks and response parsing.
    """

    default_uri = None
    upload_content_type = 'text/html'

    def __init__(self, validator_uri: Optional[str] = None,
                 session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_TIMEOUT, **options):
        self.validator_uri = validator_uri or self.default_uri
        self.timeout = timeout
        self.options = dict(options)
        self.results = None
        if session is None:
            session = requests.Session()
            session.headers.update({'User-Agent': USER_AGENT})
        self.session = session

    def _send_request(self, options: dict, method: str = 'get') -> requests.Response:
        """Send the request to the validator and return the raw response

        GET and HEAD carry the options in the query string, POST sends them
        as a multipart form with ``uploaded_file`` as a file part.
        """
        options = dict(options)
        file_path = options.pop('file_path', None)
        logger.debug(f"Validator request: {method.upper()} {self.validator_uri}")
        try:
            if method == 'get':
                response = self.session.get(self.validator_uri, params=options,
                                            timeout=self.timeout)
            elif method == 'head':
                if not options.get('uri'):
                    raise ValueError("a URI must be provided for HEAD requests.")
                response = self.session.head(self.validator_uri, params=options,
                                             timeout=self.timeout)
            elif method == 'post':
                response = self.session.post(self.validator_uri,
                                             files=self._multipart_fields(options, file_path),
                                             timeout=self.timeout)
            else:
                raise ValueError("request method must be either 'get', 'head' or 'post'")
            response.raise_for_status()
        except requests.RequestException as e:
            self._handle_exception(e)
        return response

    def _multipart_fields(self, options: dict, file_path=None) -> dict:
        fields = {}
        for key, value in options.items():
            if value is None:
                continue
            if key == 'uploaded_file':
                filename = os.path.basename(file_path) if isinstance(file_path, str) else 'file'
                fields[key] = (filename, value, self.upload_content_type)
            else:
                fields[key] = (None, str(value))
        return fields

    def _read_local_file(self, file_path: str) -> str:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()

    def _handle_exception(self, e: Exception, msg: str = ''):
        """Re-raise ``e`` as one of the validator errors"""
        if isinstance(e, requests.RequestException):
            logger.error(f"Validator unavailable at {self.validator_uri}: {e}")
            raise ValidatorUnavailable(f"{msg}{e}") from e
        logger.error(f"Error parsing validator response: {e}", exc_info=True)
        raise ParsingError(f"{msg}{e}") from e


def select_path(parent, *path) -> list:
    """Follow ``path`` one level at a time, matching element local names"""
    nodes = [parent]
    for name in path:
        nodes = [child for node in nodes for child in node.find_all(name, recursive=False)]
    return nodes


def element_params(element) -> dict:
    """Map each child element that has text to its stripped text"""
    params = {}
    for child in element.find_all(recursive=False):
        text = child.get_text().strip()
        if text:
            params[child.name] = text
    return params
