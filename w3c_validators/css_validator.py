import logging

from bs4 import BeautifulSoup

from .constants import CSS_PROFILES, CSS_VALIDATOR_URI, CSS_WARNING_LEVELS, SOAP_OUTPUT_PARAM
from .exceptions import ParsingError
from .results import Results
from .validator import Validator, element_params

logger = logging.getLogger(__name__)

RESPONSE_FIELDS = {
    'uri': 'uri',
    'checked_by': 'checkedby',
    'validity': 'validity',
    'css_level': 'csslevel',
}


class CSSValidator(Validator):
    """Client for the W3C CSS Validation Service (jigsaw)"""

    default_uri = CSS_VALIDATOR_URI

    def set_profile(self, profile: str):
        """CSS profile to validate against, e.g. ``css21`` (see CSS_PROFILES)"""
        if profile not in CSS_PROFILES:
            logger.warning(f"Unknown CSS profile '{profile}', sending it as given")
        self.options['profile'] = profile

    def set_warn_level(self, level=2):
        """'no' for no warnings, 0 for fewer warnings, 1 or 2 for more"""
        if str(level).lower() not in CSS_WARNING_LEVELS:
            return
        self.options['warning'] = level

    def set_language(self, lang: str = 'en'):
        """Language of the messages in the response"""
        self.options['lang'] = lang

    def validate_uri(self, uri) -> Results:
        return self._validate({'uri': uri})

    def validate_text(self, text: str) -> Results:
        return self._validate({'text': text})

    def validate_file(self, file_path) -> Results:
        """Validate a local stylesheet, given as a path or an open file object"""
        if hasattr(file_path, 'read'):
            src = file_path.read()
        else:
            src = self._read_local_file(file_path)
        return self.validate_text(src)

    def _validate(self, options: dict) -> Results:
        options = self._request_options(options)
        response = self._send_request(options, 'get')
        self.results = self._parse_soap_response(response.content)
        logger.debug(f"CSS validation: {len(self.results.errors)} errors, "
                     f"{len(self.results.warnings)} warnings")
        return self.results

    def _request_options(self, options: dict) -> dict:
        options = {**self.options, **options}
        options['output'] = SOAP_OUTPUT_PARAM

        if options.get('uri') is None and options.get('text') is None:
            raise ValueError("an uri or text is required.")

        if options.get('uri') is not None and not isinstance(options['uri'], str):
            options['uri'] = str(options['uri'])

        return options

    def _parse_soap_response(self, body) -> Results:
        try:
            soup = BeautifulSoup(body, 'xml')
            response_el = soup.find('cssvalidationresponse')
            if response_el is None:
                raise ParsingError("no cssvalidationresponse in response")

            params = {}
            for local_key, remote_key in RESPONSE_FIELDS.items():
                el = response_el.find(remote_key, recursive=False)
                if el is not None:
                    params[local_key] = el.get_text().strip()
            if 'validity' in params:
                params['validity'] = params['validity'].lower() == 'true'

            results = Results.parse_obj(params)

            # Each list names the stylesheet its messages belong to
            for list_type in ('warninglist', 'errorlist'):
                for message_list in response_el.find_all(list_type):
                    uri_el = message_list.find('uri', recursive=False)
                    uri = uri_el.get_text().strip() if uri_el is not None else None
                    for message_type in ('warning', 'error'):
                        for message in message_list.find_all(message_type, recursive=False):
                            message_params = element_params(message)
                            message_params['uri'] = uri
                            results.add_message(message_type, message_params)
            return results
        except ParsingError:
            raise
        except Exception as e:
            self._handle_exception(e)
