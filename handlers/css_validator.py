import logging
from typing import Optional

from w3c_validators import CSSValidator
from . import BaseHandler
from .result import CrawlResult
from .w3c_validator import format_messages

logger = logging.getLogger(__name__)

class CssValidatorHandler(BaseHandler):
    """Fails stylesheets the W3C CSS Validator reports errors for"""

    description = "Bad CSS (W3C Validator)"

    def __init__(self, show_warnings: bool = False, validator: CSSValidator = None,
                 profile: str = None, warning=None, lang: str = None, **options):
        super().__init__()
        self.show_warnings = show_warnings
        self.validator = validator or CSSValidator(**options)
        if profile:
            self.validator.set_profile(profile)
        if warning is not None:
            self.validator.set_warn_level(warning)
        if lang:
            self.validator.set_language(lang)

    @property
    def name(self) -> str:
        return "css_validator"

    def handle(self, result: CrawlResult) -> Optional[CrawlResult]:
        response = result.response
        if response is None or not (response.css and response.code == 200):
            return None

        results = self.validator.validate_text(response.body)

        messages = list(results.errors)
        if self.show_warnings:
            messages.extend(results.warnings)
        if not messages:
            return None

        logger.info(f"{result.url}: {len(results.errors)} CSS errors, {len(results.warnings)} warnings")
        error_result = result.dup()
        error_result.success = False
        error_result.description = self.description
        error_result.data = format_messages(messages)
        return error_result
