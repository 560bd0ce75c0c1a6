import logging
from typing import Optional

from w3c_validators import MarkupValidator
from w3c_validators.results import Message
from . import BaseHandler
from .result import CrawlResult

logger = logging.getLogger(__name__)

class W3cValidatorHandler(BaseHandler):
    """Fails HTML pages the W3C Markup Validator reports errors for

    Options other than ``show_warnings`` are passed through to
    MarkupValidator, e.g. ``validator_uri='http://localhost/w3c-validator/check'``.
    """

    description = "Bad HTML (W3C Validator)"

    def __init__(self, show_warnings: bool = False, validator: MarkupValidator = None, **options):
        super().__init__()
        self.show_warnings = show_warnings
        self.validator = validator or MarkupValidator(**options)

    @property
    def name(self) -> str:
        return "w3c_validator"

    def handle(self, result: CrawlResult) -> Optional[CrawlResult]:
        response = result.response
        if response is None or not (response.html and response.code == 200):
            return None

        results = self.validator.validate_text(response.body)

        messages = list(results.errors)
        if self.show_warnings:
            messages.extend(results.warnings)
        if not messages:
            return None

        logger.info(f"{result.url}: {len(results.errors)} errors, {len(results.warnings)} warnings")
        error_result = result.dup()
        error_result.success = False
        error_result.description = self.description
        error_result.data = format_messages(messages)
        return error_result

def format_message(message: Message) -> str:
    parts = [f"Line: {message.line}"]
    if message.col is not None:
        parts.append(f"column: {message.col}")
    parts.append(f"{message.type}: {message.message}")
    return ", ".join(parts)

def format_messages(messages: list[Message]) -> str:
    return "\n".join(format_message(m) for m in messages)
