from .constants import CHARSETS, CSS_PROFILES, DOCTYPES
from .exceptions import ParsingError, ValidatorError, ValidatorUnavailable
from .results import Message, Results
from .markup_validator import MarkupValidator
from .css_validator import CSSValidator
