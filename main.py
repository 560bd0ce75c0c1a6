from flask import Flask, request, jsonify
from typing import Optional

from pydantic import BaseModel, Field, ValidationError
from crawler import Crawler
from handlers.manager import HandlerManager
from w3c_validators import CSSValidator, MarkupValidator, ParsingError, ValidatorUnavailable
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['DEBUG'] = True
handler_manager = HandlerManager()
crawler = Crawler(handler_manager)

class ValidateRequest(BaseModel):
    uri: Optional[str] = Field(default=None, description="URI to validate")
    fragment: Optional[str] = Field(default=None, description="Markup to validate")
    quick: bool = Field(default=False, description="HEAD request, error count only")
    charset: Optional[str] = Field(default=None)
    doctype: Optional[str] = Field(default=None)
    fallback: bool = Field(default=False, description="Use charset/doctype only as fallback")
    debug: bool = Field(default=False)

class CssValidateRequest(BaseModel):
    uri: Optional[str] = Field(default=None, description="URI of the stylesheet")
    text: Optional[str] = Field(default=None, description="CSS to validate")
    profile: Optional[str] = Field(default=None)
    warning: Optional[str] = Field(default=None)
    lang: Optional[str] = Field(default=None)

class CheckRequest(BaseModel):
    url: str = Field(..., description="URL to crawl and check")

def _error(message, status):
    return jsonify({"error": message}), status

@app.route('/api/validate', methods=['POST'])
def validate_markup():
    """Validate markup by URI or fragment"""
    try:
        req = ValidateRequest.parse_obj(request.get_json(silent=True) or {})
        validator = MarkupValidator(validator_uri=handler_manager.get_validator_uri('w3c_validator'),
                                    timeout=handler_manager.get_validator_timeout())
        if req.charset:
            validator.set_charset(req.charset, req.fallback)
        if req.doctype:
            validator.set_doctype(req.doctype, req.fallback)
        if req.debug:
            validator.set_debug()

        if req.quick:
            results = validator.validate_uri_quickly(req.uri)
        elif req.uri:
            results = validator.validate_uri(req.uri)
        else:
            results = validator.validate_text(req.fragment)
        return jsonify(results.dict())
    except (ValidationError, ValueError) as e:
        return _error(str(e), 400)
    except ValidatorUnavailable as e:
        logger.error(f"Validator unavailable: {e}")
        return _error(str(e), 502)
    except ParsingError as e:
        return _error(str(e), 500)
    except Exception as e:
        logger.error(f"Error validating markup: {e}", exc_info=True)
        return _error("Internal server error", 500)

@app.route('/api/validate/css', methods=['POST'])
def validate_css():
    """Validate a stylesheet by URI or text"""
    try:
        req = CssValidateRequest.parse_obj(request.get_json(silent=True) or {})
        validator = CSSValidator(validator_uri=handler_manager.get_validator_uri('css_validator'),
                                 timeout=handler_manager.get_validator_timeout())
        if req.profile:
            validator.set_profile(req.profile)
        if req.warning is not None:
            validator.set_warn_level(req.warning)
        if req.lang:
            validator.set_language(req.lang)

        if req.uri:
            results = validator.validate_uri(req.uri)
        else:
            results = validator.validate_text(req.text)
        return jsonify(results.dict())
    except (ValidationError, ValueError) as e:
        return _error(str(e), 400)
    except ValidatorUnavailable as e:
        logger.error(f"Validator unavailable: {e}")
        return _error(str(e), 502)
    except ParsingError as e:
        return _error(str(e), 500)
    except Exception as e:
        logger.error(f"Error validating CSS: {e}", exc_info=True)
        return _error("Internal server error", 500)

@app.route('/check', methods=['POST'])
def check():
    """Crawl a URL and run the configured handlers on it"""
    try:
        req = CheckRequest.parse_obj(request.get_json(silent=True) or {})
        report = crawler.check(req.url)
        return jsonify(report.dict()), 200 if report.success else 422
    except ValidationError as e:
        return _error(str(e), 400)
    except Exception as e:
        logger.error(f"Error checking URL: {e}", exc_info=True)
        return _error("Internal server error", 500)

if __name__ == '__main__':
    app.run(debug=True, port=8000)
