import os
import yaml
import logging
from typing import Optional
from . import BaseHandler
import importlib

logger = logging.getLogger(__name__)

# Environment variables overriding a handler's validator endpoint
ENV_VALIDATOR_URIS = {
    'w3c_validator': 'W3C_MARKUP_VALIDATOR_URI',
    'css_validator': 'W3C_CSS_VALIDATOR_URI',
}

# Keys of the validators: section holding each handler's endpoint
CONFIG_VALIDATOR_URIS = {
    'w3c_validator': 'markup_uri',
    'css_validator': 'css_uri',
}

class HandlerManager:
    """Manages handler plugins and their configuration"""

    def __init__(self, config_path='config.yaml'):
        if not os.path.isabs(config_path):
            # Relative to the project directory
            main_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
            config_path = os.path.join(main_dir, config_path)
        self.config_path = config_path
        self.config = {}
        self.handlers = []
        self._load_config()

    def _load_config(self):
        """Load handler configurations from YAML file"""
        try:
            with open(self.config_path, 'r') as f:
                self.config = yaml.safe_load(f) or {}
        except Exception as e:
            logger.error(f"Error loading handler config {self.config_path}: {e}")
            self.config = {}

        validator_config = self.config.get('validators') or {}

        # Clear existing handlers
        self.handlers = []

        for handler_config in self.config.get('handlers') or []:
            handler_type = handler_config.get('type')
            if not handler_type:
                continue

            options = dict(handler_config.get('options') or {})
            if 'timeout' in validator_config:
                options.setdefault('timeout', validator_config['timeout'])
            env_uri = os.getenv(ENV_VALIDATOR_URIS.get(handler_type, ''))
            config_uri = validator_config.get(CONFIG_VALIDATOR_URIS.get(handler_type, ''))
            if env_uri:
                options['validator_uri'] = env_uri
            elif config_uri:
                options.setdefault('validator_uri', config_uri)

            handler = self.get_handler_by_type(handler_type, options)
            if handler:
                self.handlers.append(handler)

    def get_handler_by_type(self, handler_type: str, options: dict = None) -> Optional[BaseHandler]:
        """Instantiate handlers.<handler_type>.<HandlerType>Handler"""
        try:
            module = importlib.import_module(f'.{handler_type}', 'handlers')
            class_name = ''.join(part.capitalize() for part in handler_type.split('_')) + 'Handler'
            handler_class = getattr(module, class_name)
            return handler_class(**(options or {}))
        except Exception as e:
            logger.error(f"Error loading handler {handler_type}: {e}", exc_info=True)
            return None

    def get_handlers(self) -> list[BaseHandler]:
        return list(self.handlers)

    def get_validator_uri(self, handler_type: str) -> Optional[str]:
        """Validator endpoint for a handler type

        The environment variable wins over the validators: section of the
        config; None means the client's public default.
        """
        env_uri = os.getenv(ENV_VALIDATOR_URIS.get(handler_type, ''))
        if env_uri:
            return env_uri
        validator_config = self.config.get('validators') or {}
        return validator_config.get(CONFIG_VALIDATOR_URIS.get(handler_type, '')) or None

    def get_validator_timeout(self, default: float = 30) -> float:
        validator_config = self.config.get('validators') or {}
        return validator_config.get('timeout', default)
