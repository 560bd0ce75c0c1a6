from typing import Optional, Union
from pydantic import BaseModel, Field

MESSAGE_TYPES = ('error', 'warning')


class Message(BaseModel):
    """A single error or warning reported by the validator"""
    type: str = Field(default='error')
    line: Optional[int] = Field(default=None)
    col: Optional[int] = Field(default=None)
    message: Optional[str] = Field(default=None)
    messageid: Optional[str] = Field(default=None)
    explanation: Optional[str] = Field(default=None)
    source: Optional[str] = Field(default=None)
    uri: Optional[str] = Field(default=None)
    context: Optional[str] = Field(default=None)
    level: Optional[int] = Field(default=None)
    skippedstring: Optional[str] = Field(default=None)
    errortype: Optional[str] = Field(default=None)
    errorsubtype: Optional[str] = Field(default=None)

    @property
    def is_error(self) -> bool:
        return self.type == 'error'

    @property
    def is_warning(self) -> bool:
        return self.type == 'warning'

    def __str__(self) -> str:
        text = self.type.upper()
        if self.uri:
            text += f"; URI: {self.uri}"
        text += f"; line {self.line}"
        if self.message:
            text += f": {self.message}"
        return text


class Results(BaseModel):
    """Outcome of one validation call

    Messages keep the order in which the validator reported them.
    """
    uri: Optional[str] = Field(default=None)
    checked_by: Optional[str] = Field(default=None)
    doctype: Optional[str] = Field(default=None)
    charset: Optional[str] = Field(default=None)
    css_level: Optional[str] = Field(default=None)
    validity: Optional[bool] = Field(default=None)
    messages: list[Message] = Field(default_factory=list)
    debug_messages: dict[str, Optional[str]] = Field(default_factory=dict)

    def add_message(self, message_type: str, params: Union[dict, None] = None) -> Message:
        if message_type not in MESSAGE_TYPES:
            raise ValueError(f"Unknown message type: {message_type}")
        params = dict(params or {})
        params['type'] = message_type
        message = Message.parse_obj(params)
        self.messages.append(message)
        return message

    def add_error(self, params: Union[dict, None] = None) -> Message:
        return self.add_message('error', params)

    def add_warning(self, params: Union[dict, None] = None) -> Message:
        return self.add_message('warning', params)

    def add_debug_message(self, key: str, value: Optional[str]):
        self.debug_messages[key] = value

    @property
    def errors(self) -> list[Message]:
        return [m for m in self.messages if m.is_error]

    @property
    def warnings(self) -> list[Message]:
        return [m for m in self.messages if m.is_warning]

    @property
    def is_valid(self) -> bool:
        return self.validity is True
