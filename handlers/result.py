from typing import Optional
from pydantic import BaseModel, Field

class CrawlResponse(BaseModel):
    code: int = Field(default=0)
    body: str = Field(default="")
    content_type: str = Field(default="")
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def html(self) -> bool:
        return 'html' in self.content_type.lower()

    @property
    def css(self) -> bool:
        return 'text/css' in self.content_type.lower()

class CrawlResult(BaseModel):
    url: str = Field(default="")
    success: bool = Field(default=True)
    response: Optional[CrawlResponse] = Field(default=None)
    description: str = Field(default="")
    data: str = Field(default="")

    def dup(self) -> "CrawlResult":
        """Deep copy of this result, safe to annotate"""
        return self.copy(deep=True)
