"""Tool response models shared by the formatter and the parser."""
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolResponseStatus(str, Enum):
    """Outcome reported by a tool."""
    REJECTED = "rejected"   # User declined the tool call
    ERROR = "error"
    FEEDBACK = "feedback"   # User answered with feedback instead of approving
    SUCCESS = "success"


class ToolResponseV2(BaseModel):
    """Result of a tool execution as handed to the formatter.

    Field names follow the wire format used by the agent, hence ``toolName``.
    """
    toolName: str = Field(..., description="Name of the tool that was executed")
    status: ToolResponseStatus = Field(..., description="Outcome of the execution")
    result: Any = Field(default=None, description="Raw result returned by the tool")
    text: Optional[str] = Field(default=None, description="Message presented to the model")
    images: Optional[List[str]] = Field(default=None, description="Base64-encoded images produced by the tool")

    @property
    def has_images(self) -> bool:
        return bool(self.images)


class ParsedToolResponse(BaseModel):
    """Fields recovered from a ``<toolResponse>`` envelope."""
    tool_name: str = Field(..., alias="toolName")
    tool_status: str = Field(..., alias="toolStatus", description="Status text as found, not validated")
    tool_result: str = Field(..., alias="toolResult")
    has_images: bool = Field(default=False, alias="hasImages")

    model_config = ConfigDict(populate_by_name=True)
