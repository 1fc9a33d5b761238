"""
Wire <-> LangChain message conversion.

The HTTP API speaks ``{role, content}`` messages; the runtime works with
LangChain message objects.
"""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage, ToolMessage
from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant", "system", "tool"]


class ChatMessage(BaseModel):
    id: Optional[str] = None
    role: Role
    content: Union[str, list[Any]]
    tool_call_id: Optional[str] = Field(default=None, alias="toolCallId")
    # Display-only status merged from the stream's data channel
    status: Optional[Any] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_langchain(self) -> BaseMessage:
        if self.role == "user":
            return HumanMessage(content=self.content, id=self.id)
        if self.role == "assistant":
            return AIMessage(content=self.content, id=self.id)
        if self.role == "system":
            return SystemMessage(content=self.content, id=self.id)
        return ToolMessage(content=self.content, id=self.id, tool_call_id=self.tool_call_id or "")


def to_langchain_messages(messages: list[ChatMessage]) -> list[BaseMessage]:
    return [m.to_langchain() for m in messages]
