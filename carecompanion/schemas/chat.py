from pydantic import BaseModel, Field
from datetime import datetime
from uuid import UUID
from typing import Optional
from enum import Enum


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatSessionType(str, Enum):
    GENERAL = "general"
    ASSESSMENT = "assessment"
    THERAPY = "therapy"


class ChatMessage(BaseModel):
    role: MessageRole
    content: str
    timestamp: int  # epoch milliseconds
    message_id: str


class AssistantContext(BaseModel):
    """Context blob handed to the assistant alongside the user's message."""
    child_age: Optional[int] = None  # months
    recent_assessments: Optional[list[str]] = None
    progress_data: Optional[str] = None


class ChatSessionCreate(BaseModel):
    child_id: Optional[UUID] = None
    title: str = Field(min_length=1, max_length=255)
    messages: list[ChatMessage] = []
    session_type: ChatSessionType = ChatSessionType.GENERAL


class ChatMessagesAppend(BaseModel):
    messages: list[ChatMessage] = Field(min_length=1)


class ChatSessionResponse(BaseModel):
    id: UUID
    user_id: UUID
    child_id: Optional[UUID]
    title: str
    session_type: ChatSessionType
    messages: list[ChatMessage]
    last_activity: datetime
    created_at: datetime

    class Config:
        from_attributes = True


class AssistantRequest(BaseModel):
    message: str = Field(min_length=1)
    context: Optional[AssistantContext] = None


class AssistantReply(BaseModel):
    response: str


class ChatRequest(BaseModel):
    message: str = Field(min_length=1)
    session_id: Optional[UUID] = None
    child_id: Optional[UUID] = None
    session_type: ChatSessionType = ChatSessionType.GENERAL


class ChatReply(BaseModel):
    session_id: UUID
    response: str
