from carecompanion.models.base import Base
from carecompanion.models.profile import Profile
from carecompanion.models.child import Child
from carecompanion.models.screening import ScreeningSession
from carecompanion.models.progress import ProgressEntry
from carecompanion.models.chat import ChatSession

__all__ = [
    "Base",
    "Profile",
    "Child",
    "ScreeningSession",
    "ProgressEntry",
    "ChatSession",
]
