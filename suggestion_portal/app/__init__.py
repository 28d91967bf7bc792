"""
Application layer: the board controller and the pieces it is built from.

- board: session, cache, CRUD actions and derived view
- cache: suggestion cache and detail selection
- capabilities: admin/student capability profiles
- feedback: notification slot and loading flag
"""

from .board import DELETE_CONFIRM_PROMPT, BoardController
from .cache import DetailSelection, SuggestionCache
from .capabilities import ADMIN, STUDENT, AdminProfile, RoleProfile, StudentProfile, profile_for
from .feedback import REFRESHED_MESSAGE, Feedback

__all__ = [
    "DELETE_CONFIRM_PROMPT",
    "BoardController",
    "DetailSelection",
    "SuggestionCache",
    "ADMIN",
    "STUDENT",
    "AdminProfile",
    "RoleProfile",
    "StudentProfile",
    "profile_for",
    "REFRESHED_MESSAGE",
    "Feedback",
]
