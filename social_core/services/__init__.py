from .relationship_manager import RelationshipManager
from .engagement_manager import EngagementManager
from .conversation_manager import ConversationManager

__all__ = [
    "RelationshipManager",
    "EngagementManager",
    "ConversationManager",
]
