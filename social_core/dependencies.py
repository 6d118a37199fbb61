from fastapi import Depends
from .configs import get_settings
from .services import ConversationManager, EngagementManager, RelationshipManager
from .store import BeanieDocumentStore, DocumentStore


def get_store() -> DocumentStore:
    return BeanieDocumentStore()

def get_relationship_manager(store: DocumentStore = Depends(get_store)) -> RelationshipManager:
    settings = get_settings()
    return RelationshipManager(store, reject_duplicates=settings.reject_duplicate_friend_requests)

def get_engagement_manager(store: DocumentStore = Depends(get_store)) -> EngagementManager:
    return EngagementManager(store)

def get_conversation_manager(store: DocumentStore = Depends(get_store)) -> ConversationManager:
    return ConversationManager(store)
