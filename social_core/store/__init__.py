from .base import DocumentStore
from .beanie_store import BeanieDocumentStore

__all__ = [
    "DocumentStore",
    "BeanieDocumentStore",
]
