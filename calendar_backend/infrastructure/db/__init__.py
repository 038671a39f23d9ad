from .mongo_connection import (
    get_database,
    close_database,
    get_user_collection,
    get_event_collection,
    get_counter_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_event_repository import MongoEventRepository

__all__ = [
    "get_database",
    "close_database",
    "get_user_collection",
    "get_event_collection",
    "get_counter_collection",
    "MongoUserRepository",
    "MongoEventRepository",
]
