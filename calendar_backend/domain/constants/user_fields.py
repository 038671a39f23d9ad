"""Constants for User model field names"""


class UserFields:
    """MongoDB field names for users collection"""

    MONGO_ID = "_id"

    FULL_NAME = "full_name"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
