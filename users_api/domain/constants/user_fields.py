"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    FAVORITES = "favorites"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    VERSION = "__v"


class UpdateFields:
    """Keys recognised in a user update payload"""
    NEW_NAME = "newName"
    NEW_USERNAME = "newUsername"
    NEW_EMAIL = "newEmail"
    NEW_PASSWORD = "newPassword"
    PASSWORD = "password"
    FAVORITES = "favorites"
