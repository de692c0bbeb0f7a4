"""Constants for User model field names"""


class UserFields:
    """Field name constants for the users collection"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PASSWORD = "password"  # stores the bcrypt hash, never the raw value
    IS_ADMIN = "isAdmin"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
