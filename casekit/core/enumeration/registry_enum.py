from enum import Enum


class RegistryEnum(str, Enum):
    COMMENT_STORE = "comment_store"

    SERVICE = "service"
