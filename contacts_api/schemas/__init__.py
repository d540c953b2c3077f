from contacts_api.schemas import common, contact

__all__ = [
    "common",
    "contact",
]
