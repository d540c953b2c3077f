# noqa: F401 to ensure models are imported for metadata
from contacts_api.models.contact import Contact

__all__ = [
    "Contact",
]
