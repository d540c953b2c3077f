from contacts_api.repositories.contact import ContactRepository

__all__ = ["ContactRepository"]
