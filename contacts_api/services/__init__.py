from contacts_api.services.contact import ContactPageResult, ContactService

__all__ = ["ContactPageResult", "ContactService"]
