from contacts_api.utils.cpf import has_only_cpf_characters, normalize_cpf
from contacts_api.utils.email_validation import normalize_email

__all__ = ["has_only_cpf_characters", "normalize_cpf", "normalize_email"]
