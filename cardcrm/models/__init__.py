from cardcrm.models.base import Base
from cardcrm.models.contact import Contact
from cardcrm.models.contact_history import ContactHistory

__all__ = [
    "Base",
    "Contact",
    "ContactHistory",
]
