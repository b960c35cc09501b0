import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.core.errors import IndexOutOfRangeError, InvalidArgumentError
from app.domain.normalization import normalize, split_full_name


logger = logging.getLogger(__name__)

UNASSIGNED_ID = -1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Marks set_name() called with the full name only
_FULL_NAME = object()


class CustomerDomain(BaseModel):
    """The pure domain representation of a Customer.

    A mutable record holding identity, a split first/last name and an ordered
    list of contact strings (phone numbers, e-mail addresses, ...). Every
    string is normalized on the way in, including direct attribute
    assignment, because the model validates assignments.

    Mutators return the instance itself so calls can be chained:
    ``CustomerDomain().set_id(7).set_name("Schmidt, Maria").add_contact("...")``.

    Attributes:
        id (int): Signed 64-bit identifier; -1 while unassigned.
        first_name (str): First name(s), possibly empty.
        last_name (str): Last name, possibly empty.
        contacts (tuple[str, ...]): Contacts in insertion order.
    """
    # 1. Identity
    id: int = Field(
        default=UNASSIGNED_ID,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Identifier, -1 while unassigned"
    )

    # 2. Name
    first_name: str = Field(default="", description="First name(s)")
    last_name: str = Field(default="", description="Last name")

    # 3. Contacts (immutable snapshot, replaced on every change)
    contacts: tuple[str, ...] = Field(default=(), description="Contacts in insertion order")

    @field_validator('first_name', 'last_name')
    @classmethod
    def normalize_name_part(cls, v: str) -> str:
        """Strips quotes, delimiters and extra whitespace from name parts."""
        return normalize(v)

    @field_validator('contacts')
    @classmethod
    def normalize_contacts(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Normalizes every contact entry, keeping order and duplicates."""
        return tuple(normalize(contact) for contact in v)

    @classmethod
    def from_name(cls, full_name: str | None) -> "CustomerDomain":
        """Creates a customer from a single free-text name.

        Args:
            full_name (str | None): e.g. "Maria Schmidt" or "Schmidt, Maria".

        Returns:
            CustomerDomain: A new customer with the name already split.

        Raises:
            InvalidArgumentError: If the name is None or blank.
        """
        return cls().set_name(full_name)

    # --- Identity ---

    def get_id(self) -> int:
        return self.id

    def set_id(self, id: int) -> "CustomerDomain":
        self.id = id
        return self

    # --- Name ---

    def get_first_name(self) -> str:
        return self.first_name

    def get_last_name(self) -> str:
        return self.last_name

    @property
    def full_name(self) -> str:
        """Display name, "first last", skipping empty parts."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def set_name(self, first: str | None, last: Any = _FULL_NAME) -> "CustomerDomain":
        """Sets first and last name, or splits a single free-text name.

        ``set_name("Maria", "Schmidt")`` stores both parts as given (normalized);
        ``set_name("Maria Schmidt")`` delegates to :meth:`split_name`.

        Args:
            first (str | None): First name, or the full name when called alone.
            last (str | None): Last name.

        Returns:
            CustomerDomain: This customer.

        Raises:
            InvalidArgumentError: If a given part is None, or the full name is blank.
        """
        if last is _FULL_NAME:
            self.split_name(first)
            return self

        if first is None or last is None:
            raise InvalidArgumentError("first and last name may not be None")

        self.first_name = first
        self.last_name = last
        return self

    def split_name(self, full_name: str | None) -> None:
        """Parses a free-text name into first_name and last_name.

        Raises:
            InvalidArgumentError: If the name is None or blank.
        """
        self.first_name, self.last_name = split_full_name(full_name)

    # --- Contacts ---

    def contacts_count(self) -> int:
        return len(self.contacts)

    def get_contacts(self) -> tuple[str, ...]:
        """Read-only view of the contacts; tuples reject item assignment."""
        return self.contacts

    def add_contact(self, contact: str | None) -> "CustomerDomain":
        """Appends a normalized contact to the end of the list.

        Raises:
            InvalidArgumentError: If the contact is None.
        """
        if contact is None:
            raise InvalidArgumentError("contact may not be None")

        self._store_contacts((*self.contacts, normalize(contact)))
        return self

    def delete_contact(self, index: int) -> int:
        """Removes the contact at a zero-based position.

        Negative indices are rejected rather than counted from the end.

        Args:
            index (int): Position in ``[0, contacts_count())``.

        Returns:
            int: Number of removed contacts, always 1.

        Raises:
            IndexOutOfRangeError: If the index is out of range. Contacts are
                left untouched.
        """
        count = len(self.contacts)
        if not 0 <= index < count:
            raise IndexOutOfRangeError(
                f"Contact index {index} out of range for {count} contact(s)"
            )

        self._store_contacts(self.contacts[:index] + self.contacts[index + 1:])
        logger.debug(f"Customer {self.id}: removed contact at position {index}.")
        return 1

    def delete_all_contacts(self) -> None:
        self.contacts = ()

    def _store_contacts(self, contacts: tuple[str, ...]) -> None:
        # Entries are already normalized; skip re-validating the whole tuple
        self.__dict__["contacts"] = contacts
        self.model_fields_set.add("contacts")

    model_config = {
        "from_attributes": True,
        "validate_assignment": True, # Keeps direct assignments normalized too
        "json_schema_extra": {
            "example": {
                "id": 42,
                "first_name": "Maria",
                "last_name": "Schmidt",
                "contacts": ["+49 30 1234567", "maria.schmidt@example.com"]
            }
        }
    }
