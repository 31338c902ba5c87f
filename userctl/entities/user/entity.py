"""User domain entity."""

from pydantic import BaseModel, ConfigDict, Field

from userctl.core.validation import validate_age, validate_email, validate_phone, validate_username


class User(BaseModel):
    """User record keyed by email.

    The entity only enforces field types. Format rules live in
    ``userctl.core.validation`` and are applied by the repository before a
    record is built, so records read back from storage are taken as stored.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    email: str = Field(description="User's email address, unique key of the record")
    username: str = Field(description="User's display name")
    phone: str = Field(description="User's phone number, digits only")
    age: int = Field(description="User's age in years")

    @classmethod
    def validated(cls, email: str, username: str, phone: str, age: int | str) -> "User":
        """Run every field validator, then build the record.

        Raises:
            InvalidEmail, InvalidUsername, InvalidPhone, InvalidAge: on the
            first field that fails, checked in that order.
        """
        return cls(
            email=validate_email(email),
            username=validate_username(username),
            phone=validate_phone(phone),
            age=validate_age(age),
        )

    def with_attributes(self, username: str, phone: str, age: int) -> "User":
        """Return a copy with the mutable attributes replaced and the key kept."""
        return self.model_copy(update={"username": username, "phone": phone, "age": age})


RecordSet = dict[str, User]
