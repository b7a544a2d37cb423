"""Account — one provisioned identity.

INVARIANT: Accounts are immutable. Only AccountRegistry constructs them,
and only after the password passed the strength policy.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_MASK_CHAR = "*"


class Account(BaseModel):
    """A registered account with its canonical username.

    The password is kept verbatim but never serialized or shown in
    ``repr``. Display goes through :meth:`masked_password`.
    """

    model_config = {"frozen": True}

    normalized_username: str = Field(min_length=1)
    password: str = Field(repr=False, exclude=True)

    def masked_password(self, mask_char: str = DEFAULT_MASK_CHAR) -> str:
        """One *mask_char* per password character."""
        return mask_char * len(self.password)

    def render(self, mask_char: str = DEFAULT_MASK_CHAR) -> str:
        return (
            f"Username: {self.normalized_username} | "
            f"Password: {self.masked_password(mask_char)} (meets strength requirements)"
        )

    def __str__(self) -> str:
        return self.render()
