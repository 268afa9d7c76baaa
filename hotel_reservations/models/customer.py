"""Customer domain model."""

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """Hotel customer, identified by document number."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    email: str
    phone: str
    document_number: str = Field(min_length=1, description="Identity key")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self.document_number == other.document_number

    def __hash__(self) -> int:
        return hash(self.document_number)

    def __str__(self) -> str:
        return (
            f"Customer: {self.name} (Email: {self.email}, "
            f"Phone: {self.phone}, Document: {self.document_number})"
        )
