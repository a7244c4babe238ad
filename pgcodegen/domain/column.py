"""Column domain - a single column descriptor handed to type resolution."""

from pydantic import BaseModel, Field


class Column(BaseModel):
    """
    A column as seen by the code generator.

    Nullability and array-ness are computed upstream; resolution only reads them.
    """

    name: str = Field("", description="Column name (empty for anonymous result columns)")
    declared_type: str = Field(
        ..., alias="type", min_length=1, description="SQL type as declared"
    )
    not_null: bool = Field(False, description="Column has a NOT NULL constraint")
    is_array: bool = Field(False, description="Column holds an array of declared_type")

    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}

    @property
    def effective_not_null(self) -> bool:
        """Arrays are never represented as nullable scalars."""
        return self.not_null or self.is_array
