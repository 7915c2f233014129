"""Persisted schema record."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class StoredSchema(BaseModel):
    """One schema record as kept in the `schema` namespace.

    `document` is the schema definition itself and is persisted under the
    `schema` key. `token` is the signed artifact attached to the record; it is
    stored as-is and never inspected here.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    document: dict[str, Any] = Field(..., alias="schema")
    token: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        """Dict in the persisted layout. `token` is left out when unset.

        Values are passed through untouched, so anything JSON cannot hold
        (NaN, datetimes, bytes) is left for the encoder to reject.
        """
        exclude = {"token"} if self.token is None else None
        return self.model_dump(by_alias=True, exclude=exclude)
