# pawmart/schemas.py
from pydantic import BaseModel, Field
from typing import Optional

class InsertAck(BaseModel):
    acknowledged: bool
    inserted_id: str = Field(..., serialization_alias="insertedId")

class UpdateAck(BaseModel):
    acknowledged: bool
    matched_count: int = Field(..., serialization_alias="matchedCount")
    modified_count: int = Field(..., serialization_alias="modifiedCount")
    upserted_count: int = Field(0, serialization_alias="upsertedCount")
    upserted_id: Optional[str] = Field(None, serialization_alias="upsertedId")

class DeleteAck(BaseModel):
    acknowledged: bool
    deleted_count: int = Field(..., serialization_alias="deletedCount")
