"""URL Processing Schemas: request/response for POST /process-url.

Invariants:
    - Required/membership checks happen in services.process_url so each failure
      gets its own fixed message; the schema only rejects non-string values
"""

from pydantic import BaseModel, StrictStr, field_validator


class ProcessUrlRequest(BaseModel):
    url: StrictStr = ""
    operation: StrictStr = ""

    @field_validator("url", "operation", mode="before")
    @classmethod
    def null_as_empty(cls, v: object) -> object:
        return "" if v is None else v


class ProcessUrlResponse(BaseModel):
    processed_url: str
