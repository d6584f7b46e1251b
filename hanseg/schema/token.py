from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class Token(BaseModel):
    """
    A single dictionary record.

    Each record read from a dictionary source becomes one token:
    - text: the word itself
    - frequency: raw occurrence count (0 when the record omits it)
    - pos: optional part-of-speech tag
    """
    text: str = Field(..., min_length=1, description="The word (non-empty character sequence)")
    frequency: float = Field(default=0.0, ge=0.0, allow_inf_nan=False, description="Raw word frequency (finite)")
    pos: Optional[str] = Field(None, description="Part-of-speech tag (e.g., 'ns', 'n')")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "text": "北京",
                "frequency": 34488.0,
                "pos": "ns"
            }
        }
    )
