from pydantic import BaseModel, ConfigDict, Field, StrictInt

from tone_picker.models import AdjustmentResult


class AdjustToneRequest(BaseModel):
    # Missing values are allowed through so the service reports them with its own messages
    text: str | None = Field(None, description="Text to rewrite; must be non-empty after trimming")
    x: StrictInt | None = Field(None, description="0=formal, 1=neutral, 2=casual")
    y: StrictInt | None = Field(None, description="0=professional, 1=neutral, 2=casual")


class ToneOut(BaseModel):
    x: str
    y: str
    description: str


class AdjustToneResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    adjusted_text: str = Field(..., alias="adjustedText")
    tone: ToneOut
    cached: bool

    @classmethod
    def from_result(cls, result: AdjustmentResult) -> "AdjustToneResponse":
        return cls(
            adjusted_text=result.adjusted_text,
            tone=ToneOut(**result.tone.to_dict()),
            cached=result.cached,
        )


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "healthy"
    timestamp: str
    cache_size: int = Field(..., alias="cacheSize")


class ErrorResponse(BaseModel):
    error: str
