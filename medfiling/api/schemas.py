from pydantic import BaseModel, ConfigDict, Field


class UploadResponse(BaseModel):
    success: bool = True
    text: str
    pages: int
    info: dict[str, str] = Field(default_factory=dict)


class ExtractRequest(BaseModel):
    text: str = ""


class ExtractResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fields: dict[str, str]
    confidence: str
    missing_fields: list[str] = Field(default_factory=list, alias="missingFields")
    message: str | None = None


class SubmitResponse(BaseModel):
    success: bool = True
