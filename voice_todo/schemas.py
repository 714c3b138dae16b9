import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Priority(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


class ParsedTask(BaseModel):
    # Immutable, serialized with the camelCase names the voice UI reads
    model_config = ConfigDict(
        frozen=True,
        use_enum_values=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    title: str
    priority: Priority | None = None
    category: str | None = None
    due_date: str | None = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    due_time: str | None = Field(None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    description: str | None = None
    is_valid: bool
    original_text: str
    confidence: int = Field(..., ge=0, le=100)
    confidence_reasons: tuple[str, ...] = ()


class ParseIn(BaseModel):
    text: str = Field(..., max_length=1000)
    now: datetime | None = None


class ParseOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    task: ParsedTask
    auto_accept: bool
    fallback_title: str
