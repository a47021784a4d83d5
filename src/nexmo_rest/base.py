from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class ResponseModel(BaseModel):
    """
    Base for decoded API replies.

    Keys are read by their wire names, unknown keys are ignored, and a JSON
    ``null`` decodes to the field's default ("" or 0) instead of failing.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value
