"""Shared base for the in-memory entity models."""

from collections.abc import Mapping
from datetime import date
from typing import Annotated, Any, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ..core.exceptions import UnknownFieldError, ValidationError
from ..schemas.common import Violation


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Optional date fields arrive as '' from the edit forms
OptionalDate = Annotated[Optional[date], BeforeValidator(_blank_to_none)]

ModelT = TypeVar("ModelT", bound="EntityModel")


class EntityModel(BaseModel):
    """
    Immutable entity base.

    Attributes are snake_case with camelCase aliases so payloads shaped like
    the front-end mock data validate directly.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        validate_default=True,
    )

    @classmethod
    def field_name_for(cls, key: str) -> str | None:
        """Resolve an attribute name or its alias to the attribute name."""
        if key in cls.model_fields:
            return key
        for name, info in cls.model_fields.items():
            if info.alias == key:
                return name
        return None

    def with_changes(self: ModelT, patch: Mapping[str, Any]) -> ModelT:
        """
        Return a re-validated copy with top-level fields replaced.

        Nested lists are replaced wholesale, never merged.

        Raises:
            UnknownFieldError: If a key is not a field of this model
            ValidationError: If the resulting entity fails validation
        """
        updates = {}
        for key, value in patch.items():
            name = self.field_name_for(key)
            if name is None:
                raise UnknownFieldError(type(self).__name__, key)
            updates[name] = value

        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(updates)
        try:
            return type(self).model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                detail=f"Invalid {type(self).__name__} update",
                violations=[
                    Violation(
                        path=".".join(str(part) for part in err["loc"]) or "__root__",
                        message=err["msg"],
                    )
                    for err in e.errors()
                ],
            ) from e
