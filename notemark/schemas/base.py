from typing import ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase or snake_case keys, emits camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PatchModel(CamelModel):
    """Partial update body: omitted keys are left alone.

    Keys sent as ``null`` are only accepted for fields listed in ``nullable``.
    """

    nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable:
                raise ValueError(f"{name} may not be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
