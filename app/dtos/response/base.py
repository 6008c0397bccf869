"""Base class for allow-list response projections."""

from collections.abc import Iterable, Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict


def _read(source: Any, name: str, alias: str | None) -> Any:
    if isinstance(source, Mapping):
        # Mappings may use either attribute names or wire (camelCase) names
        if name in source or alias is None:
            return source.get(name)
        return source.get(alias)
    return getattr(source, name, None)


class ResponseDto(BaseModel):
    """Projection of a persisted entity onto a fixed set of fields.

    Only the fields declared on the subclass are read from the source, so
    columns added to a model never reach the client by accident.
    Sources may be ORM entities or mappings keyed by attribute name.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
    )

    @classmethod
    def from_model(cls, model: Any) -> Self:
        """Project one entity."""
        return cls.model_validate(
            {name: _read(model, name, info.alias) for name, info in cls.model_fields.items()},
        )

    @classmethod
    def from_model_array(cls, models: Iterable[Any]) -> list[Self]:
        """Project entities one-to-one, keeping their order."""
        return [cls.from_model(model) for model in models]

    def to_dict(self) -> dict[str, Any]:
        """Wire representation with camelCase keys."""
        return self.model_dump(by_alias=True)
