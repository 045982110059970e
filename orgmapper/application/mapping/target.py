"""In-progress mapping target."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from orgmapper.application.exceptions import TargetConstructionError, UnknownTargetFieldError

T = TypeVar("T", bound=BaseModel)


class MappingTarget(Generic[T]):
    """
    Mutable builder for a DTO under construction.

    Field copying and enrichment hooks write into the builder; the DTO is
    only instantiated by ``build`` once every phase has completed, so a
    failing phase never leaves a partially populated DTO behind.
    """

    def __init__(self, target_type: type[T]):
        self.target_type = target_type
        self._values: dict[str, Any] = {}

    def set(self, field: str, value: Any) -> None:
        """
        Set a target field, replacing any earlier write.

        Raises:
            UnknownTargetFieldError: If the DTO does not declare ``field``
        """
        if field not in self.target_type.model_fields:
            raise UnknownTargetFieldError(self.target_type, field)
        self._values[field] = value

    def get(self, field: str, default: Any = None) -> Any:
        return self._values.get(field, default)

    def is_set(self, field: str) -> bool:
        return field in self._values

    def values(self) -> dict[str, Any]:
        return dict(self._values)

    def build(self) -> T:
        """
        Instantiate the DTO from the collected values.

        Raises:
            TargetConstructionError: If the values fail DTO validation
        """
        try:
            return self.target_type(**self._values)
        except ValidationError as e:
            raise TargetConstructionError(self.target_type, str(e)) from e

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"MappingTarget[{self.target_type.__name__}]({fields})"
