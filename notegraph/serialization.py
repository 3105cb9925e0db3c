"""Field-named record and JSON transport for domain models."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from notegraph.errors import SerializationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def to_record(model: BaseModel) -> dict[str, Any]:
    """Convert a model into a JSON-compatible mapping of field name to value."""
    return model.model_dump(mode="json")


def from_record(model_cls: type[ModelT], record: dict[str, Any]) -> ModelT:
    try:
        return model_cls.model_validate(record)
    except ValidationError as e:
        raise SerializationError(str(e)) from e


def to_json(model: BaseModel) -> str:
    return model.model_dump_json()


def from_json(model_cls: type[ModelT], data: str | bytes) -> ModelT:
    """Decode a model from JSON text.

    Raises:
        SerializationError: If the data is not valid JSON or does not fit the model
    """
    try:
        return model_cls.model_validate_json(data)
    except ValidationError as e:
        raise SerializationError(str(e)) from e
