"""
Shared repository plumbing

Every repository gets the Database gateway injected and validates the
request payload before any statement reaches the database.
"""
from typing import Any, Dict, Iterable, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inventory_api.core.database import Database
from inventory_api.core.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseRepository:
    """Base class holding the injected Database gateway"""

    def __init__(self, db: Database):
        self._db = db

    @property
    def db(self) -> Database:
        return self._db

    @staticmethod
    def _require_fields(data: Dict[str, Any], required: Iterable[str]) -> None:
        """
        Raise ValidationError unless every required field is present and truthy

        0, "" and None all count as missing.
        """
        missing = [field for field in required if not data.get(field)]
        if missing:
            raise ValidationError("Missing required fields", fields=missing)

    @staticmethod
    def _build(model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
        """Validate a payload into a domain model, reporting bad values as ValidationError"""
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            fields = sorted({str(error['loc'][0]) for error in e.errors() if error.get('loc')})
            raise ValidationError(
                f"Invalid field values: {', '.join(fields)}", fields=fields
            ) from e
