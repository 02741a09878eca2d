# (c) Nelen & Schuurmans

from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError

from .exceptions import InvalidFragment

__all__ = ["ValueObject"]


T = TypeVar("T", bound="ValueObject")


class ValueObject(BaseModel):
    """Immutable model, compared and hashed by its field values."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(cls: type[T], **values) -> T:
        try:
            return cls(**values)
        except ValidationError as e:
            raise InvalidFragment(e, type_name=cls.__name__)

    def update(self: T, **values) -> T:
        return self.create(**{**self.model_dump(), **values})

    def __hash__(self):
        return hash((self.__class__, *self.__dict__.values()))
