from typing import Any, Dict, Generic, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from healthtrack.core.errors import ValidationError
from healthtrack.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Shared plumbing for the repositories.

    Concrete repositories declare the schemas they accept so raw dict input
    is validated the same way the API validates request bodies.
    """

    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def _coerce(self, schema: Type[BaseModel], obj_in: Union[BaseModel, Dict[str, Any]]) -> BaseModel:
        if isinstance(obj_in, schema):
            return obj_in
        if isinstance(obj_in, BaseModel):
            obj_in = obj_in.model_dump(exclude_unset=True)
        try:
            return schema.model_validate(obj_in)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e) from e

    def _create_data(self, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> Dict[str, Any]:
        return self._coerce(self.create_schema, obj_in).model_dump()

    def _update_data(self, obj_in: Union[UpdateSchemaType, Dict[str, Any]]) -> Dict[str, Any]:
        return self._coerce(self.update_schema, obj_in).model_dump(exclude_unset=True)
