from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List

from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)
CreateType = TypeVar("CreateType", bound=BaseModel)


class BaseDAO(ABC, Generic[ModelType, CreateType]):
    """
    Storage interface used by the services.

    Lookups report absence with None rather than raising, so the caller decides
    how a missing record is classified. Route logic only ever sees this
    interface, which keeps the backing store swappable.
    """

    @abstractmethod
    async def create(self, obj_in: CreateType) -> ModelType:
        ...

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[ModelType]:
        ...

    @abstractmethod
    async def list_all(self) -> List[ModelType]:
        ...

    @abstractmethod
    async def update(self, id: str, obj_in: CreateType) -> Optional[ModelType]:
        ...

    @abstractmethod
    async def delete(self, id: str) -> Optional[ModelType]:
        ...

    @abstractmethod
    async def reset(self) -> None:
        ...
