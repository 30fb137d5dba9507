from typing import Generic, TypeVar, Optional, List
from pydantic import BaseModel, computed_field

T = TypeVar("T")


class ResponseModel(BaseModel, Generic[T]):
    """Standard API response envelope"""
    code: int = 200
    data: Optional[T] = None
    msg: str = "success"

    @classmethod
    def error(cls, code: int, msg: str) -> "ResponseModel[T]":
        return cls(code=code, data=None, msg=msg)


class PagedData(BaseModel, Generic[T]):
    """Paginated data model"""
    records: List[T]
    total: int
    current: int
    size: int

    @computed_field
    @property
    def pages(self) -> int:
        return (self.total + self.size - 1) // self.size if self.size else 0
