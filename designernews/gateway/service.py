from abc import ABC, abstractmethod
from typing import List, Optional
from pydantic import BaseModel
from ..models.story import Story


class ServiceResponse(BaseModel):
    status: int
    message: str = ""
    body: Optional[List[Story]] = None
    error_body: Optional[str] = None

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status < 300

    @classmethod
    def success(cls, stories: List[Story], status: int = 200, message: str = "OK"):
        return cls(status=status, message=message, body=stories)

    @classmethod
    def error(cls, status: int, error_body: Optional[str] = None, message: str = ""):
        if 200 <= status < 300:
            raise ValueError(f"Error responses need a non-2xx status, got {status}")

        return cls(status=status, message=message, error_body=error_body)


class DesignerNewsService(ABC):
    @abstractmethod
    async def get_top_stories(self, page: int) -> ServiceResponse:
        pass

    @abstractmethod
    async def search(self, query: str, page: int) -> ServiceResponse:
        pass
