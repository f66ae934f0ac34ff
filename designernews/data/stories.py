from typing import List
from ..errors import ResponseError
from ..gateway.service import DesignerNewsService, ServiceResponse
from ..log import log
from ..models.result import Error, Result, Success
from ..models.story import Story


class StoriesRemoteDataSource:
    """Loads stories from the Designer News service.

    Every call is forwarded once to the service and the outcome is reported
    as a Result; nothing is retried or cached here.
    """

    service: DesignerNewsService

    def __init__(self, service: DesignerNewsService):
        self.service = service

    async def load_top_stories(self, page: int) -> Result[List[Story]]:
        try:
            response = await self.service.get_top_stories(page)
        except Exception as e:
            log.warning(f"Failed to load top stories page {page}: {e}")
            return Error(e)

        return self.to_result(response, f"top stories page {page}")

    async def search(self, query: str, page: int) -> Result[List[Story]]:
        try:
            response = await self.service.search(query, page)
        except Exception as e:
            log.warning(f"Failed to search stories for '{query}' page {page}: {e}")
            return Error(e)

        return self.to_result(response, f"search '{query}' page {page}")

    def to_result(self, response: ServiceResponse, label: str) -> Result[List[Story]]:
        if response.is_successful and response.body is not None:
            return Success(response.body)

        log.warning(f"Unsuccessful response for {label}: {response.status} {response.message}")

        return Error(ResponseError(response.status, response.message, response.error_body))
