from datetime import datetime
from json import JSONDecodeError, loads
from typing import Callable, List, Optional, Tuple
from urllib.parse import urljoin
from aiohttp import ClientSession, ClientTimeout
from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError
from .service import DesignerNewsService, ServiceResponse
from ..config import Config, get_config
from ..errors import DecodeError
from ..log import log
from ..models.story import Story


class DesignerNewsGateway(DesignerNewsService):
    config: Config

    def __init__(self, config: Config = None):
        self.config = config or get_config()

    @property
    def headers(self) -> dict:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json, text/html",
        }

        if self.config.api_token:
            headers["Authorization"] = f"Bearer {self.config.api_token}"

        return headers

    async def get_top_stories(self, page: int) -> ServiceResponse:
        url = f"{self.config.api_url}/stories"
        status, reason, text = await self.request(url, {"page": page})

        return to_response(status, reason, text, parse_stories_envelope)

    async def search(self, query: str, page: int) -> ServiceResponse:
        url = f"{self.config.base_url}/search"
        params = {"t": "story", "q": query, "p": page}
        status, reason, text = await self.request(url, params)

        return to_response(
            status, reason, text, lambda html: parse_search_results(html, self.config.base_url)
        )

    async def request(self, url: str, params: dict) -> Tuple[int, str, str]:
        log.info(f"Requesting {url} with {params}")

        timeout = ClientTimeout(total=self.config.request_timeout)

        async with ClientSession(headers=self.headers, timeout=timeout) as session:
            async with session.get(url, params=params, proxy=self.config.proxy) as resp:
                return resp.status, resp.reason or "", await resp.text()


def to_response(
    status: int, reason: str, text: str, parse: Callable[[str], Optional[List[Story]]]
) -> ServiceResponse:
    response = ServiceResponse(status=status, message=reason)

    if response.is_successful:
        response.body = parse(text)
    else:
        response.error_body = text

    return response


def parse_stories_envelope(text: str) -> Optional[List[Story]]:
    try:
        envelope = loads(text)
    except JSONDecodeError as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e

    if not isinstance(envelope, dict):
        raise DecodeError("Expected a JSON object wrapping the stories")

    stories = envelope.get("stories")

    if stories is None:
        return None

    try:
        return [Story.model_validate(i) for i in stories]
    except (TypeError, ValidationError) as e:
        raise DecodeError(f"Unable to decode stories: {e}") from e


def parse_search_results(html: str, base_url: str = "") -> List[Story]:
    soup = BeautifulSoup(html, "html.parser")
    stories = [parse_search_item(i, base_url) for i in soup.find_all("li", class_="story")]

    return [i for i in stories if i]


def parse_search_item(item: Tag, base_url: str = "") -> Optional[Story]:
    story_id = item.get("data-id", "")
    link = item.find("a", class_="story-title")
    time = item.find("time")

    title = link.get_text(strip=True) if link else ""

    if not story_id.isdigit() or not title or time is None or not time.get("datetime"):
        log.debug(f"Skipping incomplete search result {story_id or '?'}")
        return None

    try:
        created_at = datetime.fromisoformat(time["datetime"].replace("Z", "+00:00"))
    except ValueError:
        log.warning(f"Skipping search result {story_id}, bad timestamp {time['datetime']}")
        return None

    href = link.get("href")
    author = item.find(class_="story-author")

    return Story(
        id=int(story_id),
        title=title,
        created_at=created_at,
        url=urljoin(base_url, href) if href else None,
        vote_count=leading_int(item.find(class_="vote-count")),
        comment_count=leading_int(item.find(class_="comment-count")),
        user_display_name=author.get_text(strip=True) if author else None,
    )


def leading_int(tag: Optional[Tag]) -> int:
    if tag is None:
        return 0

    words = tag.get_text().split()

    return int(words[0]) if words and words[0].isdigit() else 0
