from datetime import datetime
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict


class StoryLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: Optional[int] = None
    comments: Tuple[int, ...] = ()
    upvotes: Tuple[int, ...] = ()
    downvotes: Tuple[int, ...] = ()


class Story(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    created_at: datetime
    url: Optional[str] = None
    comment: Optional[str] = None
    comment_html: Optional[str] = None
    comment_count: int = 0
    vote_count: int = 0
    hotness: Optional[float] = None
    user_display_name: Optional[str] = None
    user_portrait_url: Optional[str] = None
    user_job: Optional[str] = None
    links: Optional[StoryLinks] = None

    @property
    def user_id(self) -> Optional[int]:
        return self.links.user if self.links else None
