from datetime import datetime
from unittest.mock import Mock

import pytest

from designernews.data.stories import StoriesRemoteDataSource
from designernews.gateway.service import DesignerNewsService
from designernews.models.story import Story

ERROR_RESPONSE_BODY = '{"errors": [{"message": "Bad request"}]}'


@pytest.fixture
def error_body():
    return ERROR_RESPONSE_BODY


@pytest.fixture
def created_date():
    return datetime(2018, 2, 13)


@pytest.fixture
def stories(created_date):
    return [
        Story(id=45, title="Plaid 2.0 was released", created_at=created_date),
        Story(id=876, title="Plaid 2.0 is bug free", created_at=created_date),
    ]


@pytest.fixture
def service():
    """Service double whose async methods are AsyncMocks."""
    return Mock(spec=DesignerNewsService)


@pytest.fixture
def data_source(service):
    return StoriesRemoteDataSource(service)
