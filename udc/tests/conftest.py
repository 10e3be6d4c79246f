"""
Pytest configuration and fixtures for udc tests
"""

from typing import Callable, Generator, List

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from udc.database.session import create_db_engine, make_session_context, SessionFactory
from udc.models import create_all_tables
from udc.schemas.user import User
from udc.services.printer import BufferSink
from udc.services.users import UserService


def make_fixture_users() -> List[User]:
    return [
        User(id=1, name="Mark", job="barista", company="*bx"),
        User(id=2, name="Jane", job="manager", company="*bx"),
        User(id=3, name="Alex", job="cooper", company="Barrels-r-Us"),
        User(id=4, name="Jason Borne", job="agent", company="ABC"),
    ]


@pytest.fixture
def fixture_users() -> List[User]:
    """The four users the service tests filter"""
    return make_fixture_users()


@pytest.fixture
def user_source() -> Callable[[], List[User]]:
    """A source rebuilding the fixture users on every call"""
    return make_fixture_users


@pytest.fixture
def empty_source() -> Callable[[], List[User]]:
    return lambda: []


@pytest.fixture
def user_service(user_source) -> UserService:
    return UserService(user_source)


@pytest.fixture
def sink() -> BufferSink:
    return BufferSink()


@pytest.fixture
def db_engine() -> Generator[Engine, None, None]:
    """A private in-memory SQLite engine with the schema created"""
    engine = create_db_engine("sqlite:///:memory:", echo=False)
    create_all_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine: Engine) -> SessionFactory:
    return make_session_context(sessionmaker(autocommit=False, autoflush=False, bind=db_engine))
