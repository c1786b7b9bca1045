"""
Shared fixtures: the canonical user-type enum in both declaration styles.
"""

import pytest

from constenum import BaseEnum, define
from constenum.core import clear_cache


class UserType(BaseEnum):
    Administrator = 0
    Moderator = 1
    Subscriber = 2
    SuperAdministrator = 3


@pytest.fixture(autouse=True)
def fresh_definitions():
    """Each test reflects enums from scratch."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def user_type():
    """Class-declared UserType."""
    return UserType


@pytest.fixture
def user_type_table():
    """The same UserType declared with define()."""
    return define(
        "UserType",
        {"Administrator": 0, "Moderator": 1, "Subscriber": 2, "SuperAdministrator": 3},
    )


@pytest.fixture(params=["class", "table"])
def any_user_type(request, user_type, user_type_table):
    """UserType in each declaration style."""
    return user_type if request.param == "class" else user_type_table
