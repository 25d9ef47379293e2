import os
import sys
from unittest.mock import AsyncMock, Mock

import pytest

# Ensure project root is on the path when running pytest from elsewhere
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.errors import NetworkError
from services.roster import Student
from services.student_api import ApiResult, StudentApi


def ok(operation, data=None):
    return ApiResult.ok(operation, data)


def failed(operation, message="connection refused", status_code=None):
    return ApiResult.failed(NetworkError(operation, message, status_code=status_code))


@pytest.fixture
def ana():
    return Student(id=1, name="Ana", age="10", grade="5A")


@pytest.fixture
def mia():
    return Student(id=3, name="Mia", age="9", grade="4A")


@pytest.fixture
def luis():
    return Student(id=7, name="Luis", age="12", grade="6B")


@pytest.fixture
def mock_api():
    api = Mock(spec=StudentApi)
    api.list_students = AsyncMock(return_value=ok("list", []))
    api.create_student = AsyncMock()
    api.update_student = AsyncMock()
    api.delete_student = AsyncMock(return_value=ok("delete"))
    return api
