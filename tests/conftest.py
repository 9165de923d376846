import os
import sys

import pytest
from fastapi.testclient import TestClient

# 테스트 환경 설정
os.environ["APP_ENV"] = "test"

# 프로젝트 루트를 path에 추가
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.project_api.dependencies import get_project_store
from src.project_api.main import app
from src.project_api.services.store import ProjectStore


@pytest.fixture
def store():
    # 테스트마다 빈 저장소 (ID 카운터도 1부터)
    return ProjectStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_project_store] = lambda: store
    with TestClient(app) as c:
        yield c
    del app.dependency_overrides[get_project_store]
