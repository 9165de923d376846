"""
FastAPI 의존성 함수들
"""
import re

from src.project_api.exceptions import InvalidProjectIDError
from src.project_api.services.store import ProjectStore, project_store

# 부호를 허용하는 10진 정수만 유효한 ID
PROJECT_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# 64비트 정수 범위를 벗어나면 잘못된 ID
PROJECT_ID_MIN = -(2**63)
PROJECT_ID_MAX = 2**63 - 1


def get_project_store() -> ProjectStore:
    """
    프로세스 전역 프로젝트 저장소 반환

    테스트에서는 app.dependency_overrides 로 교체한다.
    """
    return project_store


def parse_project_id(project_id: str) -> int:
    """
    경로 세그먼트를 프로젝트 ID로 변환

    Args:
        project_id: /projects/ 뒤의 경로 세그먼트

    Returns:
        정수 ID

    Raises:
        InvalidProjectIDError: 10진 정수가 아니거나 64비트 범위를 벗어날 때 400 에러
    """
    if not PROJECT_ID_PATTERN.fullmatch(project_id):
        raise InvalidProjectIDError()
    value = int(project_id)
    if not PROJECT_ID_MIN <= value <= PROJECT_ID_MAX:
        raise InvalidProjectIDError()
    return value
