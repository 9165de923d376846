from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class ProjectTrackerException(HTTPException):
    """Project Tracker 전용 기본 예외 클래스"""

    def __init__(
        self, status_code: int, detail: Any = None, headers: Optional[Dict[str, str]] = None
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class InvalidProjectIDError(ProjectTrackerException):
    """경로의 프로젝트 ID가 10진 정수가 아닐 때"""

    def __init__(self, detail: str = "Invalid project ID"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ProjectNotFoundError(ProjectTrackerException):
    """프로젝트를 찾을 수 없을 때"""

    def __init__(self, detail: str = "Project not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ProjectDecodeError(ProjectTrackerException):
    """요청 본문을 Project로 해석할 수 없을 때"""

    def __init__(self, detail: str = "Failed to decode request body"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
