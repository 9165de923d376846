"""
인메모리 프로젝트 저장소

프로세스 수명 동안만 유지되며 재시작하면 사라진다.
모든 연산은 하나의 락 안에서 수행된다.
"""

import json
import logging
import threading
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError

from src.project_api.exceptions import ProjectDecodeError, ProjectNotFoundError
from src.project_api.logging_config import LOGGER_NAME
from src.project_api.schemas.project import (
    Project,
    ProjectCreate,
    ProjectReplace,
    ProjectStatus,
)

logger = logging.getLogger(f"{LOGGER_NAME}.store")

Payload = Union[bytes, str, Mapping[str, Any], BaseModel]


def _decode(model, payload: Payload):
    if isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    if isinstance(payload, (bytes, str)):
        return model.model_validate_json(payload)
    return model.model_validate(payload)


def _load_fields(payload: Payload) -> Optional[Dict[str, Any]]:
    """본문이 JSON 객체이면 dict, 그 외에는 None"""
    if isinstance(payload, BaseModel):
        return payload.model_dump()
    if isinstance(payload, (bytes, str)):
        try:
            payload = json.loads(payload)
        except ValueError:
            return None
    if isinstance(payload, Mapping):
        return dict(payload)
    return None


def _decode_lenient(payload: Payload) -> ProjectCreate:
    """
    생성 요청 본문 해석

    JSON 객체가 아니면 빈 값, 타입이 맞지 않는 필드만 빈 값으로 두고
    나머지 필드는 그대로 사용한다.
    """
    fields = _load_fields(payload)
    if fields is None:
        logger.warning("Ignoring malformed create payload")
        return ProjectCreate()

    try:
        return ProjectCreate.model_validate(fields)
    except ValidationError as e:
        invalid = {err["loc"][0] for err in e.errors() if err["loc"]}
        logger.warning(f"Ignoring invalid create fields: {sorted(invalid)}")
        return ProjectCreate.model_validate(
            {key: value for key, value in fields.items() if key not in invalid}
        )


class ProjectStore:
    def __init__(self):
        self._projects: List[Project] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._projects)

    def _index_of(self, project_id: int) -> int:
        # 선형 탐색
        for i, project in enumerate(self._projects):
            if project.id == project_id:
                return i
        logger.warning(f"Project not found: id={project_id}")
        raise ProjectNotFoundError()

    def create(self, payload: Payload) -> Project:
        """
        새 프로젝트 생성

        본문이 깨져 있어도 실패하지 않고 빈 값으로 생성한다.
        id 와 status 는 항상 서버가 지정한다.
        """
        data = _decode_lenient(payload)

        with self._lock:
            project = Project(
                id=self._next_id,
                title=data.title,
                description=data.description,
                status=ProjectStatus.NOT_STARTED.value,
            )
            self._next_id += 1
            self._projects.append(project)

        logger.info(f"Project created: id={project.id}")
        return project.model_copy()

    def list(self) -> List[Project]:
        """호출 시점의 전체 목록 스냅샷 (삽입 순서)"""
        with self._lock:
            return [project.model_copy() for project in self._projects]

    def get(self, project_id: int) -> Project:
        with self._lock:
            return self._projects[self._index_of(project_id)].model_copy()

    def update(self, project_id: int, payload: Payload) -> Project:
        """
        프로젝트 전체 교체 (id 제외)

        Raises:
            ProjectNotFoundError: 해당 ID가 없을 때
            ProjectDecodeError: 본문을 해석할 수 없을 때 (저장된 값은 그대로 유지)
        """
        with self._lock:
            project = self._projects[self._index_of(project_id)]

            try:
                data = _decode(ProjectReplace, payload)
            except ValidationError as e:
                logger.warning(f"Failed to decode update payload for {project_id}: {e}")
                raise ProjectDecodeError()

            project.title = data.title
            project.description = data.description
            project.status = data.status
            updated = project.model_copy()

        logger.info(f"Project updated: id={project_id}")
        return updated

    def delete(self, project_id: int) -> None:
        with self._lock:
            del self._projects[self._index_of(project_id)]

        logger.info(f"Project deleted: id={project_id}")


# 프로세스 전역 저장소
project_store = ProjectStore()
