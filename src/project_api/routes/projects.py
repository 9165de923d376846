"""
프로젝트 CRUD API 라우트
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from src.project_api.dependencies import get_project_store, parse_project_id
from src.project_api.exceptions import InvalidProjectIDError
from src.project_api.schemas.project import Project, ProjectCreate, ProjectReplace
from src.project_api.services.store import ProjectStore

router = APIRouter()


@router.post(
    "",
    response_model=Project,
    summary="새 프로젝트 생성",
    description="title, description 으로 프로젝트를 만듭니다. id 와 status(notstarted)는 서버가 지정합니다.",
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ProjectCreate.model_json_schema()}}
        }
    },
)
async def create_project(request: Request, store: ProjectStore = Depends(get_project_store)):
    # 본문이 깨져 있어도 빈 프로젝트로 생성
    body = await request.body()
    return store.create(body)


@router.get("", response_model=List[Project], summary="프로젝트 목록 조회")
async def list_projects(store: ProjectStore = Depends(get_project_store)):
    """전체 프로젝트 목록 (생성 순서)"""
    return store.list()


# /projects/ 처럼 ID 세그먼트가 비어 있으면 400 (POST 는 405)
@router.api_route("/", methods=["GET", "PUT", "DELETE"], include_in_schema=False)
async def empty_project_id():
    raise InvalidProjectIDError()


@router.get(
    "/{project_id}",
    response_model=Project,
    summary="프로젝트 조회",
    responses={400: {"description": "잘못된 ID"}, 404: {"description": "프로젝트 찾을 수 없음"}},
)
async def get_project(
    project_id: int = Depends(parse_project_id),
    store: ProjectStore = Depends(get_project_store),
):
    return store.get(project_id)


@router.put(
    "/{project_id}",
    response_model=Project,
    summary="프로젝트 전체 수정",
    description="id 를 제외한 모든 필드를 교체합니다. 생략된 필드는 빈 문자열이 됩니다.",
    responses={
        400: {"description": "잘못된 ID 또는 요청 본문"},
        404: {"description": "프로젝트 찾을 수 없음"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ProjectReplace.model_json_schema()}},
        }
    },
)
async def update_project(
    request: Request,
    project_id: int = Depends(parse_project_id),
    store: ProjectStore = Depends(get_project_store),
):
    body = await request.body()
    return store.update(project_id, body)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="프로젝트 삭제",
    responses={400: {"description": "잘못된 ID"}, 404: {"description": "프로젝트 없음"}},
)
async def delete_project(
    project_id: int = Depends(parse_project_id),
    store: ProjectStore = Depends(get_project_store),
):
    store.delete(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
