from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


class ProjectStatus(str, Enum):
    NOT_STARTED = "notstarted"
    IN_PROGRESS = "inprogress"
    COMPLETED = "completed"


class ProjectCreate(BaseModel):
    """생성 요청 본문 (id, status 는 서버가 지정하므로 받지 않음)"""

    title: str = Field("", examples=["Website redesign"])
    description: str = Field("", examples=["Rebuild the landing page"])

    @field_validator("title", "description", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        # JSON null 은 필드를 생략한 것과 동일
        return "" if value is None else value


class ProjectReplace(BaseModel):
    """PUT 요청 본문 - 전체 교체이므로 생략된 필드는 빈 문자열이 됨"""

    model_config = ConfigDict(strict=True)

    id: Optional[StrictInt] = None  # 형식만 확인하고 값은 무시
    title: StrictStr = Field("", examples=["Website redesign v2"])
    description: StrictStr = Field("", examples=["Rebuild the landing page"])
    status: StrictStr = Field("", examples=[ProjectStatus.COMPLETED.value])  # 값 검증 없음

    @field_validator("title", "description", "status", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value


class Project(BaseModel):
    id: int = Field(..., examples=[1])
    title: str = Field("", examples=["Website redesign"])
    description: str = Field("", examples=["Rebuild the landing page"])
    status: str = Field(ProjectStatus.NOT_STARTED.value, examples=[ProjectStatus.IN_PROGRESS.value])

    model_config = ConfigDict(from_attributes=True)
