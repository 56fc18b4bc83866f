from typing import Any, Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

FigureKind = Literal["rectangle", "circle", "text", "line"]


def _coerce_id(value: Any) -> Any:
    if isinstance(value, int):
        return str(value)
    return value


class UIElement(BaseModel):
    """LLM이 돌려준 캔버스 도형 1건. 정의되지 않은 키도 그대로 보존합니다."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    kind: FigureKind = Field(
        validation_alias=AliasChoices("type", "tipo", "kind"),
        serialization_alias="tipo",
    )
    x: float
    y: float

    width: Optional[float] = None
    height: Optional[float] = None
    radius: Optional[float] = None
    points: Optional[List[float]] = None

    fill: Optional[str] = None
    stroke: Optional[str] = None
    strokeWidth: Optional[float] = None
    text: Optional[str] = None
    fontSize: Optional[float] = None
    fontFamily: Optional[str] = None

    def to_figure_data(self, view_id: str) -> Dict[str, Any]:
        """피규어 저장소 POST /figura 본문 (저장소 스키마: tipo, vistaId)"""
        data = self.model_dump(by_alias=True, exclude_none=True)
        data["vistaId"] = view_id
        return data


class ProjectRef(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("name", "nombre")
    )

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value: Any) -> Any:
        return _coerce_id(value)


class ViewDescriptor(BaseModel):
    """뷰/피규어 저장소 서비스가 소유하는 뷰. 여기서는 읽기만 합니다."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str = Field(validation_alias=AliasChoices("name", "nombre"))
    elements: List[Dict[str, Any]] = Field(
        default_factory=list, validation_alias=AliasChoices("elements", "figuras")
    )
    project: Optional[ProjectRef] = Field(
        default=None, validation_alias=AliasChoices("project", "proyecto")
    )

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value: Any) -> Any:
        return _coerce_id(value)
