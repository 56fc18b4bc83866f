import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

logger = logging.getLogger("sketch2flutter.bundle")


class ArtifactCategory(str, Enum):
    MAIN = "main"
    SCREEN = "screen"
    WIDGET = "widget"
    MODEL = "model"
    SERVICE = "service"


@dataclass(frozen=True)
class CodeBlock:
    filename: str
    content: str


@dataclass(frozen=True)
class FlutterArtifact:
    name: str
    code: str


@dataclass(frozen=True)
class MainEntry:
    code: str


@dataclass(frozen=True)
class RouteEntry:
    name: str
    screen_name: str
    path: str
    is_initial: bool
    description: str
    element_count: int


@dataclass
class NavigationBundle:
    routes: List[RouteEntry]
    files: Dict[str, str]

    @property
    def initial_route(self) -> RouteEntry:
        return next(route for route in self.routes if route.is_initial)


@dataclass
class GenerationBundle:
    screens: List[FlutterArtifact] = field(default_factory=list)
    widgets: List[FlutterArtifact] = field(default_factory=list)
    models: List[FlutterArtifact] = field(default_factory=list)
    services: List[FlutterArtifact] = field(default_factory=list)
    main_entry: Optional[MainEntry] = None
    navigation: Optional[NavigationBundle] = None

    def _bucket(self, category: ArtifactCategory) -> List[FlutterArtifact]:
        return {
            ArtifactCategory.SCREEN: self.screens,
            ArtifactCategory.WIDGET: self.widgets,
            ArtifactCategory.MODEL: self.models,
            ArtifactCategory.SERVICE: self.services,
        }[category]

    def add(self, category: ArtifactCategory, name: str, code: str) -> bool:
        """
        카테고리에 산출물을 추가합니다.
        같은 카테고리에 동일한 이름이 이미 있으면 무시하고 False를 반환합니다.
        """
        if category is ArtifactCategory.MAIN:
            if self.main_entry is not None:
                logger.warning("main 엔트리가 이미 존재하여 무시합니다")
                return False
            self.main_entry = MainEntry(code=code)
            return True

        bucket = self._bucket(category)
        if any(artifact.name == name for artifact in bucket):
            logger.warning(f"중복된 {category.value} 이름 무시: {name}")
            return False
        bucket.append(FlutterArtifact(name=name, code=code))
        return True

    def has_artifacts(self) -> bool:
        return bool(self.screens or self.widgets or self.models or self.services)

    def is_empty(self) -> bool:
        return not self.has_artifacts() and self.main_entry is None

    def summary(self) -> Dict[str, int]:
        return {
            "screens": len(self.screens),
            "widgets": len(self.widgets),
            "models": len(self.models),
            "services": len(self.services),
        }
