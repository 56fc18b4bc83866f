import asyncio
from typing import List, Optional, Sequence, Set

from core.exception.exceptions import DependencyUnavailable
from core.log.logging import get_logging
from fastapi import Depends
from sketch2flutter.common.domain.artifact import NavigationBundle, RouteEntry
from sketch2flutter.common.domain.workspace import ViewDescriptor
from sketch2flutter.common.flutter.naming import to_pascal_case, to_snake_case
from sketch2flutter.common.flutter.navigation_templates import (
    generate_navigation_files,
)
from sketch2flutter.navigation.service.navigation_service_abc import (
    NavigationServiceABC,
)
from sketch2flutter.workspace.repository.figure_repository import (
    get_figure_repository,
)
from sketch2flutter.workspace.repository.figure_repository_abc import (
    FigureRepositoryABC,
)
from sketch2flutter.workspace.repository.view_repository import get_view_repository
from sketch2flutter.workspace.repository.view_repository_abc import ViewRepositoryABC

logger = get_logging()

# 앞쪽 키워드가 우선 (뷰 순서가 아니라 키워드 순서로 결정)
INITIAL_ROUTE_KEYWORDS = (
    "login",
    "signin",
    "auth",
    "welcome",
    "onboarding",
    "splash",
    "home",
    "dashboard",
    "main",
    "inicio",
    "principal",
)
DEFAULT_PROJECT_NAME = "MyApp"
# AppRoutes 클래스가 직접 선언하는 멤버
RESERVED_ROUTE_NAMES = frozenset({"initial", "routes"})


def route_name_for(view_name: str, index: int) -> str:
    name = to_snake_case(view_name)
    if not name:
        return f"view_{index}"
    if name[0].isdigit():
        return f"view_{name}"
    return name


def select_initial_index(view_names: Sequence[str]) -> int:
    lowered = [name.lower() for name in view_names]
    for keyword in INITIAL_ROUTE_KEYWORDS:
        for index, name in enumerate(lowered):
            if keyword in name:
                return index
    return 0


def unique_route_name(name: str, taken: Set[str]) -> str:
    """이미 쓰였거나 예약된 이름이면 _2, _3 ... 접미사를 붙인다"""
    candidate = name
    suffix = 2
    while candidate in taken or candidate in RESERVED_ROUTE_NAMES:
        candidate = f"{name}_{suffix}"
        suffix += 1
    return candidate


def build_routes(views: Sequence[ViewDescriptor]) -> List[RouteEntry]:
    initial_index = select_initial_index([view.name for view in views])
    routes: List[RouteEntry] = []
    taken: Set[str] = set()
    for index, view in enumerate(views):
        name = unique_route_name(route_name_for(view.name, index), taken)
        taken.add(name)
        routes.append(
            RouteEntry(
                name=name,
                screen_name=f"{to_pascal_case(name)}Screen",
                path=f"/{name}",
                is_initial=index == initial_index,
                description=view.name,
                element_count=len(view.elements),
            )
        )
    return routes


class NavigationService(NavigationServiceABC):
    def __init__(
        self,
        view_repository: Optional[ViewRepositoryABC],
        figure_repository: Optional[FigureRepositoryABC],
    ):
        self.view_repository = view_repository
        self.figure_repository = figure_repository

    async def generate_navigation(self, project_id: str) -> Optional[NavigationBundle]:
        if self.view_repository is None or self.figure_repository is None:
            raise DependencyUnavailable("뷰/피규어 저장소 서비스가 설정되지 않았습니다")

        views = await self.view_repository.find_all(project_id)
        if not views or len(views) < 2:
            logger.info(f"프로젝트 {project_id} 의 뷰가 2개 미만이라 네비게이션을 생성하지 않습니다")
            return None

        logger.info(f"프로젝트 {project_id} 네비게이션 생성 (뷰 {len(views)}개)")
        detailed_views = await asyncio.gather(
            *(self._load_elements(view) for view in views)
        )

        routes = build_routes(detailed_views)
        project = detailed_views[0].project
        project_name = (project.name if project else None) or DEFAULT_PROJECT_NAME

        return NavigationBundle(
            routes=routes,
            files=generate_navigation_files(routes, project_name),
        )

    async def _load_elements(self, view: ViewDescriptor) -> ViewDescriptor:
        try:
            elements = await self.figure_repository.find_all(view.id)
        except Exception as e:
            logger.warning(f"뷰 {view.id} 의 도형 조회 실패: {e}")
            elements = []
        return view.model_copy(update={"elements": list(elements or [])})


# FastAPI Depends 용 DI 팩토리
def get_navigation_service(
    view_repository: Optional[ViewRepositoryABC] = Depends(get_view_repository),
    figure_repository: Optional[FigureRepositoryABC] = Depends(get_figure_repository),
) -> NavigationService:
    return NavigationService(view_repository, figure_repository)
