"""
코드 내용만으로 Dart 파일의 성격을 추정하는 시그니처 모음.
추출기(파일명 추론)는 NAMING_SIGNATURES, 분류기(내용 기반 분류)는 CONTENT_SIGNATURES 를 사용합니다.
"""

import re
from typing import Callable, Tuple

from sketch2flutter.common.domain.artifact import ArtifactCategory

MAIN_ENTRY_FILENAME = "main.dart"

UI_BASE_TYPES = ("StatefulWidget", "StatelessWidget")
SCREEN_WORDS = ("Screen", "Page")
# 파일명 추론은 소문자 service 도, 분류는 Provider 도 서비스로 본다
SERVICE_NAMING_WORDS = ("Service", "service", "Repository")
SERVICE_CONTENT_WORDS = ("Service", "Provider", "Repository")

_MAIN_SIGNATURE_RE = re.compile(r"\bvoid\s+main\s*\(")


def is_main_entry(content: str) -> bool:
    return bool(_MAIN_SIGNATURE_RE.search(content)) or "runApp(" in content


def is_ui_component(content: str) -> bool:
    return any(base in content for base in UI_BASE_TYPES)


def is_screen_component(content: str) -> bool:
    return is_ui_component(content) and any(word in content for word in SCREEN_WORDS)


def is_plain_type(content: str) -> bool:
    return "class" in content and "extends" not in content


def is_service_like(content: str) -> bool:
    return any(word in content for word in SERVICE_CONTENT_WORDS)


def is_service_named(content: str) -> bool:
    return any(word in content for word in SERVICE_NAMING_WORDS)


# 위에서부터 처음 일치하는 항목이 이긴다
CONTENT_SIGNATURES: Tuple[Tuple[Callable[[str], bool], ArtifactCategory], ...] = (
    (is_screen_component, ArtifactCategory.SCREEN),
    (is_ui_component, ArtifactCategory.WIDGET),
    (is_plain_type, ArtifactCategory.MODEL),
    (is_service_like, ArtifactCategory.SERVICE),
)

# 이름 없는 펜스의 파일명 추론용
NAMING_SIGNATURES: Tuple[Tuple[Callable[[str], bool], ArtifactCategory], ...] = (
    (is_screen_component, ArtifactCategory.SCREEN),
    (is_ui_component, ArtifactCategory.WIDGET),
    (is_plain_type, ArtifactCategory.MODEL),
    (is_service_named, ArtifactCategory.SERVICE),
)
