import re
from dataclasses import dataclass
from typing import List, Optional

# 줄 시작의 ``` 만 펜스로 인정 (본문 중간의 인라인 ``` 은 무시)
FENCE_LINE_RE = re.compile(r"^[ \t]*```[ \t]*([\w+#.-]*)[^\n]*$", re.MULTILINE)
FILENAME_COMMENT_RE = re.compile(r"^\s*//\s*([\w./\\-]+\.dart)\b")

DART_LANGUAGES = ("dart", "flutter", "")


@dataclass(frozen=True)
class Fence:
    language: str
    body: str
    start: int
    end: int
    closed: bool = True

    @property
    def is_dart(self) -> bool:
        return self.language in DART_LANGUAGES

    @property
    def filename(self) -> Optional[str]:
        """본문 첫 줄이 `// 파일명.dart` 주석이면 파일명을 반환"""
        first_line = _first_non_blank_line(self.body)
        if first_line is None:
            return None
        match = FILENAME_COMMENT_RE.match(first_line)
        if not match:
            return None
        return match.group(1).replace("\\", "/")

    @property
    def content(self) -> str:
        return extract_code_content(self.body)


def _first_non_blank_line(body: str) -> Optional[str]:
    for line in body.split("\n"):
        if line.strip():
            return line
    return None


def iter_fences(text: str) -> List[Fence]:
    """
    응답 텍스트의 코드 펜스를 순서대로 짝지어 반환합니다.
    닫히지 않은 마지막 펜스(토큰 한도로 잘린 응답)는 텍스트 끝까지를 본문으로 봅니다.
    """
    fences: List[Fence] = []
    opening: Optional[re.Match] = None

    for match in FENCE_LINE_RE.finditer(text):
        if opening is None:
            opening = match
            continue
        fences.append(
            Fence(
                language=opening.group(1).lower(),
                body=text[opening.end() : match.start()],
                start=opening.start(),
                end=match.end(),
            )
        )
        opening = None

    if opening is not None:
        fences.append(
            Fence(
                language=opening.group(1).lower(),
                body=text[opening.end() :],
                start=opening.start(),
                end=len(text),
                closed=False,
            )
        )
    return fences


def extract_code_content(body: str) -> str:
    """펜스 본문에서 선두의 파일명 주석 한 줄을 제거하고 앞뒤 공백을 정리"""
    lines = body.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    if lines and FILENAME_COMMENT_RE.match(lines[0]):
        lines.pop(0)
    return "\n".join(lines).strip()
