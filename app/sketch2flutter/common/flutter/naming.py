import re
import unicodedata


def _strip_accents(text: str) -> str:
    normalized = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in normalized if not unicodedata.combining(ch))


def to_snake_case(text: str) -> str:
    """PascalCase/공백/하이픈 이름을 snake_case로 변환 (예: "User Profile" -> "user_profile")"""
    s = _strip_accents(text.strip())
    s = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", s)
    s = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s)
    s = re.sub(r"[^A-Za-z0-9]+", "_", s)
    return s.strip("_").lower()


def to_pascal_case(text: str) -> str:
    """snake_case/공백 이름을 PascalCase로 변환. 각 단어의 나머지 글자는 유지합니다."""
    parts = re.split(r"[^A-Za-z0-9]+", _strip_accents(text))
    return "".join(p[:1].upper() + p[1:] for p in parts if p)


def strip_dart_extension(filename: str) -> str:
    """경로를 제외한 파일명에서 .dart 확장자를 제거"""
    base = filename.replace("\\", "/").rsplit("/", 1)[-1]
    if base.endswith(".dart"):
        base = base[: -len(".dart")]
    return base


def escape_dart_string(text: str) -> str:
    """작은따옴표 Dart 문자열 리터럴 안에 넣을 수 있도록 이스케이프"""
    return (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("$", "\\$")
        .replace("\r", "")
        .replace("\n", "\\n")
    )
