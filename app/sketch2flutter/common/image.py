import base64
from typing import Any

from core.exception.exceptions import UnsupportedImageFormat

DATA_URI_PREFIX = "data:image"


def prepare_image_base64(image: Any) -> str:
    """
    API 요청에 넣을 base64 문자열로 이미지를 정규화합니다.

    - bytes 계열: base64 인코딩
    - "data:image/...;base64,..." 문자열: 첫 번째 콤마까지 제거
    - 그 외 문자열: base64 본문으로 간주하고 그대로 반환
    """
    if isinstance(image, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(image)).decode("utf-8")
    if isinstance(image, str):
        if image.startswith(DATA_URI_PREFIX):
            return image.split(",", 1)[1] if "," in image else ""
        return image
    raise UnsupportedImageFormat(f"입력 타입: {type(image).__name__}")


def to_png_data_uri(image_base64: str) -> str:
    return f"data:image/png;base64,{image_base64}"
