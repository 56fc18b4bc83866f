from enum import Enum


class ErrorCode(str, Enum):
    NOT_DEFINED = "정의되지 않은 오류입니다"
    INTERNAL_SERVER_ERROR = "서버 내부 오류가 발생했습니다"
    INVALID_REQUEST = "요청 값이 올바르지 않습니다"

    UNSUPPORTED_IMAGE_FORMAT = "지원하지 않는 이미지 형식입니다"
    UPSTREAM_EMPTY_RESPONSE = "LLM 응답에 내용이 없습니다"
    UPSTREAM_REQUEST_FAILED = "LLM 호출에 실패했습니다"
    MALFORMED_UPSTREAM_JSON = "LLM 응답을 UI 요소 JSON 배열로 해석할 수 없습니다"
    DEPENDENCY_UNAVAILABLE = "필수 연동 서비스를 사용할 수 없습니다"
    PARTIAL_PERSISTENCE_FAILURE = "일부 UI 요소를 저장하지 못했습니다"


ERROR_STATUS_CODES = {
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.UNSUPPORTED_IMAGE_FORMAT: 400,
    ErrorCode.UPSTREAM_EMPTY_RESPONSE: 502,
    ErrorCode.UPSTREAM_REQUEST_FAILED: 502,
    ErrorCode.MALFORMED_UPSTREAM_JSON: 502,
    ErrorCode.DEPENDENCY_UNAVAILABLE: 503,
}
