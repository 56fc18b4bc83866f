from typing import Optional

from core.exception.error_codes import ErrorCode


class ServiceException(Exception):
    def __init__(
        self,
        error_code: ErrorCode,
        detail: Optional[str] = None,
    ):
        super().__init__(detail or error_code.value)
        self.error_code = error_code
        self.detail = detail

    @property
    def message(self) -> str:
        if self.detail:
            return f"{self.error_code.value}: {self.detail}"
        return self.error_code.value


class UnsupportedImageFormat(ServiceException):
    def __init__(self, detail: Optional[str] = None):
        super().__init__(ErrorCode.UNSUPPORTED_IMAGE_FORMAT, detail)


class UpstreamEmptyResponse(ServiceException):
    def __init__(self, detail: Optional[str] = None):
        super().__init__(ErrorCode.UPSTREAM_EMPTY_RESPONSE, detail)


class UpstreamRequestFailed(ServiceException):
    def __init__(self, detail: Optional[str] = None):
        super().__init__(ErrorCode.UPSTREAM_REQUEST_FAILED, detail)


class MalformedUpstreamJSON(ServiceException):
    def __init__(self, detail: Optional[str] = None):
        super().__init__(ErrorCode.MALFORMED_UPSTREAM_JSON, detail)


class DependencyUnavailable(ServiceException):
    def __init__(self, detail: Optional[str] = None):
        super().__init__(ErrorCode.DEPENDENCY_UNAVAILABLE, detail)


class PartialPersistenceFailure(ServiceException):
    """배치 저장 중 요소 1건이 실패한 경우. 호출자에게 전파하지 않고 기록만 한다."""

    def __init__(self, index: int, detail: Optional[str] = None):
        super().__init__(ErrorCode.PARTIAL_PERSISTENCE_FAILURE, detail)
        self.index = index
