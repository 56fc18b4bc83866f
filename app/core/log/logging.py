import logging
import logging.config
import os

import yaml
from core.config import get_setting
from opentelemetry._logs import set_logger_provider
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import (
    OTLPLogExporter,
)
from opentelemetry.sdk._logs import (
    LoggerProvider,
    LoggingHandler,
)
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.sdk.resources import Resource

settings = get_setting()

_opentelemetry_initialized = False
_otel_provider: LoggerProvider | None = None
_app_logger = None

log_dir = settings.DATA_PATH + settings.LOG_PATH
info_dir = os.path.join(log_dir, "info")
debug_dir = os.path.join(log_dir, "debug")

logging_file = os.path.join(os.path.dirname(__file__), "logging_config.yaml")


def _load_config() -> dict:
    os.makedirs(info_dir, exist_ok=True)
    os.makedirs(debug_dir, exist_ok=True)

    with open(logging_file, "rt", encoding="utf-8") as f:
        config = yaml.safe_load(f.read())

    pod_name = os.getenv("POD_NAME", "default-pod")

    config["handlers"]["info_file"]["filename"] = os.path.join(
        info_dir, f"{pod_name}.log"
    )
    config["handlers"]["debug_file"]["filename"] = os.path.join(
        debug_dir, f"{pod_name}-debug.log"
    )
    return config


class SuppressImagePayloadFilter(logging.Filter):
    """base64 이미지가 포함된 HTTP 요청 본문 debug 로그를 걸러내는 필터"""

    def filter(self, record: logging.LogRecord) -> bool:
        # openai/httpx debug 로그에 data URI 전체가 찍히는 것만 무시
        if record.levelno == logging.DEBUG:
            if "data:image" in record.getMessage():
                return False
        return True


def _initialize_opentelemetry() -> None:
    """OpenTelemetry 로그 시스템 초기화 (프로세스당 1회)"""
    global _otel_provider

    _otel_provider = LoggerProvider(
        resource=Resource.create(
            {
                "service.name": settings.APP_NAME,
                "service.instance.id": os.uname().nodename,
            }
        ),
    )
    set_logger_provider(_otel_provider)

    otlp_exporter = OTLPLogExporter(
        endpoint=os.getenv(
            "OTEL_EXPORTER_OTLP_ENDPOINT",
            "grafana-alloy.grafana-alloy.svc.cluster.local:4317",
        ),
        insecure=True,
    )
    _otel_provider.add_log_record_processor(BatchLogRecordProcessor(otlp_exporter))


def _initialize_logging() -> None:
    global _opentelemetry_initialized
    global _otel_provider

    logging.config.dictConfig(_load_config())

    # Otel LoggerProvider 중복 설정 WARNING 메시지 제어
    logging.getLogger("opentelemetry._logs._internal").setLevel(logging.ERROR)

    if settings.ENVIRONMENT != "LOCAL":
        if not _opentelemetry_initialized:
            _initialize_opentelemetry()
            _opentelemetry_initialized = True

        otel_handler = LoggingHandler(
            level=logging.DEBUG, logger_provider=_otel_provider
        )
        logging.getLogger().addHandler(otel_handler)

    for handler in logging.root.handlers:
        if type(handler) is logging.StreamHandler:
            handler.setLevel(settings.LOG_LEVEL)


def get_logging() -> logging.Logger:
    """애플리케이션 로거를 반환 (최초 호출 시 초기화)"""
    global _app_logger

    if _app_logger:
        return _app_logger

    _initialize_logging()

    logging.getLogger("httpx").setLevel(logging.INFO)
    logging.getLogger("httpcore").setLevel(logging.INFO)
    logging.getLogger("openai").setLevel(logging.INFO)

    # 하위 로거(openai._base_client 등) 레코드는 핸들러 단에서 걸러야 함
    for handler in logging.root.handlers:
        handler.addFilter(SuppressImagePayloadFilter())

    _app_logger = logging.getLogger(settings.APP_NAME)
    _app_logger.setLevel(logging.DEBUG)

    return _app_logger
