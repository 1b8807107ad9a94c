"""
Logging: 로깅 설정 + 경고 이벤트

규칙:
- 조용한 복구 금지: 인덱스 파싱 실패 등 복구 경로는 반드시 warning 이벤트 기록
- 경고 필수 컨텍스트: code, message, (path, error 등 추가 키)
"""

import logging
from typing import Any

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: dict | None = None) -> None:
    """
    루트 로거 설정.

    Args:
        config: 설정 (logging.level, logging.format)
    """
    log_config = (config or {}).get("logging", {}) or {}
    level_name = str(log_config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format=log_config.get("format", DEFAULT_LOG_FORMAT),
        datefmt=DEFAULT_DATE_FORMAT,
    )
    logging.getLogger().setLevel(level)


def emit_warning(
    logger: logging.Logger,
    code: str,
    message: str,
    **context: Any,
) -> None:
    """
    경고 이벤트 기록.

    호출 측 동작은 바꾸지 않고 (복구 그대로 진행), 로그에만 남긴다.
    record에 warning_code / warning_context를 붙여 테스트에서 확인 가능.

    Args:
        logger: 호출 모듈의 로거
        code: 경고 코드 (ErrorCodes 값)
        message: 사람이 읽을 메시지
        **context: path, error 등 추가 컨텍스트
    """
    ctx_str = ", ".join(f"{k}={v!r}" for k, v in context.items())
    logger.warning(
        f"[{code}] {message}" + (f" ({ctx_str})" if ctx_str else ""),
        extra={"warning_code": code, "warning_context": context},
    )
