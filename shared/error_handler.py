"""
오류 처리 및 로깅 유틸리티

콘솔 로그는 stderr로 컬러 출력하고, 로그 파일을 지정하면 ERROR 레벨 이상만 파일에 기록합니다.
게임 출력(stdout)과 진단 로그(stderr)는 섞이지 않습니다.
"""

import logging
import traceback
import sys
import functools
import time
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar, Union

# ANSI 컬러 코드
COLORS = {
    'DEBUG': '\033[94m',  # 파란색
    'INFO': '\033[92m',   # 녹색
    'WARNING': '\033[93m', # 노란색
    'ERROR': '\033[91m',  # 빨간색
    'CRITICAL': '\033[41m\033[97m', # 배경 빨간색, 글자 흰색
    'RESET': '\033[0m'    # 리셋
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s - [%(filename)s:%(lineno)d]'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# setup_logger가 붙인 핸들러 표시용 속성
_HANDLER_TAG = '_lucky_draw_handler'


class ColoredFormatter(logging.Formatter):
    """컬러 로그 포매터"""

    def format(self, record):
        levelname = record.levelname
        message = super().format(record)

        if levelname in COLORS:
            return f"{COLORS[levelname]}{message}{COLORS['RESET']}"
        return message


def get_logger(name):
    """모듈별 로거 생성"""
    logger = logging.getLogger(name)
    return logger


def setup_logger(
    name: str,
    level: Union[str, int] = logging.WARNING,
    log_file: Optional[str] = None,
    colored: bool = True,
    stream=None
) -> logging.Logger:
    """로거 설정

    여러 번 호출해도 핸들러가 중복되지 않습니다. 이전에 붙인 핸들러는 교체됩니다.

    Args:
        name: 로거 이름
        level: 콘솔 로그 레벨
        log_file: ERROR 이상을 기록할 파일 경로 (None이면 파일 기록 안 함)
        colored: 콘솔 출력에 ANSI 컬러 적용 여부
        stream: 콘솔 핸들러 스트림 (기본값 sys.stderr)

    Returns:
        설정된 로거
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"알 수 없는 로그 레벨입니다: {level}")

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    formatter_cls = ColoredFormatter if colored else logging.Formatter
    console_handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt=DATE_FORMAT))
    setattr(console_handler, _HANDLER_TAG, True)
    logger.addHandler(console_handler)

    # 파일 핸들러 (ERROR 이상만)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.ERROR)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=DATE_FORMAT))
        setattr(file_handler, _HANDLER_TAG, True)
        logger.addHandler(file_handler)

    return logger


# 성능 측정 데코레이터
def log_performance(func: Callable) -> Callable:
    """함수 실행 시간을 DEBUG 레벨로 로깅하는 데코레이터"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        logger.debug(f"Starting {func.__name__}")

        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            logger.debug(
                f"함수 {func.__name__} 실행 실패: "
                f"시간={execution_time:.4f}초, "
                f"오류={str(e)}"
            )
            raise

        execution_time = time.perf_counter() - start_time
        logger.debug(f"Finished {func.__name__} in {execution_time:.4f} seconds")

        return result
    return wrapper


# 안전한 실행 데코레이터
T = TypeVar('T')

def safe_execute(default_return: Optional[T] = None, reraise: bool = False) -> Callable:
    """
    함수 실행을 안전하게 처리하는 데코레이터

    Args:
        default_return: 오류 발생 시 반환할 기본값
        reraise: 예외를 다시 발생시킬지 여부
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            logger = get_logger(func.__module__)
            try:
                return func(*args, **kwargs)
            except Exception as e:
                # 상세 오류 정보 로깅
                logger.error(
                    f"함수 {func.__name__} 실행 중 오류 발생:\n"
                    f"오류: {str(e)}\n"
                    f"스택 트레이스:\n{traceback.format_exc()}"
                )

                if reraise:
                    raise
                return default_return
        return wrapper
    return decorator
