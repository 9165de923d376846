import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from src.config import config

LOGGER_NAME = "project_tracker"


def setup_logging():
    # 로그 디렉토리 생성
    project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    log_dir = os.path.join(project_root, "logs")
    os.makedirs(log_dir, exist_ok=True)

    log_config = config.get("logging")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(log_config["level"]).upper(), logging.INFO))

    # 이미 핸들러가 설정되어 있으면 중복 추가 방지
    if logger.handlers:
        return logger

    formatter = logging.Formatter(log_config["format"])

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 파일 핸들러 (로테이션)
    if log_config.get("file"):
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, log_config["file"]),
            maxBytes=log_config["max_bytes"],
            backupCount=log_config["backup_count"],
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# 싱글톤처럼 사용하기 위한 전역 로거 인스턴스
logger = setup_logging()
