"""
YAML 설정 파일 생성 스크립트
"""

from pathlib import Path
import yaml

from shared.error_handler import safe_execute
from .config import Config

# 기본 설정 파일 경로 (현재 작업 디렉토리 기준)
DEFAULT_CONFIG_PATH = Path('config') / 'game_config.yaml'


@safe_execute(reraise=True)
def write_default_config(config_path=DEFAULT_CONFIG_PATH) -> Path:
    """
    기본 설정을 YAML 파일로 저장

    Args:
        config_path: 저장할 파일 경로

    Returns:
        저장된 파일 경로
    """
    config_path = Path(config_path)

    # 디렉토리 생성
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # YAML 파일로 저장
    with open(config_path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(Config().to_dict(), f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    return config_path


if __name__ == '__main__':
    path = write_default_config()
    print(f"설정 파일이 생성되었습니다: {path}")
