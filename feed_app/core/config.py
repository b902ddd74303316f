# feed_app/core/config.py

import os
from datetime import timedelta


def _env_flag(name: str, default: bool = False) -> bool:
    """'1', 'true', 'yes', 'on' 값을 True로 해석합니다."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # JWT 서명 키. 토큰의 위변조를 막기 위해 반드시 .env 에서 주입해야 합니다.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    JWT_ALGORITHM = 'HS256'
    # 세션 토큰 유효 기간 (기본 36000초 = 10시간)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(seconds=int(os.getenv('JWT_ACCESS_TOKEN_EXPIRES_SECONDS', 36000)))

    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')

    # 댓글 삭제 시 '요청자 ID'로 삭제 위치를 찾던 과거 동작을 재현할지 여부 (호환성 테스트용)
    LEGACY_COMMENT_REMOVAL = _env_flag('LEGACY_COMMENT_REMOVAL')

    POST_TEXT_MAX_LENGTH = int(os.getenv('POST_TEXT_MAX_LENGTH', 2000))
    COMMENT_TEXT_MAX_LENGTH = int(os.getenv('COMMENT_TEXT_MAX_LENGTH', 1000))


class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH', Config.FIREBASE_CREDENTIALS_PATH)


class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다. 문서 저장소는 테스트에서 직접 주입합니다."""
    TESTING = True
    DEBUG = False
    JWT_SECRET_KEY = os.getenv('TEST_JWT_SECRET_KEY', 'test-secret-key-with-enough-length-for-hs256')
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')


class ProductionConfig(Config):
    """운영 환경 설정. JWT_SECRET_KEY 누락은 create_app 에서 즉시 오류로 처리됩니다."""
    DEBUG = False


# FLASK_ENV 값에 따라 create_app 에서 적절한 설정 클래스를 선택합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
