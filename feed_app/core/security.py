# feed_app/core/security.py
from datetime import timedelta
from typing import Optional

from flask import current_app, jsonify
from flask_jwt_extended import JWTManager, create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt import ExpiredSignatureError, PyJWTError

from feed_app.core.errors import Unauthenticated


def issue_session_token(identity_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    사용자 ID를 담은 서명된 세션 토큰을 발급합니다.
    만료 시간은 기본적으로 JWT_ACCESS_TOKEN_EXPIRES 설정을 따릅니다.
    """
    if expires_delta is None:
        return create_access_token(identity=identity_id)
    return create_access_token(identity=identity_id, expires_delta=expires_delta)


def resolve_identity(token: Optional[str]) -> str:
    """
    세션 토큰의 서명과 만료를 검증하고, 토큰에 담긴 사용자 ID를 반환합니다.
    서버 측 세션 저장소는 없으며 토큰 자체만으로 유효성을 판단합니다.
    """
    if not token:
        raise Unauthenticated("인증 토큰이 없습니다.")

    try:
        payload = decode_token(token)
    except ExpiredSignatureError as e:
        raise Unauthenticated("토큰이 만료되었습니다.") from e
    except (PyJWTError, JWTExtendedException) as e:
        raise Unauthenticated("유효하지 않은 토큰입니다.") from e

    if payload.get('type') != 'access':
        raise Unauthenticated("유효하지 않은 토큰입니다.")

    identity_id = payload.get(current_app.config.get('JWT_IDENTITY_CLAIM', 'sub'))
    if not identity_id:
        raise Unauthenticated("유효하지 않은 토큰입니다.")
    return identity_id


def register_jwt_error_handlers(jwt: JWTManager) -> None:
    """
    @jwt_required() 가 거부한 요청을 다른 도메인 예외와 같은 형태의 401 응답으로 바꿉니다.
    (헤더 누락, 형식 오류, 서명 불일치, refresh 토큰 사용, 만료)
    """
    @jwt.unauthorized_loader
    def missing_token_callback(explanation):
        return jsonify(Unauthenticated("인증 토큰이 없습니다.").to_dict()), Unauthenticated.status_code

    @jwt.invalid_token_loader
    def invalid_token_callback(explanation):
        return jsonify(Unauthenticated("유효하지 않은 토큰입니다.").to_dict()), Unauthenticated.status_code

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify(Unauthenticated("토큰이 만료되었습니다.").to_dict()), Unauthenticated.status_code
