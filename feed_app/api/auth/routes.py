# feed_app/api/auth/routes.py
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity

from feed_app.api.auth.schemas import LoginSchema, TokenResponseSchema, IdentityResponseSchema

auth_bp = Blueprint('auth_bp', __name__)


@auth_bp.route('', methods=['GET'])
@jwt_required()
def get_current_identity():
    """현재 토큰의 사용자 정보를 반환합니다."""
    auth_service = current_app.services['auth']
    identity = auth_service.get_identity(get_jwt_identity())
    return jsonify(IdentityResponseSchema().dump(identity)), 200


@auth_bp.route('', methods=['POST'])
def login():
    """
    이메일/비밀번호 로그인.
    - 요청 본문은 LoginSchema 로 검증하며, 실패 시 전역 핸들러가 400을 반환합니다.
    - 성공 시 세션 토큰을 반환합니다.
    """
    auth_service = current_app.services['auth']
    data = LoginSchema().load(request.get_json(silent=True) or {})
    token = auth_service.authenticate(data['email'], data['password'])
    return jsonify(TokenResponseSchema().dump({"token": token})), 200
