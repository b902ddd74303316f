# feed_app/api/users/routes.py
from flask import Blueprint, request, jsonify, current_app

from feed_app.api.auth.schemas import TokenResponseSchema
from feed_app.api.users.schemas import RegisterSchema
from feed_app.core.security import issue_session_token

users_bp = Blueprint('users_bp', __name__)


@users_bp.route('', methods=['POST'])
def register_user():
    """
    회원가입 후 바로 사용할 수 있는 세션 토큰을 반환합니다.
    """
    user_service = current_app.services['users']
    data = RegisterSchema().load(request.get_json(silent=True) or {})
    user = user_service.register(data['name'], data['email'], data['password'])
    return jsonify(TokenResponseSchema().dump({"token": issue_session_token(user.user_id)})), 200
