# feed_app/api/auth/schemas.py
from marshmallow import Schema, fields, validate


class LoginSchema(Schema):
    """POST /api/auth 요청 본문의 유효성을 검사하는 스키마"""
    email = fields.Email(
        required=True,
        error_messages={"required": "이메일은 필수 항목입니다.", "invalid": "올바른 이메일을 입력해주세요."}
    )
    password = fields.Str(
        required=True,
        validate=validate.Length(min=1, error="비밀번호를 입력해주세요."),
        load_only=True,
        error_messages={"required": "비밀번호를 입력해주세요."}
    )


class TokenResponseSchema(Schema):
    token = fields.Str(required=True)


class IdentityResponseSchema(Schema):
    """
    GET /api/auth
    현재 로그인한 사용자 정보. password_hash 는 절대 포함하지 않습니다.
    """
    user_id = fields.Str(required=True, dump_only=True)
    email = fields.Email(required=True)
    name = fields.Str(required=True)
    avatar = fields.Str(allow_none=True)
    created_at = fields.DateTime()
