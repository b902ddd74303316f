# feed_app/api/users/schemas.py
from marshmallow import Schema, fields, validate


class RegisterSchema(Schema):
    """
    POST /api/users
    회원가입 요청 본문의 유효성을 검사하는 스키마.
    """
    name = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=100, error="이름은 1~100자 사이여야 합니다."),
        error_messages={"required": "이름은 필수 항목입니다."}
    )
    email = fields.Email(
        required=True,
        error_messages={"required": "이메일은 필수 항목입니다.", "invalid": "올바른 이메일을 입력해주세요."}
    )
    password = fields.Str(
        required=True,
        load_only=True,
        validate=validate.Length(min=6, error="비밀번호는 6자 이상이어야 합니다."),
        error_messages={"required": "비밀번호는 필수 항목입니다."}
    )
