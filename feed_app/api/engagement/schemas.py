# feed_app/api/engagement/schemas.py
from flask import current_app
from marshmallow import Schema, fields, validate, validates, ValidationError


class CommentCreateSchema(Schema):
    """
    PUT /api/posts/comment/{post_id}
    댓글 작성 요청의 데이터 형식을 정의하고 유효성을 검사합니다.
    """
    text = fields.Str(
        required=True,
        validate=validate.Length(min=1, error="내용을 입력해주세요."),
        error_messages={"required": "내용을 입력해주세요."}
    )

    @validates('text')
    def validate_text_length(self, value, **kwargs):
        max_length = current_app.config.get('COMMENT_TEXT_MAX_LENGTH', 1000)
        if len(value) > max_length:
            raise ValidationError(f"댓글은 {max_length}자 이하여야 합니다.")
