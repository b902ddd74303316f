# feed_app/api/posts/schemas.py
from flask import current_app
from marshmallow import Schema, fields, validate, validates, ValidationError


# --- 재사용을 위한 중첩 스키마 ---
class AuthorSchema(Schema):
    """게시물/댓글 응답에 포함될 작성자 정보 스키마. (작성 시점 스냅샷)"""
    user_id = fields.Str(required=True)
    name = fields.Str(required=True)
    avatar = fields.Str(allow_none=True)


class LikeSchema(Schema):
    user_id = fields.Str(required=True)


class CommentResponseSchema(Schema):
    """댓글 정보 응답 형식."""
    comment_id = fields.Str(required=True)
    author = fields.Nested(AuthorSchema, required=True)
    text = fields.Str(required=True)
    created_at = fields.DateTime(required=True)


# --- API 요청/응답 스키마 ---

class PostCreateSchema(Schema):
    """POST /api/posts 요청 본문의 유효성을 검사합니다."""
    text = fields.Str(
        required=True,
        validate=validate.Length(min=1, error="내용을 입력해주세요."),
        error_messages={"required": "내용을 입력해주세요."}
    )

    @validates('text')
    def validate_text_length(self, value, **kwargs):
        max_length = current_app.config.get('POST_TEXT_MAX_LENGTH', 2000)
        if len(value) > max_length:
            raise ValidationError(f"게시글은 {max_length}자 이하여야 합니다.")


class PostResponseSchema(Schema):
    """게시글 정보 응답을 위한 최종 JSON 형식을 정의합니다."""
    post_id = fields.Str(dump_only=True)
    author = fields.Nested(AuthorSchema, required=True)
    text = fields.Str(required=True)
    likes = fields.List(fields.Nested(LikeSchema), required=True)
    comments = fields.List(fields.Nested(CommentResponseSchema), required=True)
    created_at = fields.DateTime(required=True)
