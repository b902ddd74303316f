# feed_app/core/errors.py
"""
서비스 계층에서 발생시키는 도메인 예외 모음.

각 예외는 HTTP 상태 코드와 error_code 를 클래스 속성으로 가지며,
create_app 에 등록된 전역 에러 핸들러가 이를 JSON 응답으로 변환합니다.
"""


class FeedError(Exception):
    """모든 도메인 예외의 기반 클래스."""
    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"
    default_message = "서버 내부 오류가 발생했습니다."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error_code": self.error_code, "message": self.message}


class InvalidInput(FeedError):
    status_code = 400
    error_code = "VALIDATION_ERROR"
    default_message = "요청 형식이 올바르지 않습니다."


class InvalidCredential(FeedError):
    # 계정 존재 여부가 노출되지 않도록 '사용자 없음'과 '비밀번호 불일치'를 구분하지 않습니다.
    status_code = 400
    error_code = "INVALID_CREDENTIAL"
    default_message = "이메일 또는 비밀번호가 올바르지 않습니다."


class Unauthenticated(FeedError):
    status_code = 401
    error_code = "UNAUTHENTICATED"
    default_message = "인증 토큰이 없거나 유효하지 않습니다."


class Forbidden(FeedError):
    status_code = 403
    error_code = "FORBIDDEN"
    default_message = "권한이 없습니다."


class NotFound(FeedError):
    status_code = 404
    error_code = "NOT_FOUND"
    default_message = "요청한 리소스를 찾을 수 없습니다."


class PostNotFound(NotFound):
    error_code = "POST_NOT_FOUND"
    default_message = "게시물을 찾을 수 없습니다."


class CommentNotFound(NotFound):
    error_code = "COMMENT_NOT_FOUND"
    default_message = "댓글이 존재하지 않습니다."


class UserNotFound(NotFound):
    error_code = "USER_NOT_FOUND"
    default_message = "사용자를 찾을 수 없습니다."


class DuplicateAction(FeedError):
    status_code = 400
    error_code = "ALREADY_LIKED"
    default_message = "이미 좋아요를 누른 게시물입니다."


class UserAlreadyExists(DuplicateAction):
    error_code = "USER_ALREADY_EXISTS"
    default_message = "이미 가입된 이메일입니다."


class InvalidState(FeedError):
    status_code = 400
    error_code = "NOT_LIKED"
    default_message = "좋아요를 누르지 않은 게시물입니다."


class StoreUnavailable(FeedError):
    status_code = 500
    error_code = "STORE_UNAVAILABLE"
    default_message = "데이터 저장소에 접근할 수 없습니다."
