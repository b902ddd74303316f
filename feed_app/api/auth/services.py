# feed_app/api/auth/services.py
import logging
from typing import Any, Dict, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from feed_app.core.errors import InvalidCredential, UserNotFound
from feed_app.core.security import issue_session_token
from feed_app.services.firestore_service import store_call
from feed_app.utils.datetime_utils import DateTimeUtils
from feed_app.utils.masking import mask_email

# 등록되지 않은 이메일도 같은 비용의 해시 검증을 거치도록 하는 비교용 해시
_DUMMY_PASSWORD_HASH = generate_password_hash("not-a-registered-password")


class AuthService:
    """
    로그인(자격 증명 확인 및 세션 토큰 발급)과 현재 사용자 조회를 담당합니다.
    """
    def __init__(self, db):
        self.db = db
        self.users_ref = self.db.collection('users')

    def _find_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        with store_call("users.find_by_email", email=mask_email(email)):
            docs = self.users_ref.where('email', '==', email.lower()).limit(1).stream()
            user_doc = next(iter(docs), None)
        return user_doc.to_dict() if user_doc else None

    def authenticate(self, email: str, password: str) -> str:
        """
        이메일/비밀번호를 확인하고 세션 토큰을 반환합니다.
        사용자가 없거나 비밀번호가 틀린 경우 모두 같은 InvalidCredential 을 발생시킵니다.
        """
        user = self._find_user_by_email(email)
        if not user:
            check_password_hash(_DUMMY_PASSWORD_HASH, password)
            logging.info(f"로그인 실패: 등록되지 않은 이메일 ({mask_email(email)})")
            raise InvalidCredential()

        if not check_password_hash(user.get('password_hash', ''), password):
            logging.info(f"로그인 실패: 비밀번호 불일치 ({mask_email(email)})")
            raise InvalidCredential()

        return issue_session_token(user['user_id'])

    def get_identity(self, user_id: str) -> Dict[str, Any]:
        """토큰의 사용자 ID로 사용자 정보를 조회합니다. (password_hash 제외)"""
        with store_call("users.get", user_id=user_id):
            doc = self.users_ref.document(user_id).get()
        if not doc.exists:
            raise UserNotFound()

        user_data = DateTimeUtils.from_firestore(doc.to_dict())
        user_data.pop('password_hash', None)
        return user_data
