# feed_app/api/users/services.py
import hashlib
import logging
import uuid
from dataclasses import asdict

from google.api_core.exceptions import Conflict, GoogleAPIError
from werkzeug.security import generate_password_hash

from feed_app.core.errors import UserAlreadyExists
from feed_app.models.user import User
from feed_app.services.firestore_service import store_call
from feed_app.utils.datetime_utils import DateTimeUtils
from feed_app.utils.masking import mask_email


def gravatar_url(email: str, size: int = 200) -> str:
    """이메일 기반 Gravatar 주소. 이미지가 없으면 기본 실루엣(mm)을 사용합니다."""
    digest = hashlib.md5(email.strip().lower().encode('utf-8')).hexdigest()
    return f"https://www.gravatar.com/avatar/{digest}?s={size}&r=pg&d=mm"


def email_key(email: str) -> str:
    """'user_emails' 문서 ID. 이메일에 '/' 가 들어가도 안전하도록 해시를 사용합니다."""
    return hashlib.sha256(email.strip().lower().encode('utf-8')).hexdigest()


class UserService:
    """
    회원가입(사용자 문서 생성)을 담당하는 서비스 클래스.

    이메일 중복은 'user_emails/{email_key}' 문서를 create() 로 먼저 선점하여 막습니다.
    create() 는 문서가 이미 있으면 실패하므로, 같은 이메일의 동시 가입 중 하나만 성공합니다.
    """

    def __init__(self, db):
        self.db = db
        self.users_ref = self.db.collection('users')
        self.user_emails_ref = self.db.collection('user_emails')

    def register(self, name: str, email: str, password: str) -> User:
        """
        새 사용자를 생성합니다. 같은 이메일이 이미 있으면 UserAlreadyExists 를 발생시킵니다.
        비밀번호는 해시로만 저장합니다.
        """
        email = email.lower()
        new_user = User(
            user_id=str(uuid.uuid4()),
            email=email,
            name=name,
            password_hash=generate_password_hash(password),
            avatar=gravatar_url(email),
        )

        email_ref = self.user_emails_ref.document(email_key(email))
        with store_call("user_emails.create", email=mask_email(email)):
            try:
                email_ref.create({'user_id': new_user.user_id})
            except Conflict as e:
                logging.info(f"회원가입 실패: 이미 가입된 이메일 ({mask_email(email)})")
                raise UserAlreadyExists() from e

        with store_call("users.create", user_id=new_user.user_id):
            try:
                self.users_ref.document(new_user.user_id).set(DateTimeUtils.for_firestore(asdict(new_user)))
            except GoogleAPIError:
                # 사용자 문서를 쓰지 못했으면 선점한 이메일을 되돌려 재가입이 가능하게 합니다.
                email_ref.delete()
                raise

        logging.info(f"신규 사용자 생성 완료 (user_id: {new_user.user_id})")
        return new_user
