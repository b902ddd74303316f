# feed_app/models/user.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from feed_app.utils.datetime_utils import DateTimeUtils


@dataclass
class User:
    """
    Firestore 'users' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    password_hash 는 서비스 계층 밖으로 나가지 않습니다.
    """
    user_id: str
    email: str
    name: str
    password_hash: str
    avatar: Optional[str] = None
    created_at: datetime = field(default_factory=DateTimeUtils.now)
