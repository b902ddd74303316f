# feed_app/models/post.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List

from feed_app.utils.datetime_utils import DateTimeUtils


@dataclass
class Author:
    """
    게시물/댓글 문서 내부에 저장될 작성자 정보.
    작성 시점의 이름과 아바타를 복사해 두며, 이후 프로필이 바뀌어도 갱신하지 않습니다.
    """
    user_id: str
    name: str
    avatar: Optional[str] = None


@dataclass
class Like:
    """게시물 문서의 likes 배열 원소. 사용자당 하나만 존재해야 합니다."""
    user_id: str


@dataclass
class Comment:
    """게시물 문서의 comments 배열 원소."""
    comment_id: str
    author: Author
    text: str
    created_at: datetime = field(default_factory=DateTimeUtils.now)


@dataclass
class Post:
    """
    Firestore 'posts' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    좋아요와 댓글은 별도 컬렉션이 아니라 문서 안의 배열로 관리하며, 최신 항목이 앞에 옵니다.
    """
    post_id: str
    author: Author
    text: str
    likes: List[Like] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=DateTimeUtils.now)
