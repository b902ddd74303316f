# feed_app/api/posts/services.py
import logging
import uuid
from dataclasses import asdict
from typing import Any, Dict, List, Tuple

from firebase_admin import firestore

from feed_app.core.errors import Forbidden, PostNotFound, UserNotFound
from feed_app.models.post import Author, Post
from feed_app.services.firestore_service import store_call
from feed_app.services.post_locks import PostLockRegistry
from feed_app.utils.datetime_utils import DateTimeUtils


def load_author_snapshot(users_ref, user_id: str) -> Author:
    """사용자 문서에서 현재 이름/아바타를 복사해 작성자 스냅샷을 만듭니다."""
    with store_call("users.get", user_id=user_id):
        user_doc = users_ref.document(user_id).get()
    if not user_doc.exists:
        raise UserNotFound()
    user_data = user_doc.to_dict()
    return Author(user_id=user_id, name=user_data.get('name'), avatar=user_data.get('avatar'))


def load_post(posts_ref, post_id: str) -> Tuple[Any, Dict[str, Any]]:
    """게시물 문서 참조와 데이터를 함께 반환합니다. 없으면 PostNotFound."""
    post_ref = posts_ref.document(post_id)
    with store_call("posts.get", post_id=post_id):
        doc = post_ref.get()
    if not doc.exists:
        raise PostNotFound()
    return post_ref, DateTimeUtils.from_firestore(doc.to_dict())


class PostService:
    """
    게시글 생성/조회/삭제를 담당하는 서비스 클래스.
    삭제는 작성자 본인만 가능합니다.
    """
    def __init__(self, db, locks: PostLockRegistry):
        self.db = db
        self.posts_ref = self.db.collection('posts')
        self.users_ref = self.db.collection('users')
        self.locks = locks

    def create_post(self, user_id: str, text: str) -> Dict[str, Any]:
        """새로운 게시글을 생성하고 Firestore에 저장합니다."""
        author = load_author_snapshot(self.users_ref, user_id)
        new_post = Post(post_id=str(uuid.uuid4()), author=author, text=text)
        post_data = asdict(new_post)

        with store_call("posts.create", post_id=new_post.post_id, user_id=user_id):
            self.posts_ref.document(new_post.post_id).set(DateTimeUtils.for_firestore(post_data))
        return post_data

    def get_posts(self) -> List[Dict[str, Any]]:
        """전체 게시글을 최신순으로 반환합니다."""
        with store_call("posts.list"):
            query = self.posts_ref.order_by("created_at", direction=firestore.Query.DESCENDING)
            return [DateTimeUtils.from_firestore(doc.to_dict()) for doc in query.stream()]

    def get_post_by_id(self, post_id: str) -> Dict[str, Any]:
        _, post_data = load_post(self.posts_ref, post_id)
        return post_data

    def delete_post(self, post_id: str, user_id: str) -> Dict[str, str]:
        """
        게시글을 삭제합니다.
        좋아요/댓글 변경과 겹치지 않도록 해당 게시물의 락 안에서 수행합니다.
        """
        with self.locks.lock_for(post_id):
            post_ref, post_data = load_post(self.posts_ref, post_id)
            if post_data.get('author', {}).get('user_id') != user_id:
                raise Forbidden("게시글을 삭제할 권한이 없습니다.")

            with store_call("posts.delete", post_id=post_id, user_id=user_id):
                post_ref.delete()

        logging.info(f"게시글 삭제 완료 (post_id: {post_id})")
        return {"message": "게시글이 삭제되었습니다."}
