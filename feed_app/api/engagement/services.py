# feed_app/api/engagement/services.py
import logging
import uuid
from dataclasses import asdict
from typing import Any, Dict, List

from feed_app.api.posts.services import load_author_snapshot, load_post
from feed_app.core.errors import CommentNotFound, DuplicateAction, Forbidden, InvalidState
from feed_app.models.post import Comment, Like
from feed_app.services.firestore_service import store_call
from feed_app.services.post_locks import PostLockRegistry
from feed_app.utils.datetime_utils import DateTimeUtils


class EngagementService:
    """
    게시물 문서에 포함된 좋아요/댓글 배열을 변경하는 서비스 클래스.

    모든 작업은 '문서 읽기 -> 배열 수정 -> 배열 저장' 순서이므로,
    같은 게시물에 대한 작업은 PostLockRegistry 의 게시물별 락으로 직렬화합니다.
    서로 다른 게시물에 대한 작업은 락을 공유하지 않아 병렬로 진행됩니다.
    """
    def __init__(self, db, locks: PostLockRegistry, legacy_comment_removal: bool = False):
        self.db = db
        self.posts_ref = self.db.collection('posts')
        self.users_ref = self.db.collection('users')
        self.locks = locks
        self.legacy_comment_removal = legacy_comment_removal

    def _save_field(self, post_ref, field_name: str, value: List[Dict[str, Any]], post_id: str):
        with store_call(f"posts.update.{field_name}", post_id=post_id):
            post_ref.update({field_name: DateTimeUtils.for_firestore(value)})

    # --- 좋아요 ---
    def like(self, post_id: str, user_id: str) -> List[Dict[str, Any]]:
        """게시물에 좋아요를 추가하고 갱신된 좋아요 목록을 반환합니다."""
        with self.locks.lock_for(post_id):
            post_ref, post_data = load_post(self.posts_ref, post_id)
            likes = post_data.get('likes', [])

            if any(like.get('user_id') == user_id for like in likes):
                raise DuplicateAction()

            likes.insert(0, asdict(Like(user_id=user_id)))
            self._save_field(post_ref, 'likes', likes, post_id)
            return likes

    def unlike(self, post_id: str, user_id: str) -> List[Dict[str, Any]]:
        """사용자의 좋아요 하나(가장 앞의 것)를 제거하고 갱신된 좋아요 목록을 반환합니다."""
        with self.locks.lock_for(post_id):
            post_ref, post_data = load_post(self.posts_ref, post_id)
            likes = post_data.get('likes', [])

            remove_index = next((i for i, like in enumerate(likes) if like.get('user_id') == user_id), None)
            if remove_index is None:
                raise InvalidState()

            likes.pop(remove_index)
            self._save_field(post_ref, 'likes', likes, post_id)
            return likes

    # --- 댓글 ---
    def add_comment(self, post_id: str, user_id: str, text: str) -> Dict[str, Any]:
        """새 댓글을 맨 앞에 추가하고 갱신된 게시물 전체를 반환합니다."""
        author = load_author_snapshot(self.users_ref, user_id)

        with self.locks.lock_for(post_id):
            post_ref, post_data = load_post(self.posts_ref, post_id)
            comments = post_data.get('comments', [])

            new_comment = Comment(comment_id=str(uuid.uuid4()), author=author, text=text)
            comments.insert(0, asdict(new_comment))
            self._save_field(post_ref, 'comments', comments, post_id)

            post_data['comments'] = comments
            return post_data

    def remove_comment(self, post_id: str, comment_id: str, user_id: str) -> List[Dict[str, Any]]:
        """
        게시물의 댓글 하나를 삭제하고 갱신된 댓글 목록을 반환합니다.
        삭제 권한은 댓글 작성자가 아니라 '게시물 작성자'에게 있습니다.
        """
        with self.locks.lock_for(post_id):
            post_ref, post_data = load_post(self.posts_ref, post_id)
            comments = post_data.get('comments', [])

            if not any(comment.get('comment_id') == comment_id for comment in comments):
                raise CommentNotFound()

            if post_data.get('author', {}).get('user_id') != user_id:
                raise Forbidden("댓글을 삭제할 권한이 없습니다.")

            remove_index = self._comment_removal_index(comments, comment_id, user_id)
            removed = comments.pop(remove_index)
            self._save_field(post_ref, 'comments', comments, post_id)

            if removed.get('comment_id') != comment_id:
                logging.warning(
                    f"LEGACY_COMMENT_REMOVAL: 요청과 다른 댓글이 삭제되었습니다 "
                    f"(post_id: {post_id}, requested: {comment_id}, removed: {removed.get('comment_id')})"
                )
            return comments

    def _comment_removal_index(self, comments: List[Dict[str, Any]], comment_id: str, user_id: str) -> int:
        if not self.legacy_comment_removal:
            return next(i for i, comment in enumerate(comments) if comment.get('comment_id') == comment_id)

        # 과거 동작: 요청자(게시물 작성자)가 쓴 첫 댓글 위치를 찾고, 없으면 마지막 댓글을 삭제
        return next(
            (i for i, comment in enumerate(comments) if comment.get('author', {}).get('user_id') == user_id),
            -1
        )
