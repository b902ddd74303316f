# feed_app/services/post_locks.py
import threading
from contextlib import contextmanager


class _PostLock:
    __slots__ = ("lock", "users")

    def __init__(self):
        self.lock = threading.RLock()
        self.users = 0  # 락을 잡고 있거나 기다리는 호출 수


class PostLockRegistry:
    """
    게시물 ID별 상호 배제 락을 관리합니다.
    같은 게시물 문서에 대한 읽기-수정-쓰기가 동시에 두 개 이상 진행되지 않도록 보장합니다.
    (단일 프로세스 범위)

    항목은 잡고 있거나 기다리는 호출이 모두 끝나면 바로 제거되므로,
    등록된 락의 수는 현재 변경 중인 게시물 수를 넘지 않습니다.

    사용 예::

        with locks.lock_for(post_id):
            ...
    """

    def __init__(self):
        self._locks: dict[str, _PostLock] = {}
        self._guard = threading.Lock()

    @contextmanager
    def lock_for(self, post_id: str):
        with self._guard:
            entry = self._locks.get(post_id)
            if entry is None:
                entry = _PostLock()
                self._locks[post_id] = entry
            entry.users += 1

        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[post_id]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
