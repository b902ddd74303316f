# feed_app/conftest.py
"""
테스트 공용 픽스처.

실제 Firestore 대신 같은 호출 형태(collection/document/get/set/update/delete,
where/order_by/limit/stream)를 제공하는 메모리 기반 테스트 더블을 주입합니다.
"""
import copy
import threading
import time
from collections import defaultdict

import pytest
from google.api_core.exceptions import AlreadyExists, NotFound as FirestoreNotFound

from feed_app import create_app


class FakeDocumentSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeDocumentReference:
    def __init__(self, db, collection_name, doc_id):
        self._db = db
        self._collection_name = collection_name
        self.id = doc_id

    @property
    def _docs(self):
        return self._db.collections[self._collection_name]

    def get(self):
        self._db.check_available()
        with self._db.lock:
            data = copy.deepcopy(self._docs.get(self.id))
        # 읽기와 쓰기 사이에 다른 요청이 끼어들 수 있도록 지연을 둡니다.
        if self._db.read_delay:
            time.sleep(self._db.read_delay)
        return FakeDocumentSnapshot(self.id, data)

    def set(self, data):
        self._db.check_available()
        with self._db.lock:
            self._docs[self.id] = copy.deepcopy(data)

    def create(self, data):
        self._db.check_available()
        with self._db.lock:
            if self.id in self._docs:
                raise AlreadyExists(f"Document already exists: {self._collection_name}/{self.id}")
            self._docs[self.id] = copy.deepcopy(data)

    def update(self, field_updates):
        self._db.check_available()
        with self._db.lock:
            if self.id not in self._docs:
                raise FirestoreNotFound(f"No document to update: {self._collection_name}/{self.id}")
            self._docs[self.id].update(copy.deepcopy(field_updates))

    def delete(self):
        self._db.check_available()
        with self._db.lock:
            self._docs.pop(self.id, None)


class FakeQuery:
    def __init__(self, db, collection_name, filters=(), order=None, limit_count=None):
        self._db = db
        self._collection_name = collection_name
        self._filters = tuple(filters)
        self._order = order
        self._limit = limit_count

    def _copy(self, **changes):
        params = dict(filters=self._filters, order=self._order, limit_count=self._limit)
        params.update(changes)
        return FakeQuery(self._db, self._collection_name, **params)

    def where(self, field, op, value):
        assert op == '==', "테스트 더블은 '==' 조건만 지원합니다."
        return self._copy(filters=self._filters + ((field, value),))

    def order_by(self, field, direction='ASCENDING'):
        return self._copy(order=(field, direction))

    def limit(self, count):
        return self._copy(limit_count=count)

    def stream(self):
        self._db.check_available()
        with self._db.lock:
            items = [(doc_id, copy.deepcopy(data)) for doc_id, data in self._db.collections[self._collection_name].items()]

        items = [item for item in items if all(item[1].get(f) == v for f, v in self._filters)]
        if self._order:
            field, direction = self._order
            items.sort(key=lambda item: item[1].get(field), reverse=(direction == 'DESCENDING'))
        if self._limit is not None:
            items = items[:self._limit]
        return iter([FakeDocumentSnapshot(doc_id, data) for doc_id, data in items])


class FakeCollectionReference(FakeQuery):
    def __init__(self, db, collection_name):
        super().__init__(db, collection_name)

    def document(self, doc_id):
        return FakeDocumentReference(self._db, self._collection_name, doc_id)


class FakeFirestore:
    """메모리 기반 Firestore 테스트 더블."""

    def __init__(self):
        self.collections = defaultdict(dict)
        self.lock = threading.Lock()
        self.read_delay = 0.0
        self.failure = None

    def collection(self, name):
        return FakeCollectionReference(self, name)

    def check_available(self):
        if self.failure is not None:
            raise self.failure


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def app(fake_db):
    app = create_app('testing', db=fake_db)
    yield app


@pytest.fixture
def legacy_app(fake_db, monkeypatch):
    """댓글 삭제의 과거 동작(LEGACY_COMMENT_REMOVAL)을 켠 앱."""
    from feed_app.core.config import TestingConfig
    monkeypatch.setattr(TestingConfig, "LEGACY_COMMENT_REMOVAL", True)
    return create_app("testing", db=fake_db)


@pytest.fixture
def client(app):
    return app.test_client()


def _auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    return _auth_headers


def _register_with(client, email, name=None, password="secret123"):
    response = client.post('/api/users', json={
        "name": name or email.split('@')[0],
        "email": email,
        "password": password,
    })
    assert response.status_code == 200, response.get_json()
    token = response.get_json()["token"]
    me = client.get('/api/auth', headers=_auth_headers(token))
    return token, me.get_json()["user_id"]


@pytest.fixture
def register(client):
    """
    사용자를 가입시키고 (token, user_id) 를 반환하는 헬퍼.

    사용 예::

        token, user_id = register("u1@x.com")
    """
    def _register(email, name=None, password="secret123"):
        return _register_with(client, email, name=name, password=password)

    return _register


@pytest.fixture
def register_on():
    """지정한 test client 로 가입시키는 헬퍼. (별도 설정의 앱을 쓰는 테스트용)"""
    return _register_with
