# feed_app/services/firestore_service.py
import logging
from contextlib import contextmanager

import firebase_admin
from firebase_admin import credentials, firestore
from flask import Flask
from google.api_core.exceptions import GoogleAPIError

from feed_app.core.errors import StoreUnavailable


def init_firestore(app: Flask):
    """
    설정된 서비스 계정 키로 firebase_admin 을 초기화하고 Firestore 클라이언트를 반환합니다.
    이미 초기화된 경우에는 기존 앱을 재사용합니다.
    """
    if not firebase_admin._apps:
        cred_path = app.config.get('FIREBASE_CREDENTIALS_PATH')
        options = {}
        if app.config.get('FIREBASE_PROJECT_ID'):
            options['projectId'] = app.config['FIREBASE_PROJECT_ID']
        if cred_path:
            firebase_admin.initialize_app(credentials.Certificate(cred_path), options)
        else:
            # GOOGLE_APPLICATION_CREDENTIALS 또는 에뮬레이터 환경을 사용합니다.
            firebase_admin.initialize_app(options=options or None)
        logging.info("Firebase 앱이 초기화되었습니다.")
    return firestore.client()


@contextmanager
def store_call(operation: str, **context):
    """
    Firestore 호출을 감싸 저장소 장애를 StoreUnavailable 로 변환합니다.
    재시도는 하지 않으며, 원인 파악을 위해 작업명과 식별자만 로그에 남깁니다.

    사용 예::

        with store_call("posts.get", post_id=post_id):
            doc = self.posts_ref.document(post_id).get()
    """
    try:
        yield
    except GoogleAPIError as e:
        details = ", ".join(f"{key}: {value}" for key, value in context.items())
        logging.error(f"Firestore 호출 실패 ({operation}{', ' + details if details else ''}): {e}", exc_info=True)
        raise StoreUnavailable() from e
