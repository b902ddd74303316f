# feed_app/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from flask import Flask, jsonify
from marshmallow import ValidationError
from flask_jwt_extended import JWTManager
from werkzeug.exceptions import HTTPException

# - 설정 / 에러
from feed_app.core.config import config_by_name
from feed_app.core.errors import FeedError, InvalidInput
from feed_app.core.security import register_jwt_error_handlers

# - API 블루프린트
from feed_app.api.auth.routes import auth_bp
from feed_app.api.users.routes import users_bp
from feed_app.api.posts.routes import posts_bp
from feed_app.api.engagement.routes import engagement_bp

# - 서비스 모듈
from feed_app.api.auth.services import AuthService
from feed_app.api.users.services import UserService
from feed_app.api.posts.services import PostService
from feed_app.api.engagement.services import EngagementService
from feed_app.services.firestore_service import init_firestore
from feed_app.services.post_locks import PostLockRegistry


def create_app(config_name: str = None, db=None):
    """
    Flask 애플리케이션 팩토리 함수.

    :param config_name: 'development' / 'testing' / 'production'. 생략 시 FLASK_ENV 값을 사용합니다.
    :param db: Firestore 클라이언트(또는 같은 인터페이스의 객체). 생략 시 firebase_admin 으로 생성합니다.
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    if not app.config.get('JWT_SECRET_KEY'):
        raise ValueError("필수 환경 변수가 설정되지 않았습니다: JWT_SECRET_KEY")

    # =====================================================================================
    # 4. 확장 기능 및 외부 서비스 초기화
    # =====================================================================================
    jwt = JWTManager(app)
    register_jwt_error_handlers(jwt)

    if db is None:
        try:
            db = init_firestore(app)
        except Exception as e:
            logging.error(f"Failed to initialize Firestore client: {e}")
            raise

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    post_locks = PostLockRegistry()

    app.services = {}
    app.services['auth'] = AuthService(db)
    app.services['users'] = UserService(db)
    app.services['posts'] = PostService(db, post_locks)
    app.services['engagement'] = EngagementService(
        db, post_locks,
        legacy_comment_removal=app.config.get('LEGACY_COMMENT_REMOVAL', False)
    )
    if app.config.get('LEGACY_COMMENT_REMOVAL'):
        logging.warning("LEGACY_COMMENT_REMOVAL 이 켜져 있습니다. 댓글 삭제가 요청자 ID 기준으로 동작합니다.")

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(users_bp, url_prefix='/api/users')
    app.register_blueprint(posts_bp, url_prefix='/api/posts')
    app.register_blueprint(engagement_bp, url_prefix='/api/posts')

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({"status": "healthy"}), 200

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": InvalidInput.error_code, "details": err.messages}
        return jsonify(response), InvalidInput.status_code

    @app.errorhandler(FeedError)
    def handle_feed_error(err):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        # 라우팅 단계의 404/405 등은 상태 코드를 그대로 유지합니다.
        response = {"error_code": err.name.upper().replace(" ", "_"), "message": err.description}
        return jsonify(response), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "서버 내부에서 예상치 못한 오류가 발생했습니다."}
        return jsonify(response), 500

    # =====================================================================================
    # 8. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
