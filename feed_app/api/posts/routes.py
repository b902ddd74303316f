# feed_app/api/posts/routes.py
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity

from feed_app.api.posts.schemas import PostCreateSchema, PostResponseSchema

posts_bp = Blueprint('posts_bp', __name__)


@posts_bp.route('', methods=['POST'])
@jwt_required()
def create_post():
    """
    새로운 게시글을 생성합니다.
    - 요청 본문은 PostCreateSchema에 따라 유효성을 검사합니다.
    """
    post_service = current_app.services['posts']
    data = PostCreateSchema().load(request.get_json(silent=True) or {})
    new_post = post_service.create_post(get_jwt_identity(), data['text'])
    return jsonify(PostResponseSchema().dump(new_post)), 200


@posts_bp.route('', methods=['GET'])
@jwt_required()
def get_posts():
    """전체 게시글을 최신순으로 조회합니다."""
    post_service = current_app.services['posts']
    posts = post_service.get_posts()
    return jsonify(PostResponseSchema(many=True).dump(posts)), 200


@posts_bp.route('/<string:post_id>', methods=['GET'])
@jwt_required()
def get_post(post_id: str):
    post_service = current_app.services['posts']
    post = post_service.get_post_by_id(post_id)
    return jsonify(PostResponseSchema().dump(post)), 200


@posts_bp.route('/<string:post_id>', methods=['DELETE'])
@jwt_required()
def delete_post(post_id: str):
    """
    특정 게시글을 삭제합니다. (작성자 본인만 가능)
    """
    post_service = current_app.services['posts']
    result = post_service.delete_post(post_id, get_jwt_identity())
    return jsonify(result), 200
