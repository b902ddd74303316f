# feed_app/api/engagement/routes.py
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity

from feed_app.api.engagement.schemas import CommentCreateSchema
from feed_app.api.posts.schemas import LikeSchema, CommentResponseSchema, PostResponseSchema

engagement_bp = Blueprint('engagement_bp', __name__)


@engagement_bp.route('/like/<string:post_id>', methods=['PUT'])
@jwt_required()
def like_post(post_id: str):
    """게시물에 좋아요를 누릅니다. 이미 누른 경우 400."""
    engagement_service = current_app.services['engagement']
    likes = engagement_service.like(post_id, get_jwt_identity())
    return jsonify(LikeSchema(many=True).dump(likes)), 200


@engagement_bp.route('/unlike/<string:post_id>', methods=['PUT'])
@jwt_required()
def unlike_post(post_id: str):
    """좋아요를 취소합니다. 누른 적이 없으면 400."""
    engagement_service = current_app.services['engagement']
    likes = engagement_service.unlike(post_id, get_jwt_identity())
    return jsonify(LikeSchema(many=True).dump(likes)), 200


@engagement_bp.route('/comment/<string:post_id>', methods=['PUT'])
@jwt_required()
def add_comment(post_id: str):
    """
    게시물에 댓글을 작성합니다.
    - 성공 시 댓글이 반영된 게시물 전체를 반환합니다.
    """
    engagement_service = current_app.services['engagement']
    data = CommentCreateSchema().load(request.get_json(silent=True) or {})
    post = engagement_service.add_comment(post_id, get_jwt_identity(), data['text'])
    return jsonify(PostResponseSchema().dump(post)), 200


@engagement_bp.route('/comment/<string:post_id>/<string:comment_id>', methods=['DELETE'])
@jwt_required()
def remove_comment(post_id: str, comment_id: str):
    """
    댓글을 삭제합니다. (게시물 작성자만 가능)
    """
    engagement_service = current_app.services['engagement']
    comments = engagement_service.remove_comment(post_id, comment_id, get_jwt_identity())
    return jsonify(CommentResponseSchema(many=True).dump(comments)), 200
