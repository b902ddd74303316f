# feed_app/utils/__init__.py
"""
유틸리티 모듈 패키지

이 패키지는 프로젝트 전체에서 공통으로 사용되는 유틸리티 함수들을 포함합니다.
"""

from .datetime_utils import (
    DateTimeUtils,
    now,
    for_firestore, from_firestore
)
from .masking import mask_email

__all__ = [
    'DateTimeUtils',
    'now',
    'for_firestore', 'from_firestore',
    'mask_email'
]
