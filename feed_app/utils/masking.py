# feed_app/utils/masking.py
import re

_EMAIL_PATTERN = re.compile(r"([a-zA-Z0-9._%+-]+)@([a-zA-Z0-9.-]+\.[a-zA-Z]{2,})")


def mask_email(value: str) -> str:
    """로그에 남길 이메일의 로컬 파트를 가립니다. (u1@x.com -> ***@x.com)"""
    if not value:
        return ""
    return _EMAIL_PATTERN.sub(r"***@\2", value)
