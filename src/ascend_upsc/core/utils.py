# src/ascend_upsc/core/utils.py
import datetime


def utcnow() -> datetime.datetime:
    """当前UTC时间（不带时区信息），与数据库中 created_at 等字段的存储格式一致"""
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)
