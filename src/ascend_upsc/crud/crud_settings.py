# src/ascend_upsc/crud/crud_settings.py
from typing import Optional

from sqlalchemy.orm import Session

from ascend_upsc.db.models import AppSetting


def get_app_setting(db: Session, key: str) -> Optional[str]:
    setting = db.query(AppSetting).filter(AppSetting.key == key).first()
    return setting.value if setting else None


def set_app_setting(db: Session, key: str, value: Optional[str]) -> AppSetting:
    """写入或更新一项应用设置"""
    setting = db.query(AppSetting).filter(AppSetting.key == key).first()
    if setting:
        setting.value = value
    else:
        setting = AppSetting(key=key, value=value)
        db.add(setting)
    db.flush()
    return setting
