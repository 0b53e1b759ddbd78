from datetime import datetime

import pytz

from app.config import settings


def get_current_time() -> datetime:
    """Текущее время в часовом поясе из настроек."""
    return datetime.now(pytz.timezone(settings.TIMEZONE))
