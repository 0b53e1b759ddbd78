import html
from logging.handlers import RotatingFileHandler
import logging
import requests
from pythonjsonlogger import jsonlogger
from datetime import datetime
import pytz
from app.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def __init__(self, *args, **kwargs):
        kwargs['json_ensure_ascii'] = False
        super().__init__(*args, **kwargs)

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            tz = pytz.timezone(settings.TIMEZONE)
            log_record["timestamp"] = datetime.now(tz).strftime("%Y-%m-%d %H:%M:%S")

        level = log_record.get("level") or record.levelname
        log_record["level"] = level.upper() if level else "NOTSET"


class TelegramHandler(logging.Handler):
    """Отправляет записи уровня ERROR и выше в чат Telegram."""
    def __init__(self, token, chat_id, level=logging.ERROR):
        super().__init__(level)
        self.token = token
        self.chat_id = chat_id

    def emit(self, record):
        log_entry = html.escape(self.format(record))
        try:
            url = f"https://api.telegram.org/bot{self.token}/sendMessage"
            payload = {"chat_id": self.chat_id, "text": log_entry, "parse_mode": "HTML"}
            response = requests.post(url, json=payload, timeout=5)
            response.raise_for_status()
        except requests.RequestException:
            self.handleError(record)


formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(message)s %(module)s %(funcName)s")

streamHandler = logging.StreamHandler()
streamHandler.setFormatter(formatter)

logger = logging.getLogger()
logger.addHandler(streamHandler)

if settings.LOG_FILE:
    fileHandler = RotatingFileHandler(settings.LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=5)
    fileHandler.setFormatter(formatter)
    logger.addHandler(fileHandler)

if settings.TELEGRAM_TOKEN and settings.CHAT_ID:
    telegram_handler = TelegramHandler(token=settings.TELEGRAM_TOKEN, chat_id=settings.CHAT_ID)
    telegram_handler.setFormatter(formatter)
    logger.addHandler(telegram_handler)

logger.setLevel(settings.LOG_LEVEL)
logging.getLogger("httpx").setLevel(logging.WARNING)
