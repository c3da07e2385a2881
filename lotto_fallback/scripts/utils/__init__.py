from .setup_logging import setup_logging, LOG_FORMAT, LOG_FILE_NAME

__all__ = ['setup_logging', 'LOG_FORMAT', 'LOG_FILE_NAME']
