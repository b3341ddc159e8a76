import logging
import os
from logging.handlers import RotatingFileHandler
from weatherflow.core.config import settings

class LoggerConfig:
    """
    Logger configuration class to setup logging for the application.
    """
    def __init__(
        self, env=20, logger_name="WeatherFlow", log_directory="logs", log_file="app.log", to_file=True
    ):
        try:
            self.logger_name = logger_name
            self.log_directory = os.path.abspath(log_directory)
            self.log_file_path = os.path.join(self.log_directory, log_file)
            self.env = env
            self.to_file = to_file
            self.log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
 
            self.logger = logging.getLogger(self.logger_name)
            self.setup_logger()
        except Exception as e:
            print(f"Failed to initialize logger: {str(e)}")
 
    def setup_logger(self):
        try:
            formatter = logging.Formatter(self.log_format)
            handlers = []

            if self.to_file:
                os.makedirs(self.log_directory, exist_ok=True)
                file_handler = RotatingFileHandler(
                    self.log_file_path, backupCount=5, maxBytes=1024 * 1024 * 10, encoding="utf-8"
                )
                handlers.append(file_handler)

            handlers.append(logging.StreamHandler())

            # Avoid adding duplicate handlers if re-initialized
            if not self.logger.hasHandlers():
                for handler in handlers:
                    handler.setLevel(self.env)
                    handler.setFormatter(formatter)
                    self.logger.addHandler(handler)
            
            self.logger.setLevel(self.env)
            
        except Exception as e:
            print(f"Failed to setup logger handlers: {str(e)}")
 
    def log(self, level: int, message: str, extra: dict = None):
        """Simple wrapper to log messages"""
        if extra:
            message = f"{message} | {extra}"
        self.logger.log(level, message)

# Initialize Logger
logs = LoggerConfig(
    env=settings.LOGGER, 
    logger_name="WEATHERFLOW", 
    log_directory=settings.LOG_DIRECTORY, 
    log_file=settings.LOG_FILE,
    to_file=settings.LOG_TO_FILE
)
