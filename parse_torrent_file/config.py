import os
import dotenv


dotenv.load_dotenv()


# Defaults
DEBUG = False
VERBOSE = False
LOG_PATH = ""
LOG_LEVEL = "DEBUG" if DEBUG else "INFO"
LOG_ROTATION = "1 week"
LOG_RETENTION = "1 month"

# Text encoding assumed when a torrent carries no 'encoding' field
DEFAULT_ENCODING = "UTF-8"


class Config:
    VERBOSE = os.getenv("VERBOSE", str(VERBOSE)).lower() == "true"

    # An empty LOG_PATH disables the file sink
    LOG_PATH = os.getenv("LOG_PATH", LOG_PATH)
    LOG_LEVEL = os.getenv("LOG_LEVEL", LOG_LEVEL)
    LOG_ROTATION = os.getenv("LOG_ROTATION", LOG_ROTATION)
    LOG_RETENTION = os.getenv("LOG_RETENTION", LOG_RETENTION)

    DEFAULT_ENCODING = os.getenv("DEFAULT_ENCODING", DEFAULT_ENCODING)



class TestConfig:
    VERBOSE = False
    LOG_PATH = ""
    LOG_LEVEL = "DEBUG"
