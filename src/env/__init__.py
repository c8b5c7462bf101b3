from env.env import LoggingEnvironment, get_logging_env

__all__ = [
    "LoggingEnvironment",
    "get_logging_env",
]
