from .config import HBaseConfig

__all__ = ["HBaseConfig"]
